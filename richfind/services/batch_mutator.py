from __future__ import annotations

import logging
from collections.abc import Iterable

from richfind.domain.interfaces import IDocument
from richfind.domain.models import Replacement

logger = logging.getLogger(__name__)


class BatchMutator:
    """
    Applies many replacements to a document as one atomic change.

    Edits are handed over rightmost first. Each edit shifts every offset after
    its span by `Replacement.delta`, so applying from the end backwards leaves
    the offsets of every edit still waiting in the batch untouched.
    """

    def __init__(self, document: IDocument) -> None:
        self._doc = document

    def apply(self, replacements: Iterable[Replacement]) -> int:
        ordered = sorted(replacements, key=lambda r: r.span.start, reverse=True)
        if not ordered:
            return 0

        # ordered is descending, so each span must end at or before the previous one starts
        for later, earlier in zip(ordered, ordered[1:]):
            if earlier.span.end > later.span.start:
                raise ValueError(
                    f"Overlapping replacement spans: "
                    f"[{earlier.span.start}, {earlier.span.end}) and "
                    f"[{later.span.start}, {later.span.end})"
                )

        # MutationRejected propagates; the document guarantees nothing was applied.
        self._doc.apply_replacements(ordered)
        logger.debug("Applied batch of %d replacement(s)", len(ordered))
        return len(ordered)

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from richfind.domain.models import Match, TextRun

logger = logging.getLogger(__name__)


def _fold(text: str) -> str:
    # Lower-case one character at a time and keep any character whose lower
    # form has a different length, so indices into the result stay offsets.
    out = []
    for ch in text:
        low = ch.lower()
        out.append(low if len(low) == 1 else ch)
    return "".join(out)


def _segments(runs: Iterable[TextRun]) -> list[tuple[int, str]]:
    """Stitch runs with contiguous offsets into (start, text) segments."""
    segments: list[tuple[int, list[str]]] = []
    end = None
    for run in runs:
        if not run.text:
            continue
        if segments and run.start == end:
            segments[-1][1].append(run.text)
        else:
            segments.append((run.start, [run.text]))
        end = run.end
    return [(start, "".join(parts)) for start, parts in segments]


def find_matches(runs: Iterable[TextRun], query: str) -> tuple[Match, ...]:
    """
    Return every case-insensitive, literal occurrence of `query`, ordered by start.

    The scan resumes one character after each hit, so overlapping occurrences
    ("aa" in "aaa") are all reported. A query never matches across an offset
    gap between runs.
    """
    if not query:
        return ()

    needle = _fold(query)
    size = len(query)
    found: list[Match] = []
    for seg_start, seg_text in _segments(runs):
        haystack = _fold(seg_text)
        pos = haystack.find(needle)
        while pos != -1:
            found.append(Match(seg_start + pos, seg_start + pos + size))
            pos = haystack.find(needle, pos + 1)

    found.sort()
    logger.debug("Scan for %r found %d match(es)", query, len(found))
    return tuple(found)


def disjoint_matches(matches: Sequence[Match]) -> tuple[Match, ...]:
    """Greedy left-to-right subset of `matches` with no two spans overlapping."""
    kept: list[Match] = []
    for m in sorted(matches):
        if kept and m.start < kept[-1].end:
            continue
        kept.append(m)
    return tuple(kept)

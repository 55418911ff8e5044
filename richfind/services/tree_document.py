from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, Sequence

from richfind.domain.errors import MutationRejected
from richfind.domain.interfaces import ChangeListener, IObservableDocument
from richfind.domain.models import Node, NodeKind, Replacement, TextRun
from richfind.services.text_extraction import flatten_text, iter_text_nodes, iter_text_runs

logger = logging.getLogger(__name__)


def _prune_empty_text(root: Node) -> None:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.kind is not NodeKind.BLOCK:
            continue
        node.children = [c for c in node.children if not (c.is_text and not c.text)]
        stack.extend(node.children)


def _replace_span(root: Node, edit: Replacement) -> None:
    start, end = edit.span.start, edit.span.end
    length = root.size
    if end > length:
        raise MutationRejected(
            f"Span [{start}, {end}) lies outside the document (length {length})"
        )

    touched = [
        (node, pos) for node, pos in iter_text_nodes(root) if pos < end and pos + len(node.text) > start
    ]
    if any(node.read_only for node, _ in touched):
        raise MutationRejected(f"Span [{start}, {end}) touches a read-only region")

    first, first_pos = touched[0]
    last, last_pos = touched[-1]
    head = first.text[: start - first_pos]
    tail = last.text[end - last_pos :]
    if first is last:
        first.text = head + edit.text + tail
        return

    # Inserted text takes the formatting of the run where the span starts.
    first.text = head + edit.text
    for node, _ in touched[1:-1]:
        node.text = ""
    last.text = tail


class TreeDocument(IObservableDocument):
    """
    In-memory rich-text tree implementing the document port.

    A batch of replacements is applied to a working copy of the tree and only
    swapped in once every edit has succeeded, so readers never observe a
    half-applied batch.
    """

    def __init__(self, root: Node | None = None) -> None:
        self._root = root if root is not None else Node.block("doc")
        self._version = 0
        self._listeners: list[ChangeListener] = []

    @classmethod
    def from_paragraphs(cls, *paragraphs: str) -> TreeDocument:
        return cls(Node.block("doc", *(Node.block("paragraph", Node.text_node(p)) for p in paragraphs)))

    # ---- queries ----

    @property
    def root(self) -> Node:
        return self._root

    @property
    def version(self) -> int:
        """Bumped on every committed change."""
        return self._version

    @property
    def length(self) -> int:
        return self._root.size

    @property
    def text(self) -> str:
        return flatten_text(self._root)

    def iter_text_runs(self) -> Iterator[TextRun]:
        return iter_text_runs(self._root)

    # ---- change notification ----

    def add_listener(self, callback: ChangeListener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: ChangeListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _commit(self, root: Node, *, replaced: bool = False) -> None:
        self._root = root
        self._version += 1
        for cb in list(self._listeners):
            cb(replaced)

    # ---- mutation ----

    def apply_replacements(self, edits: Sequence[Replacement]) -> None:
        """
        Apply `edits` in the order given, each against the document as the
        previous edit left it. Callers that computed every span against the
        unmodified document must therefore pass them rightmost first.
        """
        if not edits:
            return
        work = copy.deepcopy(self._root)
        for edit in edits:
            _replace_span(work, edit)
        _prune_empty_text(work)
        self._commit(work)
        logger.debug("Committed %d edit(s); document version %d", len(edits), self._version)

    def insert_text(self, offset: int, text: str) -> None:
        """Insert plain text at `offset` (an ordinary editing change)."""
        if not 0 <= offset <= self.length:
            raise ValueError(f"Offset {offset} out of range [0, {self.length}]")
        work = copy.deepcopy(self._root)
        # On a run boundary both neighbours hold the offset; take the first writable one.
        holders = [(n, pos) for n, pos in iter_text_nodes(work) if pos <= offset <= pos + len(n.text)]
        if not holders:
            work.children.append(Node.block("paragraph", Node.text_node(text)))
        else:
            writable = [(n, pos) for n, pos in holders if not n.read_only]
            if not writable:
                raise MutationRejected(f"Offset {offset} is inside a read-only region")
            node, pos = writable[0]
            cut = offset - pos
            node.text = node.text[:cut] + text + node.text[cut:]
        self._commit(work)

    def replace_root(self, root: Node) -> None:
        """Swap in a whole new tree (e.g. another file was loaded)."""
        self._commit(root, replaced=True)

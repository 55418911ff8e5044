from __future__ import annotations

from collections.abc import Iterator

from richfind.domain.models import Node, NodeKind, TextRun


def iter_text_nodes(root: Node) -> Iterator[tuple[Node, int]]:
    """
    Walk the tree in document order and yield every TEXT node with its start offset.

    This is the only place that assigns offsets to nodes; extraction and
    mutation both go through it so they always agree on positions.
    LEAF nodes and empty BLOCK nodes are skipped without consuming offsets.
    """
    offset = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node.kind is NodeKind.TEXT:
            yield node, offset
            offset += len(node.text)
        elif node.kind is NodeKind.BLOCK:
            stack.extend(reversed(node.children))


def iter_text_runs(root: Node) -> Iterator[TextRun]:
    for node, start in iter_text_nodes(root):
        if node.text:
            yield TextRun(node.text, start)


def flatten_text(root: Node) -> str:
    return "".join(run.text for run in iter_text_runs(root))

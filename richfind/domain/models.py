from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


class NodeKind(Enum):
    TEXT = "text"
    BLOCK = "block"
    LEAF = "leaf"


@dataclass
class Node:
    """
    One node of a rich-text tree.

    TEXT nodes carry text (and formatting marks), BLOCK nodes carry children,
    LEAF nodes (images, rules) carry neither and occupy no offsets.
    """

    kind: NodeKind
    name: str = ""
    text: str = ""
    marks: frozenset[str] = frozenset()
    read_only: bool = False
    children: list[Node] = field(default_factory=list)

    @classmethod
    def text_node(
        cls, text: str, *, marks: frozenset[str] | set[str] = frozenset(), read_only: bool = False
    ) -> Node:
        return cls(NodeKind.TEXT, name="text", text=text, marks=frozenset(marks), read_only=read_only)

    @classmethod
    def block(cls, name: str, *children: Node) -> Node:
        return cls(NodeKind.BLOCK, name=name, children=list(children))

    @classmethod
    def leaf(cls, name: str) -> Node:
        return cls(NodeKind.LEAF, name=name)

    @property
    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT

    @property
    def size(self) -> int:
        if self.kind is NodeKind.TEXT:
            return len(self.text)
        return sum(child.size for child in self.children)


class TextRun(NamedTuple):
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True, order=True)
class Match:
    """Half-open span [start, end) in the flat offset space."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ValueError(f"Match start must be >= 0, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"Empty or inverted match span: [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def overlaps(self, other: Match) -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class Replacement:
    span: Match
    text: str

    @property
    def delta(self) -> int:
        """Shift applied to every offset after the span once this edit lands."""
        return len(self.text) - len(self.span)


class MatchCount(NamedTuple):
    current: int  # one-based, 0 when there is no current match
    total: int

    def __str__(self) -> str:
        if self.total == 0:
            return "0/0"
        return f"{self.current}/{self.total}"

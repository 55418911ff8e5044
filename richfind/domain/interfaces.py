from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Protocol, runtime_checkable

from richfind.domain.models import Replacement, TextRun

# Called after every committed change; `replaced` is True when the whole
# content was swapped out (another file loaded) rather than edited.
ChangeListener = Callable[[bool], None]


@runtime_checkable
class IDocument(Protocol):
    """Mutable rich-text document addressed by flat text offsets."""

    @property
    def length(self) -> int: ...

    def iter_text_runs(self) -> Iterator[TextRun]:
        """Leaf text runs in document order; restartable and read-only."""
        ...

    def apply_replacements(self, edits: Sequence[Replacement]) -> None:
        """
        Apply every edit, in the order given, as one atomic change.
        Raises MutationRejected (and changes nothing) if any edit is refused.
        """
        ...


@runtime_checkable
class IObservableDocument(IDocument, Protocol):
    """A document that reports its own changes."""

    def add_listener(self, callback: ChangeListener) -> None: ...
    def remove_listener(self, callback: ChangeListener) -> None: ...


@runtime_checkable
class IEditorView(Protocol):
    """Navigation feedback; fire-and-forget."""

    def set_selection(self, start: int, end: int) -> None: ...
    def scroll_into_view(self, start: int, end: int) -> None: ...


class IConfigService(Protocol):
    """Read-only access to INI-style configuration."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...


class IFindConfig(Protocol):
    """Typed find/replace settings."""

    def scroll_into_view(self) -> bool: ...
    def log_level(self) -> str: ...

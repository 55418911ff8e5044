from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from richfind.domain.errors import MutationRejected
from richfind.domain.interfaces import IDocument, IEditorView, IObservableDocument
from richfind.domain.models import Match, MatchCount, Replacement
from richfind.services.batch_mutator import BatchMutator
from richfind.services.match_cursor import MatchCursor
from richfind.services.match_scanner import disjoint_matches, find_matches

logger = logging.getLogger(__name__)


class FindReplaceSession(QObject):
    """Query, replacement text, matches and cursor for one active find/replace panel."""

    matches_changed = pyqtSignal(int, int)  # current (one-based), total
    match_selected = pyqtSignal(int, int)  # start, end
    replaced = pyqtSignal(int)  # number of spans replaced
    replace_failed = pyqtSignal(str)

    def __init__(
        self,
        document: IDocument,
        view: IEditorView | None = None,
        *,
        scroll_into_view: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._doc = document
        self._view = view
        self._scroll = scroll_into_view
        self._cursor = MatchCursor()
        self._query = ""
        self._replacement = ""
        self._stale = False
        self._attach(document)

    # ---- state ----

    @property
    def document(self) -> IDocument:
        return self._doc

    @property
    def query(self) -> str:
        return self._query

    @property
    def replacement(self) -> str:
        return self._replacement

    @property
    def matches(self) -> tuple[Match, ...]:
        return self._cursor.matches

    @property
    def is_stale(self) -> bool:
        return self._stale

    def current(self) -> Match | None:
        return self._cursor.current()

    def get_match_count(self) -> MatchCount:
        return self._cursor.count()

    # ---- inputs ----

    def set_query(self, text: str) -> None:
        self._query = text
        self._rescan()
        self._select(self._cursor.select_first())

    def set_replacement(self, text: str) -> None:
        self._replacement = text

    # ---- navigation ----

    def go_to_next(self) -> Match | None:
        if self._refresh_if_stale():
            # The match that used to be current is gone; the one now at its place is next.
            return self._select(self._cursor.current())
        return self._select(self._cursor.next())

    def go_to_previous(self) -> Match | None:
        self._refresh_if_stale()
        return self._select(self._cursor.previous())

    # ---- replacement ----

    def replace_current(self) -> bool:
        self._refresh_if_stale()
        match = self._cursor.current()
        if match is None:
            return False
        if not self._apply([Replacement(match, self._replacement)]):
            return False

        self._rescan()
        self._select(self._cursor.select_at_or_after(match.start + len(self._replacement)))
        self.replaced.emit(1)
        return True

    def replace_all(self) -> int:
        self._refresh_if_stale()
        spans = disjoint_matches(self._cursor.matches)
        if not spans:
            return 0
        if not self._apply([Replacement(m, self._replacement) for m in spans]):
            return 0

        # The replacement text may itself contain the query, so scan again.
        self._rescan()
        self._select(self._cursor.select_first())
        self.replaced.emit(len(spans))
        return len(spans)

    # ---- lifecycle ----

    def document_changed(self) -> None:
        """The document was edited by someone else; rebuild before the next use."""
        self._stale = True

    def document_replaced(self, document: IDocument) -> None:
        """Another document (or a freshly loaded file) takes over; all state is dropped."""
        if document is not self._doc:
            self._detach(self._doc)
            self._doc = document
            self._attach(document)
        self.deactivate()

    def deactivate(self) -> None:
        self._query = ""
        self._replacement = ""
        self._cursor.reset()
        self._stale = False
        self.matches_changed.emit(0, 0)

    # ---- internals ----

    def _apply(self, edits: list[Replacement]) -> bool:
        try:
            BatchMutator(self._doc).apply(edits)
        except MutationRejected as exc:
            logger.warning("Replacement of %d span(s) rejected: %s", len(edits), exc)
            self._stale = True
            self.replace_failed.emit(str(exc))
            return False
        return True

    def _rescan(self) -> None:
        self._cursor.reset(find_matches(self._doc.iter_text_runs(), self._query))
        self._stale = False

    def _refresh_if_stale(self) -> bool:
        """
        Rescan a stale match set, keeping the cursor near the old current match.
        Returns True when the cursor now sits on a different span than before.
        """
        if not self._stale:
            return False
        anchor = self._cursor.current()
        self._rescan()
        moved = False
        if anchor is not None:
            moved = self._cursor.select_at_or_after(anchor.start) not in (None, anchor)
        count = self._cursor.count()
        self.matches_changed.emit(count.current, count.total)
        return moved

    def _attach(self, document: IDocument) -> None:
        if isinstance(document, IObservableDocument):
            document.add_listener(self._on_document_change)

    def _detach(self, document: IDocument) -> None:
        if isinstance(document, IObservableDocument):
            document.remove_listener(self._on_document_change)

    def _on_document_change(self, replaced: bool) -> None:
        if replaced:
            self.document_replaced(self._doc)
        else:
            self.document_changed()

    def _select(self, match: Match | None) -> Match | None:
        count = self._cursor.count()
        self.matches_changed.emit(count.current, count.total)
        if match is None:
            return None
        if self._view is not None:
            self._view.set_selection(match.start, match.end)
            if self._scroll:
                self._view.scroll_into_view(match.start, match.end)
        self.match_selected.emit(match.start, match.end)
        return match

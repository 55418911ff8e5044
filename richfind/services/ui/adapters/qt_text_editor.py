from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from PyQt6.QtGui import QTextCursor, QTextDocument
from PyQt6.QtWidgets import QTextEdit

from richfind.domain.errors import MutationRejected
from richfind.domain.interfaces import ChangeListener, IEditorView, IObservableDocument
from richfind.domain.models import Replacement, TextRun


class QtTextEditAdapter(IObservableDocument, IEditorView):
    """
    Narrow adapter exposing a QTextEdit as a find/replace document and view.

    Offsets are QTextDocument positions. Every block separator occupies one
    position, so runs from different blocks are never contiguous and a query
    cannot match across a paragraph break.
    """

    def __init__(self, edit: QTextEdit):
        self._e = edit
        self._slots: dict[ChangeListener, Callable[[], None]] = {}

    def document(self) -> QTextDocument:
        return self._e.document()

    @property
    def length(self) -> int:
        # characterCount() includes the final paragraph separator
        return self.document().characterCount() - 1

    def iter_text_runs(self) -> Iterator[TextRun]:
        block = self.document().begin()
        while block.isValid():
            text = block.text()
            if text:
                yield TextRun(text, block.position())
            block = block.next()

    def apply_replacements(self, edits: Sequence[Replacement]) -> None:
        if not edits:
            return
        if self._e.isReadOnly():
            raise MutationRejected("Editor is read-only")
        length = self.length
        for edit in edits:
            if edit.span.end > length:
                raise MutationRejected(
                    f"Span [{edit.span.start}, {edit.span.end}) lies outside the document (length {length})"
                )

        # One edit block: a single undo step and a single contentsChanged.
        cur = QTextCursor(self.document())
        cur.beginEditBlock()
        try:
            for edit in edits:
                cur.setPosition(edit.span.start)
                cur.setPosition(edit.span.end, QTextCursor.MoveMode.KeepAnchor)
                cur.insertText(edit.text)
        finally:
            cur.endEditBlock()

    def add_listener(self, callback: ChangeListener) -> None:
        # QTextDocument cannot tell a load from an edit; every change is an edit here.
        slot = lambda: callback(False)  # noqa: E731
        self._slots[callback] = slot
        self.document().contentsChanged.connect(slot)

    def remove_listener(self, callback: ChangeListener) -> None:
        slot = self._slots.pop(callback, None)
        if slot is not None:
            self.document().contentsChanged.disconnect(slot)

    def set_selection(self, start: int, end: int) -> None:
        c = self._e.textCursor()
        c.setPosition(start)
        c.setPosition(end, QTextCursor.MoveMode.KeepAnchor)
        self._e.setTextCursor(c)

    def scroll_into_view(self, start: int, end: int) -> None:
        self._e.ensureCursorVisible()

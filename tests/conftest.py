from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from richfind.domain.models import Node  # noqa: E402
from richfind.services.find_session import FindReplaceSession  # noqa: E402
from richfind.services.tree_document import TreeDocument  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt widgets.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


class RecordingView:
    """Editor view fake that remembers every selection and scroll request."""

    def __init__(self) -> None:
        self.selections: list[tuple[int, int]] = []
        self.scrolls: list[tuple[int, int]] = []

    def set_selection(self, start: int, end: int) -> None:
        self.selections.append((start, end))

    def scroll_into_view(self, start: int, end: int) -> None:
        self.scrolls.append((start, end))


# --- Common fixtures ---


@pytest.fixture()
def cat_doc() -> TreeDocument:
    """'The cat sat on the mat.' split over differently formatted runs."""
    return TreeDocument(
        Node.block(
            "doc",
            Node.block(
                "paragraph",
                Node.text_node("The c"),
                Node.text_node("at sat", marks={"bold"}),
                Node.leaf("image"),
                Node.text_node(" on the mat."),
            ),
        )
    )


@pytest.fixture()
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture()
def session(cat_doc: TreeDocument, view: RecordingView) -> FindReplaceSession:
    return FindReplaceSession(cat_doc, view)

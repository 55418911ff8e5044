from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtWidgets import QTextEdit

from richfind.di.container import Container
from richfind.domain.models import Match, Node
from richfind.services.config.find_config import FindConfig
from richfind.services.find_session import FindReplaceSession
from richfind.services.tree_document import TreeDocument
from richfind.services.ui.adapters.qt_text_editor import QtTextEditAdapter


class StubIni:
    def __init__(self, values: dict[tuple[str, str], str]) -> None:
        self._values = values

    def get(self, section, key, default=None):
        return self._values.get((section, key), default)

    def get_bool(self, section, key, default=None):
        raw = self._values.get((section, key))
        return default if raw is None else raw == "true"


def _config(tmp_path: Path, **values: str) -> FindConfig:
    pairs = {tuple(k.split("__")): v for k, v in values.items()}
    return FindConfig(ini=StubIni(pairs))


def test_container_applies_log_level(tmp_path):
    Container(config=_config(tmp_path, logging__level="DEBUG"))
    assert logging.getLogger("richfind").level == logging.DEBUG
    Container(config=_config(tmp_path))
    assert logging.getLogger("richfind").level == logging.WARNING


def test_build_session_tracks_external_edits(tmp_path):
    doc = TreeDocument.from_paragraphs("one two one")
    session = Container(config=_config(tmp_path)).build_session(doc)
    assert isinstance(session, FindReplaceSession)

    session.set_query("one")
    assert not session.is_stale
    doc.insert_text(0, "one ")
    assert session.is_stale
    session.go_to_next()
    assert len(session.matches) == 3


def test_build_session_honours_scroll_setting(tmp_path):
    class View:
        def __init__(self):
            self.scrolls = []

        def set_selection(self, start, end):
            pass

        def scroll_into_view(self, start, end):
            self.scrolls.append((start, end))

    view = View()
    cfg = _config(tmp_path, find__scroll_into_view="false")
    session = Container(config=cfg).build_session(TreeDocument.from_paragraphs("abc"), view)
    session.set_query("b")
    assert view.scrolls == []


def test_build_editor_session_drives_qtextedit(qapp, tmp_path):
    edit = QTextEdit()
    edit.setPlainText("foo bar foo")
    session = Container(config=_config(tmp_path)).build_editor_session(edit)

    session.set_query("FOO")
    assert session.matches == (Match(0, 3), Match(8, 11))
    assert edit.textCursor().selectedText() == "foo"

    session.set_replacement("baz")
    assert session.replace_all() == 2
    assert edit.toPlainText() == "baz bar baz"

    edit.setPlainText("foo")
    assert session.is_stale


def test_built_session_resets_when_document_is_reloaded(tmp_path):
    doc = TreeDocument.from_paragraphs("The cat sat.")
    session = Container(config=_config(tmp_path)).build_session(doc)
    counts = []
    session.matches_changed.connect(lambda cur, total: counts.append((cur, total)))

    session.set_query("at")
    session.set_replacement("XX")
    doc.replace_root(Node.block("doc", Node.block("paragraph", Node.text_node("Another file"))))

    assert session.query == ""
    assert session.replacement == ""
    assert session.matches == ()
    assert counts[-1] == (0, 0)


def test_built_session_follows_swapped_document(tmp_path):
    old = TreeDocument.from_paragraphs("one")
    session = Container(config=_config(tmp_path)).build_session(old)
    other = TreeDocument.from_paragraphs("one two")
    session.document_replaced(other)
    session.set_query("two")

    old.insert_text(0, "two ")
    assert not session.is_stale

    other.insert_text(0, "xx ")
    assert session.is_stale
    assert session.go_to_next() == Match(7, 10)


def test_editor_session_detaches_from_previous_editor(qapp, tmp_path):
    first = QTextEdit()
    first.setPlainText("foo")
    session = Container(config=_config(tmp_path)).build_editor_session(first)
    session.set_query("foo")

    second = QTextEdit()
    second.setPlainText("bar foo")
    adapter = QtTextEditAdapter(second)
    session.document_replaced(adapter)
    session.set_query("foo")
    assert session.matches == (Match(4, 7),)

    first.setPlainText("foo foo")
    assert not session.is_stale

    second.setPlainText("foo bar foo")
    assert session.is_stale

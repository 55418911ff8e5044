from __future__ import annotations

import logging

from PyQt6.QtWidgets import QTextEdit

from richfind.domain.interfaces import IDocument, IEditorView, IFindConfig
from richfind.services.config.find_config import build_find_config
from richfind.services.find_session import FindReplaceSession
from richfind.services.ui.adapters.qt_text_editor import QtTextEditAdapter
from richfind.utils.constants import ROOT_LOGGER


class Container:
    """
    Lightweight DI container:
      - Loads configuration if not provided
      - Applies the configured log level to the package logger
      - Builds find/replace sessions bound to a document (and optional view)
    """

    def __init__(self, config: IFindConfig | None = None) -> None:
        self.config: IFindConfig = config or build_find_config()
        logging.getLogger(ROOT_LOGGER).setLevel(self.config.log_level())

    # ---------- Session factories ----------

    def build_session(
        self, document: IDocument, view: IEditorView | None = None
    ) -> FindReplaceSession:
        # The session subscribes to observable documents itself, so edits,
        # reloads and later document swaps are all tracked from here on.
        return FindReplaceSession(
            document,
            view,
            scroll_into_view=self.config.scroll_into_view(),
        )

    def build_editor_session(self, edit: QTextEdit) -> FindReplaceSession:
        """Session driving a QTextEdit; the adapter serves as both document and view."""
        adapter = QtTextEditAdapter(edit)
        return self.build_session(adapter, adapter)

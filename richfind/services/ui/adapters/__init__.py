from .qt_text_editor import QtTextEditAdapter

__all__ = ["QtTextEditAdapter"]

"""Domain layer: document model, collaborator ports and errors."""

from .errors import MutationRejected
from .interfaces import (
    ChangeListener,
    IConfigService,
    IDocument,
    IEditorView,
    IFindConfig,
    IObservableDocument,
)
from .models import Match, MatchCount, Node, NodeKind, Replacement, TextRun

__all__ = [
    "ChangeListener",
    "IConfigService",
    "IDocument",
    "IEditorView",
    "IFindConfig",
    "IObservableDocument",
    "Match",
    "MatchCount",
    "MutationRejected",
    "Node",
    "NodeKind",
    "Replacement",
    "TextRun",
]

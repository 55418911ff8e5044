"""Find/replace engine: extraction, scanning, navigation, batched mutation and session state."""

from .batch_mutator import BatchMutator
from .find_session import FindReplaceSession
from .match_cursor import MatchCursor
from .match_scanner import disjoint_matches, find_matches
from .text_extraction import flatten_text, iter_text_nodes, iter_text_runs
from .tree_document import TreeDocument

__all__ = [
    "BatchMutator",
    "FindReplaceSession",
    "MatchCursor",
    "TreeDocument",
    "disjoint_matches",
    "find_matches",
    "flatten_text",
    "iter_text_nodes",
    "iter_text_runs",
]

from __future__ import annotations


class MutationRejected(Exception):
    """The document refused a batch of replacements; nothing was applied."""

from __future__ import annotations

from collections.abc import Sequence

from richfind.domain.models import Match, MatchCount


class MatchCursor:
    """
    Ordered matches plus a current index that wraps in both directions.

    The index is None when there are no matches or nothing has been
    selected yet; otherwise it is always a valid index.
    """

    def __init__(self, matches: Sequence[Match] = ()) -> None:
        self._matches: tuple[Match, ...] = tuple(matches)
        self._index: int | None = None

    @property
    def matches(self) -> tuple[Match, ...]:
        return self._matches

    @property
    def index(self) -> int | None:
        return self._index

    def __len__(self) -> int:
        return len(self._matches)

    def reset(self, matches: Sequence[Match] = ()) -> None:
        self._matches = tuple(matches)
        self._index = None

    def select_first(self) -> Match | None:
        self._index = 0 if self._matches else None
        return self.current()

    def select_at_or_after(self, offset: int) -> Match | None:
        """Select the first match starting at or after `offset`, wrapping to the first."""
        if not self._matches:
            self._index = None
            return None
        for i, m in enumerate(self._matches):
            if m.start >= offset:
                self._index = i
                break
        else:
            self._index = 0
        return self.current()

    def next(self) -> Match | None:
        if not self._matches:
            return None
        i = -1 if self._index is None else self._index
        self._index = (i + 1) % len(self._matches)
        return self.current()

    def previous(self) -> Match | None:
        if not self._matches:
            return None
        n = len(self._matches)
        i = 0 if self._index is None else self._index
        self._index = (i - 1 + n) % n
        return self.current()

    def current(self) -> Match | None:
        if self._index is None:
            return None
        return self._matches[self._index]

    def count(self) -> MatchCount:
        if self._index is None:
            return MatchCount(0, len(self._matches))
        return MatchCount(self._index + 1, len(self._matches))

"""Bounded, linear undo/redo history of layout snapshots."""

from __future__ import annotations

import logging
from typing import Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_CAPACITY = 100

T = TypeVar("T")


class HistoryStack(Generic[T]):
    """Snapshots plus a cursor pointing at the entry that matches current state.

    The cursor is -1 only before the first checkpoint. Recording after an undo
    discards the redo branch; recording past capacity evicts the oldest entry
    and shifts the cursor so it keeps pointing at the same logical entry.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self._capacity = capacity
        self._entries: List[T] = []
        self._cursor = -1

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def current(self) -> Optional[T]:
        if self._cursor < 0:
            return None
        return self._entries[self._cursor]

    def checkpoint(self, snapshot: T) -> None:
        if self._cursor < len(self._entries) - 1:
            dropped = len(self._entries) - 1 - self._cursor
            del self._entries[self._cursor + 1:]
            logger.debug("Discarded %d redo entries", dropped)
        self._entries.append(snapshot)
        self._cursor = len(self._entries) - 1
        if len(self._entries) > self._capacity:
            self._entries.pop(0)
            self._cursor -= 1
        logger.debug("Checkpoint %d/%d", self._cursor + 1, len(self._entries))

    def undo(self) -> Optional[T]:
        """Step back one entry and return it, or None at the oldest entry."""
        if self._cursor <= 0:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def redo(self) -> Optional[T]:
        """Step forward one entry and return it, or None at the newest entry."""
        if self._cursor >= len(self._entries) - 1:
            return None
        self._cursor += 1
        return self._entries[self._cursor]


__all__ = ["DEFAULT_HISTORY_CAPACITY", "HistoryStack"]

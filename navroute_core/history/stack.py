"""Navigation History - Stack of visited entries.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from navroute_core.errors import EmptyHistoryError
from navroute_core.history.entry import HistoryEntry

logger = logging.getLogger(__name__)


class NavigationHistory:
    """Ordered stack of history entries.

    Entries are only appended to and removed from the tail. Reading
    ``current`` on an empty stack raises EmptyHistoryError.
    """

    def __init__(self, separator: str = " -> "):
        self._entries: List[HistoryEntry] = []
        self.separator = separator

    def push(self, entry: HistoryEntry) -> None:
        self._entries.append(entry)
        logger.debug(f"History push: {entry.raw_input} (depth={len(self._entries)})")

    def pop(self) -> Optional[HistoryEntry]:
        """Remove and return the tail entry, or None if empty."""
        if not self._entries:
            return None
        entry = self._entries.pop()
        logger.debug(f"History pop: {entry.raw_input} (depth={len(self._entries)})")
        return entry

    def replace_last(self, entry: HistoryEntry) -> Optional[HistoryEntry]:
        """Swap the tail entry; on an empty stack this is a push."""
        replaced = self._entries.pop() if self._entries else None
        self._entries.append(entry)
        logger.debug(f"History replace: {entry.raw_input}")
        return replaced

    def clear(self) -> None:
        self._entries.clear()
        logger.debug("History cleared")

    @property
    def current(self) -> HistoryEntry:
        """The most recent entry."""
        if not self._entries:
            raise EmptyHistoryError()
        return self._entries[-1]

    def peek(self) -> Optional[HistoryEntry]:
        """The most recent entry, or None if empty."""
        return self._entries[-1] if self._entries else None

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def entries(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def get_last_visited_subroute(self, base_path: str) -> Optional[str]:
        """Most recent raw input nested under base_path."""
        prefix = f"{base_path}/"
        for entry in reversed(self._entries):
            if entry.raw_input.startswith(prefix):
                return entry.raw_input
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return self.separator.join(entry.raw_input for entry in self._entries)

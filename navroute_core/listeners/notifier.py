"""Route Notifier - Path-scoped change listeners.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Selection rules for one notification:

    listen_to_all            always called
    prefix-scoped            called when the new raw input starts with the
                             prefix and no other scoped listener has a
                             longer prefix that also matches

Two scoped listeners whose matching prefixes have the same length are
both called. Listeners run in registration order against a snapshot
taken when the notification starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

from navroute_core.history.entry import HistoryEntry

logger = logging.getLogger(__name__)


class RouteChangeType(Enum):
    """Kind of history transition."""

    PUSH = auto()
    POP = auto()
    REPLACE = auto()


RouteChangeCallback = Callable[
    [Optional[HistoryEntry], Optional[HistoryEntry], RouteChangeType], None
]


@dataclass(eq=False)
class RouteListener:
    """A callback scoped to a path prefix."""

    prefix: str
    callback: RouteChangeCallback
    listen_to_all: bool = False

    def accepts(self, path: str) -> bool:
        return path.startswith(self.prefix)


def select_listeners(
    listeners: List[RouteListener],
    new_entry: Optional[HistoryEntry],
) -> List[RouteListener]:
    """Pick the listeners that see a transition to new_entry.

    An absent new entry only reaches listen_to_all registrations.
    """
    if new_entry is None:
        return [listener for listener in listeners if listener.listen_to_all]

    path = new_entry.raw_input
    matching = [
        listener
        for listener in listeners
        if not listener.listen_to_all and listener.accepts(path)
    ]
    longest = max((len(listener.prefix) for listener in matching), default=0)

    selected = []
    for listener in listeners:
        if listener.listen_to_all:
            selected.append(listener)
        elif listener.accepts(path) and len(listener.prefix) == longest:
            selected.append(listener)
    return selected


class RouteNotifier:
    """Holds listeners and dispatches history changes.

    Usage:
        notifier = RouteNotifier()
        notifier.add_listener("/home", on_home)
        notifier.add_listener("/", on_any, listen_to_all=True)
        notifier.notify(new_entry, old_entry, RouteChangeType.PUSH)
    """

    def __init__(self, isolate_errors: bool = False):
        self._listeners: List[RouteListener] = []
        self.isolate_errors = isolate_errors

    def add_listener(
        self,
        prefix: str,
        callback: RouteChangeCallback,
        listen_to_all: bool = False,
    ) -> RouteListener:
        """Register a listener. Existing listeners on the prefix are kept."""
        listener = RouteListener(prefix, callback, listen_to_all)
        self._listeners.append(listener)
        logger.info(f"Added listener on {prefix!r} (listen_to_all={listen_to_all})")
        return listener

    def remove_listener(self, prefix: str) -> int:
        """Remove every listener registered on exactly this prefix."""
        before = len(self._listeners)
        self._listeners = [
            listener for listener in self._listeners if listener.prefix != prefix
        ]
        removed = before - len(self._listeners)
        logger.info(f"Removed {removed} listener(s) on {prefix!r}")
        return removed

    def get_listeners(self) -> List[RouteListener]:
        return self._listeners.copy()

    def notify(
        self,
        new_entry: Optional[HistoryEntry],
        old_entry: Optional[HistoryEntry],
        change: RouteChangeType,
    ) -> int:
        """Dispatch a change to the selected listeners.

        Returns:
            Number of listeners called
        """
        selected = select_listeners(self._listeners.copy(), new_entry)

        for listener in selected:
            if not self.isolate_errors:
                listener.callback(new_entry, old_entry, change)
                continue
            try:
                listener.callback(new_entry, old_entry, change)
            except Exception as e:
                logger.error(f"Listener error on {listener.prefix!r}: {e}")

        return len(selected)

    def __len__(self) -> int:
        return len(self._listeners)


__all__ = [
    "RouteChangeType",
    "RouteChangeCallback",
    "RouteListener",
    "RouteNotifier",
    "select_listeners",
]

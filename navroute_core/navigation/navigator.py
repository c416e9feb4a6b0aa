"""Navigator - Route registry, history and listeners in one owner.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

from navroute_core.history.entry import HistoryEntry
from navroute_core.history.stack import NavigationHistory
from navroute_core.listeners.notifier import (
    RouteChangeCallback,
    RouteChangeType,
    RouteListener,
    RouteNotifier,
)
from navroute_core.navigation import derive
from navroute_core.routing.matcher import MatchResult, RouteRegistry
from navroute_core.utils.config import NavigatorConfig, configure_logging, load_config

logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    """Whether a navigation input resolved to a route."""

    MATCHED = auto()
    UNMATCHED = auto()


@dataclass(frozen=True)
class NavigationOutcome:
    """Result of push or replace_last."""

    kind: OutcomeKind
    raw_input: str
    entry: Optional[HistoryEntry] = None

    @property
    def matched(self) -> bool:
        return self.kind is OutcomeKind.MATCHED

    @classmethod
    def resolved(cls, entry: HistoryEntry) -> "NavigationOutcome":
        return cls(OutcomeKind.MATCHED, entry.raw_input, entry)

    @classmethod
    def unmatched(cls, raw_input: str) -> "NavigationOutcome":
        return cls(OutcomeKind.UNMATCHED, raw_input)


class Navigator:
    """In-app navigation router.

    Features:
    - Route patterns with parameters (/user/:id) and wildcards (/settings/*)
    - First-registered-wins matching
    - Query parameter parsing
    - Navigation history (push, pop, replace)
    - Prefix-scoped change listeners, most specific prefix wins

    Usage:
        nav = Navigator()
        nav.register_route("/home")
        nav.register_route("/user/:id")
        nav.add_listener("/user", on_user_change)

        nav.push("/user/42?tab=posts")
        nav.current.path_parameters   # {"id": "42"}
        nav.pop()

    Pushing or replacing with an input that matches no route leaves the
    history untouched but still notifies listeners, with the same entry
    as both new and old.
    """

    def __init__(self, config: Optional[NavigatorConfig] = None):
        self.config = config or NavigatorConfig()
        self._registry = RouteRegistry()
        self._history = NavigationHistory(separator=self.config.history_separator)
        self._notifier = RouteNotifier(isolate_errors=self.config.isolate_listener_errors)
        self.register_routes(self.config.routes)

    @classmethod
    def from_config_file(
        cls,
        path: Optional[str] = None,
        env_prefix: str = "NAVROUTE_",
    ) -> "Navigator":
        """Create a navigator from a config file and environment.

        A configured log_level is applied to the process-wide
        navroute_core logger.
        """
        config = load_config(path, env_prefix)
        configure_logging(config)
        return cls(config)

    # Registration

    def register_route(self, pattern: str) -> "Navigator":
        """Register a route pattern."""
        self._registry.add_route(pattern)
        return self

    def register_routes(self, patterns: Iterable[str]) -> "Navigator":
        """Register several patterns in order."""
        for pattern in patterns:
            self._registry.add_route(pattern)
        return self

    @property
    def routes(self) -> List[str]:
        return self._registry.patterns

    # Matching

    def match_route(self, raw: str) -> Optional[MatchResult]:
        return self._registry.match_route(raw)

    def is_registered(self, raw: str) -> bool:
        return self._registry.is_registered(raw)

    # Navigation

    def _resolve(self, raw: str) -> NavigationOutcome:
        match = self._registry.match_route(raw)
        if match is None:
            logger.debug(f"Navigation to unregistered path: {raw}")
            return NavigationOutcome.unmatched(raw)
        return NavigationOutcome.resolved(HistoryEntry.from_match(raw, match))

    def push(self, raw: str) -> NavigationOutcome:
        """Push a path onto the history."""
        old = self._history.peek()
        outcome = self._resolve(raw)
        if outcome.matched:
            self._history.push(outcome.entry)
        self._notifier.notify(self._history.peek(), old, RouteChangeType.PUSH)
        return outcome

    def pop(self) -> Optional[HistoryEntry]:
        """Pop the current entry.

        Returns:
            The removed entry, or None if the history was empty
        """
        old = self._history.peek()
        removed = self._history.pop()
        new = self._history.peek()
        if new is not old:
            self._notifier.notify(new, old, RouteChangeType.POP)
        return removed

    def replace_last(self, raw: str) -> NavigationOutcome:
        """Replace the current entry with a path."""
        old = self._history.peek()
        outcome = self._resolve(raw)
        if outcome.matched:
            self._history.replace_last(outcome.entry)
        self._notifier.notify(self._history.peek(), old, RouteChangeType.REPLACE)
        return outcome

    def clear_history(self) -> None:
        """Empty the history without notifying."""
        self._history.clear()

    @property
    def current(self) -> HistoryEntry:
        """The current entry. Raises EmptyHistoryError if there is none."""
        return self._history.current

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return self._history.entries

    # Listeners

    def add_listener(
        self,
        prefix: str,
        callback: RouteChangeCallback,
        listen_to_all: bool = False,
    ) -> RouteListener:
        """Add a route change listener.

        The callback receives (new_entry, old_entry, change_type).
        """
        return self._notifier.add_listener(prefix, callback, listen_to_all)

    def remove_listener(self, prefix: str) -> int:
        """Remove every listener registered on prefix."""
        return self._notifier.remove_listener(prefix)

    # Introspection

    def get_routes_from(self, base_path: str) -> List[str]:
        return derive.routes_from(self._registry.patterns, base_path)

    def get_sub_routes_from(self, base_path: str) -> List[str]:
        return derive.sub_routes_from(self._registry.patterns, base_path)

    def get_routes_from_current(self) -> List[str]:
        """Parent and siblings of the current route."""
        return derive.routes_from_current(
            self._registry.patterns, self._history.current.raw_input
        )

    def get_sub_routes_from_current(self) -> List[str]:
        """Children of the current route, or its siblings if it has none."""
        return derive.sub_routes_from_current(
            self._registry.patterns, self._history.current.raw_input
        )

    def get_last_visited_subroute(self, base_path: str) -> Optional[str]:
        return self._history.get_last_visited_subroute(base_path)

    def get_history_debug(self) -> str:
        return str(self._history)


__all__ = [
    "Navigator",
    "NavigationOutcome",
    "OutcomeKind",
]

"""Route Registry - Ordered pattern registry and matcher.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional

from navroute_core.routing.pattern import RoutePattern
from navroute_core.utils.helpers import split_input, split_segments

logger = logging.getLogger(__name__)


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class MatchResult:
    """Result of a successful route match."""

    matched_pattern: RoutePattern
    clean_path: str
    path_parameters: Mapping[str, str] = field(default_factory=dict)
    query_parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "path_parameters", _freeze(self.path_parameters))
        object.__setattr__(self, "query_parameters", _freeze(self.query_parameters))

    def __hash__(self) -> int:
        return hash((
            self.matched_pattern,
            self.clean_path,
            frozenset(self.path_parameters.items()),
            frozenset(self.query_parameters.items()),
        ))

    @property
    def pattern(self) -> str:
        """The registration string of the matched pattern."""
        return self.matched_pattern.pattern

    def __str__(self) -> str:
        return (
            f"MatchResult(pattern: {self.pattern}, clean_path: {self.clean_path}, "
            f"path_parameters: {dict(self.path_parameters)}, "
            f"query_parameters: {dict(self.query_parameters)})"
        )


class RouteRegistry:
    """Route registry.

    Patterns are evaluated in registration order and the first one that
    matches wins, even when a later pattern is more specific:

        registry = RouteRegistry()
        registry.add_route("/user/:id")
        registry.add_route("/user/settings")

        registry.match_route("/user/settings").pattern  # "/user/:id"
    """

    def __init__(self):
        self._routes: List[RoutePattern] = []

    def add_route(self, pattern: str) -> RoutePattern:
        """Parse and append a pattern. Duplicates are kept."""
        route = RoutePattern(pattern)
        self._routes.append(route)
        logger.debug(f"Registered route: {pattern}")
        return route

    def match_route(self, raw: str) -> Optional[MatchResult]:
        """Match an input against the registered patterns.

        Returns:
            MatchResult for the first matching pattern, None otherwise
        """
        clean_path, query = split_input(raw)
        path_segments = split_segments(clean_path)

        for route in self._routes:
            if route.matches(path_segments):
                logger.debug(f"Matched {raw} -> {route.pattern}")
                return MatchResult(
                    matched_pattern=route,
                    clean_path=clean_path,
                    path_parameters=route.extract_parameters(path_segments),
                    query_parameters=query,
                )

        logger.debug(f"No route matches {raw}")
        return None

    def is_registered(self, raw: str) -> bool:
        """Check if any pattern matches the input."""
        return self.match_route(raw) is not None

    def get_routes(self) -> List[RoutePattern]:
        """Get all patterns in registration order."""
        return self._routes.copy()

    @property
    def patterns(self) -> List[str]:
        """Registration strings in registration order."""
        return [route.pattern for route in self._routes]

    def __len__(self) -> int:
        return len(self._routes)


__all__ = [
    "MatchResult",
    "RouteRegistry",
]

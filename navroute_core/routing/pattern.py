"""Route Pattern - Parsed route registration strings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from navroute_core.utils.helpers import split_segments


@dataclass(frozen=True)
class PathSegment:
    """A single segment of a route pattern.

    Literal: ``profile`` (is_param=False)
    Param:   ``:id``     (is_param=True, name="id")
    """

    value: str
    is_param: bool = False

    @property
    def name(self) -> Optional[str]:
        """Parameter name without the leading colon."""
        if self.is_param:
            return self.value[1:]
        return None

    @classmethod
    def parse(cls, value: str) -> "PathSegment":
        return cls(value=value, is_param=value.startswith(":"))


@dataclass(eq=False)
class RoutePattern:
    """Route pattern definition.

    Supports:
    - Literal segments: /profile/edit
    - Path parameters: /user/:id
    - Wildcard suffix: /settings/*

    Patterns compare by identity, so registering the same string twice
    yields two distinct patterns.
    """

    pattern: str
    segments: Tuple[PathSegment, ...] = field(init=False)
    is_wildcard: bool = field(init=False)

    def __post_init__(self):
        self.segments = tuple(PathSegment.parse(s) for s in split_segments(self.pattern))
        self.is_wildcard = "*" in self.pattern

    @property
    def param_names(self) -> List[str]:
        """Names of the parameters in segment order."""
        return [s.name for s in self.segments if s.is_param]

    def matches(self, path_segments: Sequence[str]) -> bool:
        """Check if the path segments match this pattern."""
        if self.is_wildcard:
            return self._matches_prefix(path_segments)
        return self._matches_exactly(path_segments)

    def _matches_prefix(self, path_segments: Sequence[str]) -> bool:
        # Every segment before the wildcard compares literally; a param
        # segment here only matches the same ":name" text.
        if len(path_segments) < len(self.segments):
            return False
        for segment, value in zip(self.segments, path_segments):
            if segment.value != value:
                return False
        return True

    def _matches_exactly(self, path_segments: Sequence[str]) -> bool:
        if len(path_segments) != len(self.segments):
            return False
        for segment, value in zip(self.segments, path_segments):
            if segment.is_param:
                if not value:
                    return False
            elif segment.value != value:
                return False
        return True

    def extract_parameters(self, path_segments: Sequence[str]) -> Dict[str, str]:
        """Capture the value at each param position.

        Only meaningful for segments this pattern already matched.
        """
        params: Dict[str, str] = {}
        for segment, value in zip(self.segments, path_segments):
            if segment.is_param:
                params[segment.name] = value
        return params

    def __str__(self) -> str:
        return self.pattern


__all__ = [
    "PathSegment",
    "RoutePattern",
]

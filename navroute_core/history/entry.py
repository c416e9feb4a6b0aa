"""History Entry - One resolved navigation step.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from navroute_core.routing.matcher import MatchResult


@dataclass(frozen=True)
class HistoryEntry:
    """A navigation step retained on the history stack.

    Example for pattern ``/user/:id`` and input ``/user/7?tab=posts``:
        raw_input        "/user/7?tab=posts"
        pattern          "/user/:id"
        clean_path       "/user/7"
        path_parameters  {"id": "7"}
        query_parameters {"tab": "posts"}
    """

    raw_input: str
    pattern: str
    clean_path: str
    path_parameters: Mapping[str, str] = field(default_factory=dict)
    query_parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "path_parameters", MappingProxyType(dict(self.path_parameters))
        )
        object.__setattr__(
            self, "query_parameters", MappingProxyType(dict(self.query_parameters))
        )

    def __hash__(self) -> int:
        return hash((
            self.raw_input,
            self.pattern,
            self.clean_path,
            frozenset(self.path_parameters.items()),
            frozenset(self.query_parameters.items()),
        ))

    @classmethod
    def from_match(cls, raw_input: str, match: MatchResult) -> "HistoryEntry":
        """Build an entry from the match produced for raw_input."""
        return cls(
            raw_input=raw_input,
            pattern=match.pattern,
            clean_path=match.clean_path,
            path_parameters=match.path_parameters,
            query_parameters=match.query_parameters,
        )

    def __str__(self) -> str:
        return (
            f"HistoryEntry(pattern: {self.pattern}, "
            f"path_parameters: {dict(self.path_parameters)}, "
            f"query_parameters: {dict(self.query_parameters)}, "
            f"raw_input: {self.raw_input}, clean_path: {self.clean_path})"
        )

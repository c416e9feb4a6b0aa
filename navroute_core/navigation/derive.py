"""Route subset derivation over registered pattern strings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

All functions return pattern strings in registration order with
duplicates collapsed.
"""

from __future__ import annotations

from typing import Iterable, List

from navroute_core.utils.helpers import parent_path, trim_trailing_slash


def _unique(patterns: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(patterns))


def routes_from(patterns: Iterable[str], base_path: str) -> List[str]:
    """Patterns equal to base_path or nested under it.

    ``routes_from(p, "/")`` returns every pattern with a leading slash.
    """
    base = trim_trailing_slash(base_path) + "/"
    return _unique(p for p in patterns if f"{p}/".startswith(base))


def sub_routes_from(patterns: Iterable[str], base_path: str) -> List[str]:
    """Patterns strictly nested under base_path."""
    base = f"{base_path}/"
    return _unique(p for p in patterns if p.startswith(base) and p != base_path)


def routes_from_current(patterns: Iterable[str], current_path: str) -> List[str]:
    """Sibling view for the current raw path.

    Top-level paths (at most one slash) yield just themselves. Nested
    paths yield the parent and everything under it, except that the
    current path alone is returned when it is the only route under the
    parent, or when it shares a non-root parent with exactly one other
    route.
    """
    if current_path.count("/") <= 1:
        return [current_path]

    parent = parent_path(current_path)
    from_parent = routes_from(patterns, parent)

    if from_parent == [current_path]:
        return [current_path]

    prefix = f"{parent}/"
    relevant = [p for p in from_parent if p == parent or p.startswith(prefix)]

    if current_path in relevant and len(relevant) == 2 and parent != "/":
        return [current_path]

    return relevant


def sub_routes_from_current(patterns: Iterable[str], current_path: str) -> List[str]:
    """Children of the current path, falling back to its siblings."""
    patterns = list(patterns)
    children = sub_routes_from(patterns, current_path)
    if not children and "/" in current_path:
        return sub_routes_from(patterns, parent_path(current_path))
    return children


__all__ = [
    "routes_from",
    "sub_routes_from",
    "routes_from_current",
    "sub_routes_from_current",
]

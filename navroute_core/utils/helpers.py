"""Helper utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Dict, List, Tuple
from urllib.parse import parse_qsl, urlsplit


def split_segments(path: str) -> List[str]:
    """Split a path into non-empty segments, dropping the wildcard marker."""
    return [segment for segment in path.split("/") if segment and segment != "*"]


def split_input(raw: str) -> Tuple[str, Dict[str, str]]:
    """Split a navigation input into its clean path and query parameters.

    Keys and values are percent-decoded. The last occurrence of a
    duplicated key wins and any fragment is discarded.
    """
    parsed = urlsplit(raw)
    query = dict(parse_qsl(parsed.query, keep_blank_values=True))
    return parsed.path, query


def trim_trailing_slash(path: str) -> str:
    """Remove a single trailing slash."""
    if path.endswith("/"):
        return path[:-1]
    return path


def parent_path(path: str) -> str:
    """Return everything before the last slash."""
    return path[: path.rfind("/")]


__all__ = [
    "split_segments",
    "split_input",
    "trim_trailing_slash",
    "parent_path",
]

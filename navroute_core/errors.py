"""Navigation errors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

A failed match is not an error: matching returns None and navigation
returns an UNMATCHED outcome. Only contract violations raise.
"""


class NavRouteError(Exception):
    """Base class for navigation errors."""


class EmptyHistoryError(NavRouteError):
    """Raised when the current entry is read from an empty history."""

    def __init__(self, message: str = "Navigation history is empty"):
        super().__init__(message)


__all__ = [
    "NavRouteError",
    "EmptyHistoryError",
]

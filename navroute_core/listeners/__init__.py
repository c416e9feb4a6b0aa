"""Listeners module - Route change notification."""

from navroute_core.listeners.notifier import (
    RouteChangeType,
    RouteListener,
    RouteNotifier,
    select_listeners,
)

__all__ = [
    "RouteChangeType",
    "RouteListener",
    "RouteNotifier",
    "select_listeners",
]

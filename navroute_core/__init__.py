"""NavRoute - In-app navigation routing.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

NavRoute resolves application navigation paths against registered route
patterns and keeps a navigation history with change listeners:
- Route patterns with path parameters and wildcard suffixes
- Query parameter parsing
- Push / pop / replace history stack
- Prefix-scoped listeners, most specific prefix wins
- Parent, sibling and child route lookup

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────┐
│                             Navigator                                │
├─────────────────────────────────────────────────────────────────────┤
│                                                                      │
│   push / replace ──▶ RouteRegistry ──▶ NavigationHistory ──▶ Notify  │
│                                                                      │
│  ┌────────────────┐  ┌────────────────┐  ┌────────────────────────┐ │
│  │    Routing     │  │    History     │  │       Listeners        │ │
│  │                │  │                │  │                        │ │
│  │ - RoutePattern │  │ - HistoryEntry │  │ - Prefix scoping       │ │
│  │ - First match  │  │ - Stack        │  │ - Specificity          │ │
│  │ - Query params │  │ - Debug trace  │  │ - listen_to_all        │ │
│  └────────────────┘  └────────────────┘  └────────────────────────┘ │
│                                                                      │
└─────────────────────────────────────────────────────────────────────┘

Usage:
    from navroute_core import Navigator

    nav = Navigator()
    nav.register_route("/home")
    nav.register_route("/user/:id")

    nav.add_listener("/user", lambda new, old, kind: print(new.raw_input))
    nav.push("/user/42?tab=posts")

    nav.current.path_parameters   # {"id": "42"}
    nav.current.query_parameters  # {"tab": "posts"}
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Errors
from navroute_core.errors import EmptyHistoryError, NavRouteError

# Routing
from navroute_core.routing.pattern import PathSegment, RoutePattern
from navroute_core.routing.matcher import MatchResult, RouteRegistry

# History
from navroute_core.history.entry import HistoryEntry
from navroute_core.history.stack import NavigationHistory

# Listeners
from navroute_core.listeners.notifier import (
    RouteChangeType,
    RouteListener,
    RouteNotifier,
)

# Navigation
from navroute_core.navigation.navigator import (
    NavigationOutcome,
    Navigator,
    OutcomeKind,
)

# Utils
from navroute_core.utils.config import NavigatorConfig, load_config

__all__ = [
    # Version
    "__version__",
    # Errors
    "NavRouteError",
    "EmptyHistoryError",
    # Routing
    "PathSegment",
    "RoutePattern",
    "MatchResult",
    "RouteRegistry",
    # History
    "HistoryEntry",
    "NavigationHistory",
    # Listeners
    "RouteChangeType",
    "RouteListener",
    "RouteNotifier",
    # Navigation
    "Navigator",
    "NavigationOutcome",
    "OutcomeKind",
    # Utils
    "NavigatorConfig",
    "load_config",
]

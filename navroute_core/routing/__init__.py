"""Routing module - Route patterns and matching."""

from navroute_core.routing.pattern import PathSegment, RoutePattern
from navroute_core.routing.matcher import MatchResult, RouteRegistry

__all__ = [
    "PathSegment",
    "RoutePattern",
    "MatchResult",
    "RouteRegistry",
]

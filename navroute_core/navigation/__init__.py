"""Navigation module - Navigator and route subset derivation."""

from navroute_core.navigation.derive import (
    routes_from,
    routes_from_current,
    sub_routes_from,
    sub_routes_from_current,
)
from navroute_core.navigation.navigator import (
    NavigationOutcome,
    Navigator,
    OutcomeKind,
)

__all__ = [
    "Navigator",
    "NavigationOutcome",
    "OutcomeKind",
    "routes_from",
    "routes_from_current",
    "sub_routes_from",
    "sub_routes_from_current",
]

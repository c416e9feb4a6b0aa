"""History module - Navigation stack."""

from navroute_core.history.entry import HistoryEntry
from navroute_core.history.stack import NavigationHistory

__all__ = [
    "HistoryEntry",
    "NavigationHistory",
]

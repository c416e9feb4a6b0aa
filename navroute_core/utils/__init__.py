"""Utilities module."""

from navroute_core.utils.config import NavigatorConfig, configure_logging, load_config
from navroute_core.utils.helpers import (
    parent_path,
    split_input,
    split_segments,
    trim_trailing_slash,
)

__all__ = [
    "NavigatorConfig",
    "configure_logging",
    "load_config",
    "parent_path",
    "split_input",
    "split_segments",
    "trim_trailing_slash",
]

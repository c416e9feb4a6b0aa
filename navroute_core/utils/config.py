"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="NavigatorConfig")


@dataclass
class NavigatorConfig:
    """Navigator configuration."""

    # Patterns registered at construction, in order
    routes: List[str] = field(default_factory=list)

    # Debug trace
    history_separator: str = " -> "

    # Listener dispatch
    isolate_listener_errors: bool = False

    # Logging (empty leaves the package logger untouched)
    log_level: str = ""

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        if isinstance(filtered.get("routes"), str):
            filtered["routes"] = [r for r in filtered["routes"].split(",") if r]
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    @classmethod
    def read_env(cls, prefix: str = "NAVROUTE_") -> Dict[str, Any]:
        """Collect the config keys present in the environment.

        ``NAVROUTE_ROUTES`` is a comma-separated list of patterns.
        """
        data = {}

        for key, value in os.environ.items():
            if key.startswith(prefix):
                config_key = key[len(prefix):].lower()

                if value.lower() in ("true", "false"):
                    data[config_key] = value.lower() == "true"
                else:
                    data[config_key] = value

        return data

    @classmethod
    def from_env(cls: Type[T], prefix: str = "NAVROUTE_") -> T:
        """Load config from environment variables."""
        return cls.from_dict(cls.read_env(prefix))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {}
        for field_name in self.__dataclass_fields__:
            result[field_name] = getattr(self, field_name)
        return result

    def merge(self, overrides: Dict[str, Any]) -> "NavigatorConfig":
        """Return a copy with every key in overrides applied."""
        data = self.to_dict()
        data.update(overrides)
        return NavigatorConfig.from_dict(data)

    @property
    def log_level_value(self) -> Optional[int]:
        """Numeric level for log_level, None when unset or unknown."""
        if not self.log_level:
            return None
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            logger.warning(f"Unknown log level: {self.log_level}")
            return None
        return level


def configure_logging(config: NavigatorConfig) -> None:
    """Apply config.log_level to the navroute_core logger.

    The package logger is process-wide, so this affects every navigator.
    Unknown levels are reported and ignored.
    """
    level = config.log_level_value
    if level is not None:
        logging.getLogger("navroute_core").setLevel(level)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "NAVROUTE_",
) -> NavigatorConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = NavigatorConfig()

    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = NavigatorConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = NavigatorConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    return config.merge(NavigatorConfig.read_env(env_prefix))


__all__ = [
    "NavigatorConfig",
    "configure_logging",
    "load_config",
]

"""
Runtime Configuration

Central configuration for suite selection and logging.

Can be loaded from:
- Environment variables (SCHNORR_* prefix, .env supported)
- JSON file
- Programmatic construction
"""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from sigcore.groups import DEFAULT_GROUP, get_registry
from sigcore.schemas.errors import ConfigException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "SCHNORR_"

DEFAULT_CONFIG_PATHS = [
    Path("schnorr.json"),
    Path(".schnorr.json"),
    Path.home() / ".config" / "schnorr" / "config.json",
]

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.
    """
    group: str = DEFAULT_GROUP
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def validate(self) -> "RuntimeConfig":
        """
        Check that the suite is registered and the log level is known.

        Raises:
            ConfigException: On an unknown group or log level
        """
        if self.group not in get_registry():
            raise ConfigException(
                f"Unknown group in configuration: {self.group!r}",
                details={"group": self.group, "available": get_registry().names()},
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigException(
                f"Unknown log level: {self.log_level!r}",
                details={"log_level": self.log_level},
            )
        self.log_level = self.log_level.upper()
        return self

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SCHNORR_GROUP: Group suite name (default: ed25519)
        - SCHNORR_LOG_LEVEL: Log level (default: INFO)
        - SCHNORR_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}
        if os.getenv(f"{ENV_PREFIX}GROUP"):
            overrides["group"] = os.getenv(f"{ENV_PREFIX}GROUP")
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration from environment variables only."""
        return cls(**cls._get_env_overrides()).validate()

    @classmethod
    def from_file(cls, path: Path) -> "RuntimeConfig":
        """
        Load configuration from a JSON file.

        Raises:
            ConfigException: If the file is missing or not valid JSON
        """
        if not path.exists():
            raise ConfigException(f"Config file not found: {path}")
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigException(f"Invalid JSON in config file {path}: {e}") from e

        config = cls()
        config.group = data.get("group", config.group)
        config.log_level = data.get("log_level", config.log_level)
        config.log_file = data.get("log_file", config.log_file)
        return config.validate()


def load_config(config_path: Optional[Path] = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    # Start with defaults
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                config = RuntimeConfig.from_file(default_path)
                break

    # Override with environment variables
    for key, value in RuntimeConfig._get_env_overrides().items():
        setattr(config, key, value)

    return config.validate()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return json.dumps(
        {
            "group": DEFAULT_GROUP,
            "log_level": "INFO",
            "log_file": None,
        },
        indent=2,
    ) + "\n"

"""
Runtime Configuration Module

Provides configuration loading for suite selection and logging.
"""

from .runtime import (
    ENV_PREFIX,
    RuntimeConfig,
    get_default_config_template,
    load_config,
)

__all__ = [
    "ENV_PREFIX",
    "RuntimeConfig",
    "get_default_config_template",
    "load_config",
]

"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .fix import (
    DEFAULT_CONSTRAINTS_FILENAME,
    DEFAULT_INSTALL_COMMAND,
    MANIFEST_FILENAME,
    FixConfig,
    get_fix_config,
)
from .logging import configure_logging, resolve_log_level

__all__ = [
    "DEFAULT_CONSTRAINTS_FILENAME",
    "DEFAULT_INSTALL_COMMAND",
    "MANIFEST_FILENAME",
    "ConfigurationError",
    "FixConfig",
    "configure_logging",
    "get_fix_config",
    "optional_env_var",
    "resolve_log_level",
]

"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env_var(name: str, default: str) -> str:
    """Return ``name`` from the environment, ``default`` when unset.

    A variable that is set but blank is rejected rather than silently replaced
    by the default.
    """

    value = os.getenv(name)
    if value is None:
        return default
    if not value.strip():
        raise ConfigurationError(f"Configuration value for {name} is blank")
    return value.strip()

"""Shared logging helpers for constraintfix."""

from __future__ import annotations

import logging

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV = "CONSTRAINTFIX_LOG_LEVEL"


def resolve_log_level(default: int = logging.WARNING) -> int:
    """Return the level named by ``CONSTRAINTFIX_LOG_LEVEL`` (e.g. ``DEBUG``)."""

    name = optional_env_var(LOG_LEVEL_ENV, logging.getLevelName(default)).upper()
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigurationError(f"Unknown log level for {LOG_LEVEL_ENV}: {name}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Prompts and diagnostics are written to the command's output stream, not
    through logging, so the default level stays at WARNING to keep interactive
    sessions readable. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=resolve_log_level() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )

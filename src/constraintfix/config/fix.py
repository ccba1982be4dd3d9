"""Settings for the ``constraints fix`` command."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_INSTALL_COMMAND: Final[tuple[str, ...]] = ("yarn", "install")
DEFAULT_CONSTRAINTS_FILENAME: Final[str] = "constraints.json"
MANIFEST_FILENAME: Final[str] = "package.json"


@dataclass(frozen=True, slots=True)
class FixConfig:
    """Holds the collaborators' configuration for one fix run."""

    install_command: tuple[str, ...] = DEFAULT_INSTALL_COMMAND
    constraints_filename: str = DEFAULT_CONSTRAINTS_FILENAME
    manifest_filename: str = MANIFEST_FILENAME

    def constraints_path(self, project_cwd: Path) -> Path:
        path = Path(self.constraints_filename).expanduser()
        if path.is_absolute():
            return path
        return project_cwd / path


def _parse_command(value: str) -> tuple[str, ...]:
    try:
        parts = tuple(shlex.split(value))
    except ValueError as exc:
        raise ConfigurationError(f"Invalid install command: {value!r}") from exc
    if not parts:
        raise ConfigurationError("Install command must not be empty")
    return parts


def get_fix_config() -> FixConfig:
    command = optional_env_var(
        "CONSTRAINTFIX_INSTALL_COMMAND", shlex.join(DEFAULT_INSTALL_COMMAND)
    )
    constraints_filename = optional_env_var(
        "CONSTRAINTFIX_CONSTRAINTS_FILE", DEFAULT_CONSTRAINTS_FILENAME
    )
    return FixConfig(
        install_command=_parse_command(command),
        constraints_filename=constraints_filename,
    )

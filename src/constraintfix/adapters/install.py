"""Install orchestrator running the package manager in a subprocess."""

from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from constraintfix.config import DEFAULT_INSTALL_COMMAND
from constraintfix.domain.ports.reporting import MessageName

from .report import StreamReport

if TYPE_CHECKING:
    from typing import TextIO

    from constraintfix.domain.model import Project

log = getLogger(__name__)


@dataclass(slots=True)
class SubprocessInstaller:
    """Run ``command`` in the project root and relay its output line by line."""

    output: TextIO
    command: tuple[str, ...] = DEFAULT_INSTALL_COMMAND

    def install(self, project: Project) -> int:
        log.info("Running %s in %s", shlex.join(self.command), project.cwd)
        try:
            with subprocess.Popen(  # noqa: S603
                self.command,
                cwd=project.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            ) as process:
                if process.stdout is not None:
                    for line in process.stdout:
                        self.output.write(line)
                returncode = process.wait()
        except OSError as exc:
            with StreamReport.start(self.output) as report:
                report.report_error(
                    MessageName.INSTALL_COMMAND_FAILED,
                    f"Could not run {shlex.join(self.command)}: {exc}",
                )
            return report.exit_code()

        self.output.flush()
        if returncode != 0:
            log.warning("Install command exited with status %s", returncode)
        return returncode

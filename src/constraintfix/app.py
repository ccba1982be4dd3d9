"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from constraintfix.adapters.evaluator import RuleFileEvaluator
from constraintfix.adapters.install import SubprocessInstaller
from constraintfix.adapters.manifest import JsonManifestStore, find_project
from constraintfix.adapters.prompt import StreamPrompt
from constraintfix.adapters.report import StreamReporterFactory
from constraintfix.config import get_fix_config
from constraintfix.domain.constraints import fix_constraints

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO

    from constraintfix.config import FixConfig
    from constraintfix.domain.ports import (
        ConfirmationChannel,
        ConstraintEvaluator,
        InstallOrchestrator,
        ManifestStore,
        ReporterFactory,
    )


log = getLogger(__name__)


def fix_project_constraints(
    *,
    cwd: Path,
    stdin: TextIO,
    stdout: TextIO,
    config: FixConfig | None = None,
    evaluator: ConstraintEvaluator | None = None,
    confirm: ConfirmationChannel | None = None,
    store: ManifestStore | None = None,
    reporter_factory: ReporterFactory | None = None,
    installer: InstallOrchestrator | None = None,
) -> int:
    """Run ``constraints fix`` for the project containing ``cwd``.

    Collaborators default to the bundled adapters built from ``config``; tests
    pass their own fakes instead.
    """

    effective_config = config or get_fix_config()
    project = find_project(cwd, filename=effective_config.manifest_filename)
    effective_evaluator = evaluator or RuleFileEvaluator(
        effective_config.constraints_path(project.cwd)
    )

    result = effective_evaluator.evaluate(project)
    log.info(
        "Evaluated constraints for %s: enforced=%d, invalid=%d",
        project.cwd,
        len(result.enforced_dependency_ranges),
        len(result.invalid_dependencies),
    )

    return fix_constraints(
        result,
        project,
        confirm=confirm or StreamPrompt(input=stdin, output=stdout),
        store=store or JsonManifestStore(filename=effective_config.manifest_filename),
        reporter_factory=reporter_factory or StreamReporterFactory(output=stdout),
        installer=installer
        or SubprocessInstaller(output=stdout, command=effective_config.install_command),
        output=stdout,
    )

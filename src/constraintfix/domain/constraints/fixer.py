"""Orchestrator turning a constraint evaluation into confirmed manifest edits.

A run has three passes, driven by a single evaluation snapshot:

1. range enforcement: plan the edits for each enforced-range entry, ask for
   confirmation one edit at a time, apply the confirmed ones, then persist the
   workspace (even when nothing changed);
2. unfixable violations: report every invalid dependency that is still
   declared and return the report's status, whatever happened in pass 1;
3. install: only when there were no invalid dependencies and pass 1 changed
   at least one manifest.

Nothing is rolled back: workspaces persisted in pass 1 keep their edits even
when a later pass fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from constraintfix.domain.ports.reporting import MessageName

from .apply import ApplyResult, apply_edit
from .plan import plan_enforcement

if TYPE_CHECKING:
    from typing import TextIO

    from constraintfix.domain.model import Project
    from constraintfix.domain.ports import (
        ConfirmationChannel,
        InstallOrchestrator,
        ManifestStore,
        ReporterFactory,
    )

    from .plan import ProposedEdit
    from .result import EnforcedDependencyRange, EvaluationResult, InvalidDependency

log = getLogger(__name__)

EXIT_SUCCESS = 0


@dataclass(slots=True)
class ConstraintFixer:
    """Reconcile workspace manifests with an :class:`EvaluationResult`."""

    confirm: ConfirmationChannel
    store: ManifestStore
    reporter_factory: ReporterFactory
    installer: InstallOrchestrator
    output: TextIO

    def fix(self, result: EvaluationResult, project: Project) -> int:
        """Run all passes for ``result`` and return the process exit status."""

        apply_result = self.enforce_ranges(result.enforced_dependency_ranges)
        log.debug(
            "Range pass finished: replaced=%s, removed=%s, rejected=%s",
            apply_result.replaced,
            apply_result.removed,
            apply_result.rejected,
        )

        if result.invalid_dependencies:
            if apply_result.modified:
                self.output.write("\n")
            return self.report_invalid(result.invalid_dependencies)

        if apply_result.modified:
            self.output.write("\n")
            log.info("Manifests changed, running install in %s", project.cwd)
            status = self.installer.install(project)
            log.info("Install finished with status %s", status)
            return status

        return EXIT_SUCCESS

    def enforce_ranges(self, entries: tuple[EnforcedDependencyRange, ...]) -> ApplyResult:
        apply_result = ApplyResult()
        for entry in entries:
            for edit in self._confirmed(plan_enforcement(entry), apply_result):
                apply_edit(edit, apply_result)
                log.info(
                    "Applied %s of %s in %s", edit.kind, edit.current, edit.workspace.pretty()
                )
            # TODO: persist once per workspace after the loop if no caller relies
            # on the per-entry writes.
            log.debug("Persisting manifest of %s", entry.workspace.pretty())
            self.store.persist(entry.workspace)
        return apply_result

    def report_invalid(self, invalid_dependencies: tuple[InvalidDependency, ...]) -> int:
        with self.reporter_factory() as report:
            for invalid in invalid_dependencies:
                if not _still_declared(invalid):
                    log.debug(
                        "Skipping %s in %s: no longer declared",
                        invalid.dependency_ident,
                        invalid.workspace.pretty(),
                    )
                    continue
                report.report_error(
                    MessageName.CONSTRAINTS_INVALID_DEPENDENCY,
                    f"{invalid.workspace.pretty()} has an unfixable invalid dependency on "
                    f"{invalid.dependency_ident.pretty()} in {invalid.dependency_type} "
                    f"(invalid because {invalid.reason})",
                )
        return report.exit_code()

    def _confirmed(
        self, edits: list[ProposedEdit], apply_result: ApplyResult
    ) -> list[ProposedEdit]:
        confirmed: list[ProposedEdit] = []
        for edit in edits:
            if self.confirm.ask(edit.message):
                confirmed.append(edit)
            else:
                apply_result.rejected += 1
                log.debug("Rejected %s of %s", edit.kind, edit.current)
        return confirmed


def _still_declared(invalid: InvalidDependency) -> bool:
    manifest = invalid.workspace.manifest
    return manifest.find(invalid.dependency_type, invalid.dependency_ident) is not None


def fix_constraints(
    result: EvaluationResult,
    project: Project,
    *,
    confirm: ConfirmationChannel,
    store: ManifestStore,
    reporter_factory: ReporterFactory,
    installer: InstallOrchestrator,
    output: TextIO,
) -> int:
    """Functional shorthand for :meth:`ConstraintFixer.fix`."""

    fixer = ConstraintFixer(
        confirm=confirm,
        store=store,
        reporter_factory=reporter_factory,
        installer=installer,
        output=output,
    )
    return fixer.fix(result, project)

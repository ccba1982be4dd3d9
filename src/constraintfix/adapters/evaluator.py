"""Constraint evaluator backed by a declarative JSON rule file.

The rule file lists enforced ranges and invalid dependencies per workspace::

    {
      "enforced": [
        {"workspace": "*", "dependency": "left-pad", "type": "dependencies", "range": "^1.0.0"}
      ],
      "invalid": [
        {"workspace": "pkg-b", "dependency": "lodash", "reason": "banned package"}
      ]
    }

``workspace`` is a workspace name, a path relative to the project root, or
``*`` for every workspace. A ``null`` range means the dependency must not be
declared. Rules only yield violations for workspaces that declare the
dependency under the given type.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from constraintfix.domain.constraints.result import (
    EnforcedDependencyRange,
    EvaluationResult,
    InvalidDependency,
)
from constraintfix.domain.model import DependencyType, InvalidIdentError, parse_ident

if TYPE_CHECKING:
    from pathlib import Path

    from constraintfix.domain.model import Ident, Project, Workspace

log = getLogger(__name__)

ALL_WORKSPACES = "*"


class ConstraintsFileError(RuntimeError):
    """Raised when the rule file cannot be read or is malformed."""


class _Rule(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    workspace: str = ALL_WORKSPACES
    dependency: str
    dependency_type: DependencyType = Field(default=DependencyType.DEPENDENCIES, alias="type")


class EnforcedRangeRule(_Rule):
    range: str | None


class InvalidDependencyRule(_Rule):
    reason: str


class ConstraintsFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enforced: list[EnforcedRangeRule] = Field(default_factory=list)
    invalid: list[InvalidDependencyRule] = Field(default_factory=list)


def load_constraints_file(path: Path) -> ConstraintsFile:
    """Load ``path``; a missing file means no constraints."""

    if not path.is_file():
        log.info("No constraints file at %s", path)
        return ConstraintsFile()
    try:
        return ConstraintsFile.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except json.JSONDecodeError as exc:
        raise ConstraintsFileError(f"Constraints file {path} is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise ConstraintsFileError(f"Invalid constraints file {path}: {exc}") from exc


def _select_workspaces(project: Project, selector: str) -> list[Workspace]:
    if selector == ALL_WORKSPACES:
        return list(project.workspaces)
    workspace = project.workspace_by_name(selector) or project.workspace_by_path(selector)
    if workspace is None:
        raise ConstraintsFileError(f"Unknown workspace in constraints file: {selector}")
    return [workspace]


def _rule_ident(rule: _Rule) -> Ident:
    try:
        return parse_ident(rule.dependency)
    except InvalidIdentError as exc:
        raise ConstraintsFileError(str(exc)) from exc


@dataclass(slots=True)
class RuleFileEvaluator:
    path: Path

    def evaluate(self, project: Project) -> EvaluationResult:
        rules = load_constraints_file(self.path)
        enforced: list[EnforcedDependencyRange] = []
        invalid: list[InvalidDependency] = []

        for enforced_rule in rules.enforced:
            ident = _rule_ident(enforced_rule)
            for workspace in _select_workspaces(project, enforced_rule.workspace):
                if workspace.manifest.find(enforced_rule.dependency_type, ident) is None:
                    continue
                enforced.append(
                    EnforcedDependencyRange(
                        workspace=workspace,
                        dependency_ident=ident,
                        dependency_range=enforced_rule.range,
                        dependency_type=enforced_rule.dependency_type,
                    )
                )

        for invalid_rule in rules.invalid:
            ident = _rule_ident(invalid_rule)
            for workspace in _select_workspaces(project, invalid_rule.workspace):
                if workspace.manifest.find(invalid_rule.dependency_type, ident) is None:
                    continue
                invalid.append(
                    InvalidDependency(
                        workspace=workspace,
                        dependency_ident=ident,
                        dependency_type=invalid_rule.dependency_type,
                        reason=invalid_rule.reason,
                    )
                )

        log.debug(
            "Evaluated %s: %d enforced range(s), %d invalid dependencies",
            self.path,
            len(enforced),
            len(invalid),
        )
        return EvaluationResult(
            enforced_dependency_ranges=tuple(enforced),
            invalid_dependencies=tuple(invalid),
        )

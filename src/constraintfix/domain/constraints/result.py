"""Constraint evaluation output consumed by the fixer.

An evaluation yields two ordered sequences: dependencies whose range is
enforced (and may therefore be fixed) and dependencies that are invalid with
no proposed remediation. The result is created once per run and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from constraintfix.domain.model import DependencyType, Ident, Workspace


@dataclass(frozen=True, slots=True, kw_only=True)
class EnforcedDependencyRange:
    """``dependency_range=None`` means the dependency must not be declared at all."""

    workspace: Workspace
    dependency_ident: Ident
    dependency_range: str | None
    dependency_type: DependencyType


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidDependency:
    workspace: Workspace
    dependency_ident: Ident
    dependency_type: DependencyType
    reason: str


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Snapshot of every constraint violation found in a project."""

    enforced_dependency_ranges: tuple[EnforcedDependencyRange, ...] = ()
    invalid_dependencies: tuple[InvalidDependency, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.enforced_dependency_ranges and not self.invalid_dependencies

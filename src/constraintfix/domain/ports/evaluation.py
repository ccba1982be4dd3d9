"""Port for evaluating project constraints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from constraintfix.domain.constraints.result import EvaluationResult
    from constraintfix.domain.model import Project


@runtime_checkable
class ConstraintEvaluator(Protocol):
    """Produce the constraint violations of a project."""

    def evaluate(self, project: Project) -> EvaluationResult: ...


__all__ = ["ConstraintEvaluator"]

"""Constraint reconciliation core.

Flow for one ``constraints fix`` run:
1) the evaluator produces an :class:`EvaluationResult`
2) each enforced range is planned into :class:`ProposedEdit` values
3) every edit is confirmed or rejected by the user
4) confirmed edits are applied and the workspace is persisted
5) unfixable violations are reported, or an install is run
"""

from __future__ import annotations

from .apply import ApplyResult, apply_edit
from .fixer import EXIT_SUCCESS, ConstraintFixer, fix_constraints
from .plan import EditKind, ProposedEdit, plan_enforcement
from .result import EnforcedDependencyRange, EvaluationResult, InvalidDependency

__all__ = [
    "EXIT_SUCCESS",
    "ApplyResult",
    "ConstraintFixer",
    "EditKind",
    "EnforcedDependencyRange",
    "EvaluationResult",
    "InvalidDependency",
    "ProposedEdit",
    "apply_edit",
    "fix_constraints",
    "plan_enforcement",
]

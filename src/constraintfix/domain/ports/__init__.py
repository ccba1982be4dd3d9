"""Domain port definitions for adapters."""

from __future__ import annotations

from .evaluation import ConstraintEvaluator
from .installing import InstallOrchestrator
from .persistence import ManifestStore
from .prompting import ConfirmationChannel
from .reporting import DiagnosticsReporter, MessageName, ReporterFactory

__all__ = [
    "ConfirmationChannel",
    "ConstraintEvaluator",
    "DiagnosticsReporter",
    "InstallOrchestrator",
    "ManifestStore",
    "MessageName",
    "ReporterFactory",
]

"""Port for re-running the package manager install."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from constraintfix.domain.model import Project


@runtime_checkable
class InstallOrchestrator(Protocol):
    """Run a full dependency install and return its exit status."""

    def install(self, project: Project) -> int: ...


__all__ = ["InstallOrchestrator"]

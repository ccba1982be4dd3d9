"""In-memory manifest mutation for confirmed edits.

This stage never touches disk; persisting the mutated workspace is the job of
the manifest store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .plan import ProposedEdit


@dataclass(slots=True)
class ApplyResult:
    """Summary of the edits decided during one run."""

    replaced: int = 0
    removed: int = 0
    rejected: int = 0

    @property
    def applied(self) -> int:
        return self.replaced + self.removed

    @property
    def modified(self) -> bool:
        return self.applied > 0


def apply_edit(edit: ProposedEdit, result: ApplyResult) -> None:
    """Apply one confirmed edit to its workspace manifest."""

    manifest = edit.workspace.manifest
    if edit.replacement is None:
        manifest.remove(edit.dependency_type, edit.current.ident)
        result.removed += 1
        return

    manifest.replace(edit.dependency_type, edit.replacement)
    result.replaced += 1

"""Edit planning for enforced dependency ranges.

Planning is read-only: it inspects the current manifest state and returns the
edits that would make one enforced-range entry hold, each with the question
the user is asked before it is applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from constraintfix.domain.model import DependencyType, Descriptor, Workspace

    from .result import EnforcedDependencyRange


class EditKind(StrEnum):
    REPLACE = "replace"
    REMOVE = "remove"


@dataclass(frozen=True, slots=True, kw_only=True)
class ProposedEdit:
    """A candidate manifest change awaiting confirmation."""

    workspace: Workspace
    dependency_type: DependencyType
    current: Descriptor
    replacement: Descriptor | None = None

    def __post_init__(self) -> None:
        if self.replacement is not None and self.replacement.ident != self.current.ident:
            raise ValueError("replacement must keep the ident of the current descriptor")

    @property
    def kind(self) -> EditKind:
        return EditKind.REMOVE if self.replacement is None else EditKind.REPLACE

    @property
    def message(self) -> str:
        workspace = self.workspace.pretty()
        if self.replacement is None:
            return f"{workspace}: Remove {self.current.pretty()} from the {self.dependency_type}?"
        return (
            f"{workspace}: Change {self.current.ident.pretty()} in {self.dependency_type} "
            f"into {self.replacement.range}?"
        )


def plan_enforcement(entry: EnforcedDependencyRange) -> list[ProposedEdit]:
    """Return the edits needed for ``entry`` given the workspace's current manifest."""

    existing = entry.workspace.manifest.matching(entry.dependency_type, entry.dependency_ident)
    enforced_range = entry.dependency_range

    if enforced_range is None:
        return [
            ProposedEdit(
                workspace=entry.workspace,
                dependency_type=entry.dependency_type,
                current=descriptor,
            )
            for descriptor in existing
        ]

    return [
        ProposedEdit(
            workspace=entry.workspace,
            dependency_type=entry.dependency_type,
            current=descriptor,
            replacement=descriptor.with_range(enforced_range),
        )
        for descriptor in existing
        if descriptor.range != enforced_range
    ]

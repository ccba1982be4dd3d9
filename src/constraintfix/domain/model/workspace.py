"""Workspace, manifest and project aggregates.

A manifest keeps one ordered mapping per :class:`DependencyType`. Keys are
:class:`Ident` values and are unique within a block; changing the range of a
dependency always goes through :meth:`Manifest.replace`, which deletes the old
entry before inserting the new descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from .enums import DependencyType
from .identity import WORKSPACE_PROTOCOL, Descriptor, Ident, Locator

if TYPE_CHECKING:
    from pathlib import Path

DependencyMap: TypeAlias = dict[Ident, Descriptor]

DEFAULT_INDENT = "  "


def _empty_blocks() -> dict[DependencyType, DependencyMap]:
    return {dependency_type: {} for dependency_type in DependencyType}


@dataclass(slots=True, kw_only=True)
class Manifest:
    """In-memory view of a workspace's ``package.json``."""

    name: Ident | None = None
    version: str | None = None
    workspaces: tuple[str, ...] = ()
    dependencies: dict[DependencyType, DependencyMap] = field(default_factory=_empty_blocks)
    # Source document in its original key order; dependency blocks in it are
    # stale once edits are applied and are rebuilt on write.
    raw: dict[str, object] = field(default_factory=dict[str, object])
    indent: str = DEFAULT_INDENT

    def __post_init__(self) -> None:
        for dependency_type in DependencyType:
            self.dependencies.setdefault(dependency_type, {})

    def dependencies_of(self, dependency_type: DependencyType) -> DependencyMap:
        return self.dependencies[dependency_type]

    def find(self, dependency_type: DependencyType, ident: Ident) -> Descriptor | None:
        return self.dependencies[dependency_type].get(ident)

    def matching(self, dependency_type: DependencyType, ident: Ident) -> list[Descriptor]:
        """Return every descriptor of ``dependency_type`` declared for ``ident``."""

        return [
            descriptor
            for descriptor in self.dependencies[dependency_type].values()
            if descriptor.ident == ident
        ]

    def add(self, dependency_type: DependencyType, descriptor: Descriptor) -> None:
        block = self.dependencies[dependency_type]
        if descriptor.ident in block:
            raise ValueError(
                f"{descriptor.ident.pretty()} is already declared in {dependency_type}"
            )
        block[descriptor.ident] = descriptor

    def remove(self, dependency_type: DependencyType, ident: Ident) -> Descriptor:
        block = self.dependencies[dependency_type]
        if ident not in block:
            raise KeyError(f"{ident.pretty()} is not declared in {dependency_type}")
        return block.pop(ident)

    def replace(self, dependency_type: DependencyType, descriptor: Descriptor) -> Descriptor:
        """Swap the declared descriptor for ``descriptor.ident`` and return the old one."""

        previous = self.remove(dependency_type, descriptor.ident)
        self.add(dependency_type, descriptor)
        return previous


@dataclass(eq=False, slots=True, kw_only=True)
class Workspace:
    """One member package of a project.

    Workspaces compare by identity: two instances loaded from the same folder
    are still different workspaces for the duration of a run.
    """

    cwd: Path
    relative_cwd: str
    manifest: Manifest

    @property
    def ident(self) -> Ident:
        if self.manifest.name is not None:
            return self.manifest.name
        return Ident(name=self.cwd.name or "root-workspace")

    @property
    def locator(self) -> Locator:
        return Locator(ident=self.ident, reference=f"{WORKSPACE_PROTOCOL}{self.relative_cwd}")

    def pretty(self) -> str:
        return self.locator.pretty()


@dataclass(slots=True, kw_only=True)
class Project:
    """A project root and its workspaces, top-level workspace first."""

    cwd: Path
    workspaces: list[Workspace] = field(default_factory=list[Workspace])

    @property
    def top_level_workspace(self) -> Workspace:
        if not self.workspaces:
            raise LookupError(f"Project at {self.cwd} has no workspaces")
        return self.workspaces[0]

    def workspace_by_name(self, name: str) -> Workspace | None:
        for workspace in self.workspaces:
            if workspace.ident.pretty() == name:
                return workspace
        return None

    def workspace_by_path(self, relative_cwd: str) -> Workspace | None:
        for workspace in self.workspaces:
            if workspace.relative_cwd == relative_cwd:
                return workspace
        return None

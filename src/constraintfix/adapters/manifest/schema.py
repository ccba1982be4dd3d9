"""``package.json`` schema for the fields the fixer reads and writes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from constraintfix.domain.model import DependencyType


class WorkspacesConfig(BaseModel):
    """Object form of the ``workspaces`` field (``{"packages": [...]}``)."""

    model_config = ConfigDict(extra="allow")

    packages: list[str] = Field(default_factory=list)


class WorkspaceRoot(BaseModel):
    """Only the ``workspaces`` field; every other key is left unvalidated."""

    model_config = ConfigDict(extra="allow")

    workspaces: list[str] | WorkspacesConfig | None = None

    @property
    def workspace_patterns(self) -> tuple[str, ...]:
        if self.workspaces is None:
            return ()
        if isinstance(self.workspaces, WorkspacesConfig):
            return tuple(self.workspaces.packages)
        return tuple(self.workspaces)


class PackageManifest(WorkspaceRoot):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str | None = None
    version: str | None = None
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")
    peer_dependencies: dict[str, str] = Field(default_factory=dict, alias="peerDependencies")

    def block(self, dependency_type: DependencyType) -> dict[str, str]:
        match dependency_type:
            case DependencyType.DEPENDENCIES:
                return self.dependencies
            case DependencyType.DEV_DEPENDENCIES:
                return self.dev_dependencies
            case DependencyType.PEER_DEPENDENCIES:
                return self.peer_dependencies

"""``package.json`` manifest adapters."""

from __future__ import annotations

from .discovery import find_project
from .errors import ManifestError, ProjectNotFoundError
from .schema import PackageManifest, WorkspaceRoot, WorkspacesConfig
from .store import (
    JsonManifestStore,
    detect_indent,
    dump_manifest,
    load_manifest,
    load_workspace_patterns,
    manifest_from_document,
    manifest_to_document,
)

__all__ = [
    "JsonManifestStore",
    "ManifestError",
    "PackageManifest",
    "ProjectNotFoundError",
    "WorkspaceRoot",
    "WorkspacesConfig",
    "detect_indent",
    "dump_manifest",
    "find_project",
    "load_manifest",
    "load_workspace_patterns",
    "manifest_from_document",
    "manifest_to_document",
]

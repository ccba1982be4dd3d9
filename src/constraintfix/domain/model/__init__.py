"""Domain model for workspaces and their dependency declarations."""

from __future__ import annotations

from .enums import DependencyType
from .identity import (
    WORKSPACE_PROTOCOL,
    Descriptor,
    Ident,
    InvalidIdentError,
    Locator,
    parse_ident,
)
from .workspace import DEFAULT_INDENT, DependencyMap, Manifest, Project, Workspace

__all__ = [
    "DEFAULT_INDENT",
    "WORKSPACE_PROTOCOL",
    "DependencyMap",
    "DependencyType",
    "Descriptor",
    "Ident",
    "InvalidIdentError",
    "Locator",
    "Manifest",
    "Project",
    "Workspace",
    "parse_ident",
]

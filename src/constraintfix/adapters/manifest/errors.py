"""Manifest adapter error definitions."""

from __future__ import annotations


class ManifestError(RuntimeError):
    """Raised when a manifest cannot be read or does not match the schema."""


class ProjectNotFoundError(ManifestError):
    """Raised when no manifest exists in or above the requested directory."""

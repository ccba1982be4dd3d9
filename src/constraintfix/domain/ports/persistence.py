"""Ports for persisting workspace manifests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from constraintfix.domain.model import Workspace


@runtime_checkable
class ManifestStore(Protocol):
    """Write a workspace's in-memory manifest to its backing file."""

    def persist(self, workspace: Workspace) -> None: ...


__all__ = ["ManifestStore"]

"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class DependencyType(StrEnum):
    """Manifest block a dependency is declared under.

    Values are the ``package.json`` keys so they can be printed as-is.
    """

    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "devDependencies"
    PEER_DEPENDENCIES = "peerDependencies"

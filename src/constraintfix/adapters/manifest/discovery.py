"""Locate a project root and load its workspaces."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from constraintfix.config import MANIFEST_FILENAME
from constraintfix.domain.model import Project, Workspace

from .errors import ManifestError, ProjectNotFoundError
from .store import load_manifest, load_workspace_patterns

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from constraintfix.domain.model import Manifest

log = getLogger(__name__)


def _nearest_manifest_dir(start: Path, filename: str) -> Path | None:
    for candidate in (start, *start.parents):
        if (candidate / filename).is_file():
            return candidate
    return None


def _expand_workspace_dirs(root: Path, patterns: Iterable[str], filename: str) -> list[Path]:
    found: dict[Path, None] = {}
    for pattern in patterns:
        for path in sorted(root.glob(pattern)):
            resolved = path.resolve()
            if resolved == root or not resolved.is_relative_to(root):
                continue
            if not (resolved / filename).is_file():
                continue
            found.setdefault(resolved, None)
    return sorted(found, key=lambda path: path.relative_to(root).as_posix())


def _relative_cwd(root: Path, path: Path) -> str:
    if path == root:
        return "."
    return path.relative_to(root).as_posix()


def _find_root(nearest: Path, filename: str) -> tuple[Path, Manifest]:
    """Return the closest ancestor whose workspaces include ``nearest``."""

    nearest_manifest = load_manifest(nearest / filename)
    for candidate in nearest.parents:
        path = candidate / filename
        if not path.is_file():
            continue
        try:
            patterns = load_workspace_patterns(path)
        except ManifestError as exc:
            log.debug("Ignoring unreadable manifest %s: %s", path, exc)
            continue
        if patterns and nearest in _expand_workspace_dirs(candidate, patterns, filename):
            return candidate, load_manifest(path)
    return nearest, nearest_manifest


def find_project(cwd: Path, *, filename: str = MANIFEST_FILENAME) -> Project:
    """Load the project containing ``cwd``, top-level workspace first."""

    start = cwd.expanduser().resolve()
    nearest = _nearest_manifest_dir(start, filename)
    if nearest is None:
        raise ProjectNotFoundError(f"No {filename} found in {start} or any parent directory")

    root, root_manifest = _find_root(nearest, filename)
    workspaces = [Workspace(cwd=root, relative_cwd=".", manifest=root_manifest)]
    for path in _expand_workspace_dirs(root, root_manifest.workspaces, filename):
        workspaces.append(
            Workspace(
                cwd=path,
                relative_cwd=_relative_cwd(root, path),
                manifest=load_manifest(path / filename),
            )
        )

    log.debug("Found project at %s with %d workspace(s)", root, len(workspaces))
    return Project(cwd=root, workspaces=workspaces)

"""Reading and writing ``package.json`` manifests."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from constraintfix.config import MANIFEST_FILENAME
from constraintfix.domain.model import (
    DEFAULT_INDENT,
    DependencyType,
    Descriptor,
    InvalidIdentError,
    Manifest,
    parse_ident,
)

from .errors import ManifestError
from .schema import PackageManifest, WorkspaceRoot

if TYPE_CHECKING:
    from pathlib import Path

    from constraintfix.domain.model import DependencyMap, Workspace

log = getLogger(__name__)

_BLOCK_KEYS = frozenset(dependency_type.value for dependency_type in DependencyType)
_INDENT_PATTERN = re.compile(r"^[ \t]+", re.MULTILINE)


def detect_indent(text: str) -> str:
    """Return the indentation of the first indented line, or two spaces."""

    match = _INDENT_PATTERN.search(text)
    return match.group(0) if match else DEFAULT_INDENT


def _read_block(
    entries: dict[str, str], dependency_type: DependencyType, source: str
) -> DependencyMap:
    block: DependencyMap = {}
    for raw_name, range_ in entries.items():
        try:
            ident = parse_ident(raw_name)
        except InvalidIdentError as exc:
            raise ManifestError(f"Invalid manifest {source}: {exc}") from exc
        if ident in block:
            raise ManifestError(
                f"Invalid manifest {source}: {ident.pretty()} is declared more than once "
                f"in {dependency_type}"
            )
        block[ident] = Descriptor(ident=ident, range=range_)
    return block


def manifest_from_document(
    document: dict[str, Any], *, source: str = "<memory>", indent: str = DEFAULT_INDENT
) -> Manifest:
    """Build a domain manifest from a decoded ``package.json`` document."""

    try:
        parsed = PackageManifest.model_validate(document)
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest {source}: {exc}") from exc

    try:
        name = parse_ident(parsed.name) if parsed.name else None
    except InvalidIdentError as exc:
        raise ManifestError(f"Invalid manifest {source}: {exc}") from exc
    dependencies = {
        dependency_type: _read_block(parsed.block(dependency_type), dependency_type, source)
        for dependency_type in DependencyType
    }

    return Manifest(
        name=name,
        version=parsed.version,
        workspaces=parsed.workspace_patterns,
        dependencies=dependencies,
        raw=dict(document),
        indent=indent,
    )


def _read_document(path: Path) -> tuple[dict[str, Any], str]:
    text = path.read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Manifest {path} is not valid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise ManifestError(f"Manifest {path} must contain a JSON object")
    return document, text


def load_manifest(path: Path) -> Manifest:
    document, text = _read_document(path)
    return manifest_from_document(document, source=str(path), indent=detect_indent(text))


def load_workspace_patterns(path: Path) -> tuple[str, ...]:
    """Read only the ``workspaces`` globs of the manifest at ``path``."""

    document, _ = _read_document(path)
    try:
        return WorkspaceRoot.model_validate(document).workspace_patterns
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest {path}: {exc}") from exc


def _serialize_block(block: DependencyMap) -> dict[str, str]:
    ordered = sorted(block.values(), key=lambda descriptor: descriptor.ident.pretty())
    return {descriptor.ident.pretty(): descriptor.range for descriptor in ordered}


def manifest_to_document(manifest: Manifest) -> dict[str, Any]:
    """Return the manifest as a JSON document, keeping the source key order.

    Dependency blocks are written sorted by package name; a block left empty by
    the fixer is dropped from the document.
    """

    document: dict[str, Any] = {}
    for key, value in manifest.raw.items():
        if key not in _BLOCK_KEYS:
            document[key] = value
            continue
        block = _serialize_block(manifest.dependencies_of(DependencyType(key)))
        if block:
            document[key] = block

    for dependency_type in DependencyType:
        if dependency_type.value in manifest.raw:
            continue
        block = _serialize_block(manifest.dependencies_of(dependency_type))
        if block:
            document[dependency_type.value] = block
    return document


def dump_manifest(manifest: Manifest) -> str:
    text = json.dumps(manifest_to_document(manifest), indent=manifest.indent, ensure_ascii=False)
    return text + "\n"


@dataclass(slots=True)
class JsonManifestStore:
    """Persist workspace manifests next to their workspace folder."""

    filename: str = MANIFEST_FILENAME

    def persist(self, workspace: Workspace) -> None:
        path = workspace.cwd / self.filename
        log.debug("Writing %s", path)
        path.write_text(dump_manifest(workspace.manifest), encoding="utf-8")

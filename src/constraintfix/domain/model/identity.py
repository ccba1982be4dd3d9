"""Value objects identifying packages, descriptors and workspaces."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

WORKSPACE_PROTOCOL: Final[str] = "workspace:"

_NAME_PATTERN = re.compile(r"^(?:@([^/@\s]+)/)?([^/@\s]+)$")


class InvalidIdentError(ValueError):
    """Raised when a package name cannot be parsed into an ident."""


@dataclass(frozen=True, slots=True)
class Ident:
    """Package identity: optional scope plus name.

    Idents are hashable and used directly as dependency keys inside a manifest.
    """

    name: str
    scope: str | None = None

    def pretty(self) -> str:
        if self.scope:
            return f"@{self.scope}/{self.name}"
        return self.name

    def __str__(self) -> str:
        return self.pretty()


@dataclass(frozen=True, slots=True)
class Descriptor:
    """A dependency request: ident plus the version range it is declared with."""

    ident: Ident
    range: str

    def with_range(self, range_: str) -> Descriptor:
        return Descriptor(ident=self.ident, range=range_)

    def pretty(self) -> str:
        return f"{self.ident.pretty()}@{self.range}"

    def __str__(self) -> str:
        return self.pretty()


@dataclass(frozen=True, slots=True)
class Locator:
    """A resolved package reference; workspaces use ``workspace:<path>``."""

    ident: Ident
    reference: str

    def pretty(self) -> str:
        return f"{self.ident.pretty()}@{self.reference}"

    def __str__(self) -> str:
        return self.pretty()


def parse_ident(value: str) -> Ident:
    """Parse ``name`` or ``@scope/name`` into an :class:`Ident`."""

    match = _NAME_PATTERN.match(value.strip())
    if match is None:
        raise InvalidIdentError(f"Invalid package name: {value!r}")
    scope, name = match.groups()
    return Ident(name=name, scope=scope)

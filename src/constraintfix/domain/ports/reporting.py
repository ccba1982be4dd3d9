"""Ports for batched diagnostics reporting."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType


class MessageName(IntEnum):
    """Stable message categories, printed as ``YN<code>``."""

    UNNAMED = 0
    CONSTRAINTS_INVALID_DEPENDENCY = 57
    INSTALL_COMMAND_FAILED = 58


@runtime_checkable
class DiagnosticsReporter(Protocol):
    """Collect error records and flush them once when the report closes."""

    def __enter__(self) -> DiagnosticsReporter: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool | None: ...

    def report_error(self, name: MessageName, text: str) -> None: ...

    def has_errors(self) -> bool: ...

    def exit_code(self) -> int: ...


@runtime_checkable
class ReporterFactory(Protocol):
    """Open a fresh report for one batch of diagnostics."""

    def __call__(self) -> DiagnosticsReporter: ...


__all__ = ["DiagnosticsReporter", "MessageName", "ReporterFactory"]

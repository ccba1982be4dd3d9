"""Batched diagnostics written to a text stream.

Records are kept in memory while the report is open and written in one go
when it closes, so every error of a run is shown together.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self

from constraintfix.domain.ports.reporting import MessageName

if TYPE_CHECKING:
    from types import TracebackType
    from typing import TextIO


@dataclass(frozen=True, slots=True)
class ReportRecord:
    name: MessageName
    text: str

    def format(self) -> str:
        return f"➤ YN{self.name.value:04d}: {self.text}"


@dataclass(slots=True)
class StreamReport:
    output: TextIO
    records: list[ReportRecord] = field(default_factory=list[ReportRecord])
    _started_at: float = field(default=0.0, init=False)

    @classmethod
    def start(cls, output: TextIO) -> StreamReport:
        return cls(output=output)

    def __enter__(self) -> Self:
        self._started_at = time.monotonic()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            return
        self.flush()

    def report_error(self, name: MessageName, text: str) -> None:
        self.records.append(ReportRecord(name=name, text=text))

    def has_errors(self) -> bool:
        return bool(self.records)

    def exit_code(self) -> int:
        return 1 if self.records else 0

    def flush(self) -> None:
        for record in self.records:
            self.output.write(record.format() + "\n")
        elapsed = time.monotonic() - self._started_at
        status = "Failed with errors" if self.records else "Done"
        summary = ReportRecord(name=MessageName.UNNAMED, text=f"{status} in {elapsed:.2f}s")
        self.output.write(summary.format() + "\n")
        self.output.flush()


@dataclass(slots=True)
class StreamReporterFactory:
    """Open a new :class:`StreamReport` on ``output`` for each batch."""

    output: TextIO

    def __call__(self) -> StreamReport:
        return StreamReport.start(self.output)

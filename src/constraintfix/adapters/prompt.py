"""Line-based yes/no prompt bound to a pair of text streams."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from typing import TextIO

log = getLogger(__name__)

_YES: Final[frozenset[str]] = frozenset({"y", "yes"})
_NO: Final[frozenset[str]] = frozenset({"n", "no"})


class PromptClosedError(EOFError):
    """Raised when the input stream ends before a question was answered."""


@dataclass(slots=True)
class StreamPrompt:
    """Ask questions on ``output`` and read answers from ``input``.

    Unrecognised answers, including an empty line, repeat the question: there
    is no default answer.
    """

    input: TextIO
    output: TextIO

    def ask(self, message: str) -> bool:
        while True:
            self.output.write(f"? {message} (y/n) ")
            self.output.flush()
            line = self.input.readline()
            if not line:
                self.output.write("\n")
                raise PromptClosedError(f"Input closed while asking: {message}")

            answer = line.strip().lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            log.debug("Unrecognised answer %r", answer)
            self.output.write("Please answer y(es) or n(o).\n")

"""Port for interactive yes/no questions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfirmationChannel(Protocol):
    """Ask the user a question and block until they answer.

    There is no timeout and no default answer. Implementations raise when the
    underlying input is closed instead of guessing.
    """

    def ask(self, message: str) -> bool: ...


__all__ = ["ConfirmationChannel"]

"""Error kinds reported by the viewer and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Union


class ErrorKind(IntEnum):
    """Failure categories; the value is the process exit status."""

    MEMORY = 2
    INVALID_INPUT = 3
    OPEN_FAILED = 4


_MESSAGES = {
    ErrorKind.MEMORY: "malloc failed",
    ErrorKind.INVALID_INPUT: "invalid input",
    ErrorKind.OPEN_FAILED: "coudln't open file",
}


def error_message(kind: Union[ErrorKind, int]) -> str:
    """Return the message for ``kind``; unknown kinds give ``"error"``."""
    return _MESSAGES.get(kind, "error")


class FdfError(Exception):
    """A failure that ends the program with the status of its kind."""

    def __init__(self, kind: Union[ErrorKind, int], detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        text = error_message(kind)
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)

    @property
    def exit_code(self) -> int:
        """The process exit status for this error."""
        return int(self.kind)
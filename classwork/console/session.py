# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Scoped prompt/response channel over standard input and output.

Each program opens exactly one session, reads everything it needs, and
closes it before printing any results:

    with open_session() as session:
        session.prompt("Matrix A: ")
        line = session.read_line()

Leaving the `with` block closes the input stream on every path, including
when a parse error propagates out of the block.
"""

import sys
from types import TracebackType
from typing import Optional, TextIO

from classwork.logging.logger import get_logger

logger = get_logger(__name__)


class InputExhaustedError(EOFError):
    """Raised when input ends before a required line could be read."""


class SessionClosedError(RuntimeError):
    """Raised when a closed session is asked for more input."""


class ConsoleSession:
    """
    Line-oriented reader over an input stream, with prompts on an output stream.

    The session owns the input stream: closing the session closes it.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._closed = False
        self._lines_read = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def lines_read(self) -> int:
        return self._lines_read

    def prompt(self, text: str) -> None:
        """Write a prompt and flush it so it shows up before we block on input."""
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self) -> str:
        """
        Read the next line without its line terminator.

        Raises:
            SessionClosedError: If the session has already been closed.
            InputExhaustedError: If the input stream is at end of file.
        """
        if self._closed:
            raise SessionClosedError("Cannot read from a closed console session")

        line = self._stdin.readline()
        if line == "":
            raise InputExhaustedError("Unexpected end of input")

        self._lines_read += 1
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def close(self) -> None:
        """Release the input stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._stdin.close()
        logger.debug("Console session closed", extra={"lines_read": self._lines_read})

    def __enter__(self) -> "ConsoleSession":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


def open_session(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> ConsoleSession:
    """Open a session on the given streams, defaulting to the current sys.stdin / sys.stdout."""
    return ConsoleSession(
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
    )

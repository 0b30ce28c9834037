# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for classwork tests.

Fixtures here are available to every test file automatically.
Only what more than one test module needs lives here.
"""

import io
import logging
from typing import Callable, Iterator

import pytest

from classwork.console.session import ConsoleSession
from classwork.logging.logger import DEFAULT_LOG_LEVEL, ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    """
    Put the classwork root logger back to its defaults after every test.

    Handlers call configure_logging, which changes the level and can attach
    a file handler. Without this, one test's --log-file would leak into the next.
    """
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(getattr(logging, DEFAULT_LOG_LEVEL))


@pytest.fixture()
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], io.StringIO]:
    """Replace sys.stdin with an in-memory stream holding the given text."""

    def _feed(text: str) -> io.StringIO:
        stream = io.StringIO(text)
        monkeypatch.setattr("sys.stdin", stream)
        return stream

    return _feed


@pytest.fixture()
def make_session() -> Callable[[str], tuple[ConsoleSession, io.StringIO]]:
    """Build a ConsoleSession over in-memory streams. Returns (session, prompt_output)."""

    def _make(text: str) -> tuple[ConsoleSession, io.StringIO]:
        output = io.StringIO()
        return ConsoleSession(io.StringIO(text), output), output

    return _make

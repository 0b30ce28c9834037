# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Exceptions raised by the grade statistics pipeline."""


class GradesError(Exception):
    """Base for all grade statistics errors."""


class ParseError(GradesError):
    """Raised when the score line contains a token that isn't an integer."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(f'Score {position} is not an integer: "{token}"')

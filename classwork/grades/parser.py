# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Score line parsing.

The line is split on single spaces, not general whitespace. Two spaces in a
row leave an empty token between them, and an empty token is not a number,
so "70  80" is rejected. Trailing spaces are tolerated, and a line of nothing
but spaces parses to no scores at all.
"""

from classwork.console.session import ConsoleSession
from classwork.grades.exceptions import ParseError
from classwork.logging.logger import get_logger
from classwork.utils.tokens import parse_int, split_fields

logger = get_logger(__name__)

SCORE_PROMPT = "Enter student scores (space-separated): "


def parse_scores(line: str) -> list[int]:
    """
    Parse a space-separated score line into integers.

    Raises:
        ParseError: On the first token that isn't a 32-bit integer.
    """
    scores: list[int] = []
    for position, token in enumerate(split_fields(line, " "), start=1):
        try:
            scores.append(parse_int(token))
        except ValueError as err:
            raise ParseError(token, position) from err
    return scores


def read_scores(session: ConsoleSession) -> list[int]:
    """Prompt for the score line on an open session and parse it."""
    session.prompt(SCORE_PROMPT)
    line = session.read_line()
    scores = parse_scores(line)
    logger.debug("Parsed score line", extra={"score_count": len(scores)})
    return scores

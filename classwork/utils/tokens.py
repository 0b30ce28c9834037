# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Token splitting and integer parsing shared by both programs.

The input contracts are strict: a score line is split on single
spaces, so "1  2" carries an empty token and is rejected. Python's str.split
and int() are both more forgiving than that (int() accepts surrounding
whitespace, underscores and non-ASCII digits), so the rules live here
explicitly.
"""

import re

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_WHITESPACE_RUN = re.compile(r"[ \t\n\x0b\f\r]+")

# Every character up to and including the space, control characters too.
_TRIM_CHARS = "".join(chr(code) for code in range(0x21))


def split_fields(text: str, separator: str) -> list[str]:
    """
    Split `text` on a literal separator, dropping trailing empty fields.

    An empty string yields one empty field. A string made only of separators
    yields no fields at all.

        split_fields("1 2 ", " ")  -> ["1", "2"]
        split_fields("1  2", " ")  -> ["1", "", "2"]
        split_fields("", " ")      -> [""]
        split_fields("   ", " ")   -> []
    """
    if text == "":
        return [""]

    fields = text.split(separator)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def trim(text: str) -> str:
    """Strip ASCII spaces and control characters from both ends. Unicode spaces stay."""
    return text.strip(_TRIM_CHARS)


def split_whitespace(text: str) -> list[str]:
    """
    Trim `text` and split it on runs of ASCII whitespace.

    A blank line yields one empty field. Non-ASCII spaces such as U+00A0 are
    not separators, so "1", U+00A0, "2" is a single field.
    """
    stripped = trim(text)
    if not stripped:
        return [""]
    return _WHITESPACE_RUN.split(stripped)


def is_integer_token(token: str) -> bool:
    """True if `token` is an optionally signed run of ASCII digits within the 32-bit range."""
    if _INTEGER_PATTERN.fullmatch(token) is None:
        return False
    return INT32_MIN <= int(token) <= INT32_MAX


def parse_int(token: str) -> int:
    """
    Parse a signed 32-bit integer token.

    Raises:
        ValueError: If the token isn't an integer or doesn't fit in 32 bits.
    """
    if not is_integer_token(token):
        raise ValueError(f'Not a 32-bit integer: "{token}"')
    return int(token)

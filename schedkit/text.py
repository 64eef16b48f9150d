"""Small text helpers: line reading, word splitting and number formatting."""

from __future__ import annotations

import os
import re
from typing import IO, AnyStr, Iterator

WHITESPACE = " \t"
DEFAULT_LINE_SIZE = 8192

_LEADING_BLANKS = re.compile(r"[ \t]*")
_BARE_WORD = re.compile(r"[^ \t]*")
_LEADING_DIGITS = re.compile(r"[0-9]*")


def read_lines(stream: IO[AnyStr], size: int = DEFAULT_LINE_SIZE) -> Iterator[AnyStr]:
    """Yield lines of at most ``size - 1`` characters, each keeping its newline.

    A line longer than the limit is split into several pieces; reading stops
    at end of file.
    """
    limit = size - 1
    if limit < 1:
        raise ValueError("size must be at least 2")
    while True:
        chars = []
        while len(chars) < limit:
            char = stream.read(1)
            if not char:
                break
            chars.append(char)
            if char in ("\n", b"\n"):
                break
        if not chars:
            return
        yield chars[0][:0].join(chars)


def next_word(line: str, start: int = 0) -> tuple[str, int] | None:
    """Return the next word at or after ``start`` and the index to resume from.

    Words are separated by blanks or tabs; a word opening with a single or a
    double quote runs to the matching quote, which is skipped. Returns None
    when only blanks remain.
    """
    begin = _LEADING_BLANKS.match(line, start).end()
    if begin >= len(line):
        return None
    opener = line[begin]
    if opener in "'\"":
        close = line.find(opener, begin + 1)
        if close == -1:
            return line[begin + 1:], len(line)
        return line[begin + 1:close], close + 1
    match = _BARE_WORD.match(line, begin)
    return match.group(), match.end()


def split_words(line: str) -> list[str]:
    """Split a line into its words, honouring quoted words."""
    words = []
    position = 0
    while (found := next_word(line, position)) is not None:
        word, position = found
        words.append(word)
    return words


def parse_leading_int(text: str) -> int:
    """Return the value of the decimal digits that open ``text``, or 0."""
    digits = _LEADING_DIGITS.match(text).group()
    return int(digits) if digits else 0


def format_int(number: int) -> str:
    """Format an integer in decimal, with a leading minus sign if negative."""
    return str(int(number))


def pad(text: str, width: int, fill: str) -> str:
    """Pad ``text`` with ``fill`` to ``abs(width)`` characters.

    A non-negative width pads on the right, a negative one on the left.
    Text already as long as the width is returned unchanged.
    """
    padding = fill * max(abs(width) - len(text), 0)
    return padding + text if width < 0 else text + padding


def prefix_equal(first: str, second: str, count: int) -> bool:
    """Tell whether the first ``count`` characters of two strings agree."""
    return first[:count] == second[:count]


def format_error(message: str, errnum: int = 0) -> str:
    """Return ``message`` followed by the description of error ``errnum``."""
    return f"{message} - {os.strerror(errnum)}\n"
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

COMMENT_CHAR = "#"


@dataclass(frozen=True)
class Token:
    text: str
    line: int


def strip_comment(line: str) -> str:
    """Drop everything from the first comment character to end of line."""
    index = line.find(COMMENT_CHAR)
    if index < 0:
        return line
    return line[:index]


def scan(lines: Iterable[str]) -> Iterator[Token]:
    """Yield whitespace-separated tokens with their 1-based line numbers.

    Lines starting with ``#`` are skipped whole; a ``#`` later in a line
    ends that line's tokens. The iterator is lazy and can be consumed once.
    """
    for number, line in enumerate(lines, start=1):
        if line.startswith(COMMENT_CHAR):
            continue
        for text in strip_comment(line).split():
            yield Token(text, number)

"""ATX heading line: one or more '#', a space, then inline words."""

from __future__ import annotations

from .ast import Heading, ParsedResult
from .cursor import match_literal, skip_one_space, split_line
from .words import parse_words


def parse_heading(text: str) -> ParsedResult[Heading] | None:
    line, rest = split_line(text)
    level = 0
    remaining = match_literal(line, "#")
    while remaining is not None:
        level += 1
        line = remaining
        remaining = match_literal(line, "#")
    if level == 0:
        return None
    content = skip_one_space(line)
    if content is None:
        return None
    return ParsedResult(Heading(level, parse_words(content)), rest)

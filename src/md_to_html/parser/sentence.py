"""Fallback block rule: any single line becomes a sentence."""

from __future__ import annotations

from .ast import ParsedResult, Sentence
from .cursor import split_line
from .words import parse_words


def parse_sentence(text: str) -> ParsedResult[Sentence] | None:
    if not text:
        return None
    line, rest = split_line(text)
    return ParsedResult(Sentence(parse_words(line)), rest)

"""Pipe table grammar: header row, alignment row, one or more body rows.

    | A | B  | C  |
    |---|---:|:--:|
    | a | b  | c  |
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .ast import Align, ParsedResult, Record, Table
from .cursor import split_line
from .words import parse_words

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_row(text: str, decode: Callable[[str], T]) -> ParsedResult[list[T]] | None:
    """Decode the first line as `| cell | cell |`, applying `decode` to each trimmed cell."""
    line, rest = split_line(text)
    line = line.rstrip()
    if len(line) < 2 or not line.startswith("|") or not line.endswith("|"):
        return None
    cells = [decode(cell.strip()) for cell in line[1:-1].split("|")]
    return ParsedResult(cells, rest)


def parse_header(text: str) -> ParsedResult[Record] | None:
    row = parse_row(text, parse_words)
    if row is None:
        return None
    return ParsedResult(Record(row.token), row.rest)


def parse_align_token(token: str) -> Align | None:
    """Decode `---`, `:---`, `---:` or `:---:`. Anything else is invalid."""
    left = token.startswith(":")
    right = token.endswith(":")
    core = token
    if left:
        core = core[1:]
    if right:
        core = core[:-1]
    if not core or core.strip("-"):
        return None
    if left and right:
        return Align.CENTER
    if right:
        return Align.RIGHT
    return Align.LEFT


def parse_align(text: str, columns: int) -> ParsedResult[list[Align]] | None:
    row = parse_row(text, parse_align_token)
    if row is None:
        return None
    if len(row.token) != columns or any(a is None for a in row.token):
        return None
    return ParsedResult(row.token, row.rest)


def parse_records(text: str, columns: int) -> ParsedResult[list[Record]] | None:
    """Collect body rows until a line is not a row or has the wrong cell count.

    The row that stops collection is left in `rest`.
    """
    records: list[Record] = []
    while True:
        row = parse_row(text, parse_words)
        if row is None:
            break
        if len(row.token) != columns:
            logger.debug("Table body stops: row has %d cells, expected %d", len(row.token), columns)
            break
        records.append(Record(row.token))
        text = row.rest
    if not records:
        return None
    return ParsedResult(records, text)


def parse_table(text: str) -> ParsedResult[Table] | None:
    header = parse_header(text)
    if header is None:
        return None
    columns = len(header.token)

    align = parse_align(header.rest, columns)
    if align is None:
        return None

    records = parse_records(align.rest, columns)
    if records is None:
        return None

    table = Table(header=header.token, align=align.token, records=records.token)
    return ParsedResult(table, records.rest)

"""Document segmenter: split raw text into block nodes."""

from __future__ import annotations

import logging
from typing import Callable

from .ast import Node, ParsedResult
from .heading import parse_heading
from .sentence import parse_sentence
from .table import parse_table

logger = logging.getLogger(__name__)

BlockParser = Callable[[str], "ParsedResult[Node] | None"]

# Tried in order; the first match wins.
BLOCK_PARSERS: tuple[BlockParser, ...] = (parse_table, parse_heading, parse_sentence)


def parse_document(text: str) -> list[Node]:
    """Parse `text` into block nodes. Stops at the first position no rule matches."""
    nodes: list[Node] = []
    while True:
        result = _first_match(text)
        if result is None:
            break
        nodes.append(result.token)
        text = result.rest
    if text:
        logger.debug("Dropping %d unparsed characters", len(text))
    logger.debug("Parsed %d block nodes", len(nodes))
    return nodes


def _first_match(text: str) -> ParsedResult[Node] | None:
    for parser in BLOCK_PARSERS:
        result = parser(text)
        if result is not None:
            return result
    return None

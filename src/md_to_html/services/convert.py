"""Markdown text -> AST -> HTML, with input normalisation and size limits."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .. import config
from ..parser import Node, parse_document
from .html_renderer import render_document

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    nodes: list[Node] = field(default_factory=list)
    html: str = ""


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def check_input_size(text: str, limit: int | None = None) -> None:
    limit = config.MAX_INPUT_CHARS if limit is None else limit
    if limit and len(text) > limit:
        raise ValueError(f"Markdown input too large: {len(text)} characters (limit {limit})")


def parse_markdown(markdown: str) -> list[Node]:
    check_input_size(markdown)
    return parse_document(normalize_newlines(markdown))


def convert_markdown(markdown: str) -> ConversionResult:
    """Parse and render `markdown`. Raises ValueError when the input exceeds the size limit."""
    nodes = parse_markdown(markdown)
    html = render_document(nodes)
    logger.info("Converted %d characters into %d block nodes", len(markdown), len(nodes))
    return ConversionResult(nodes=nodes, html=html)

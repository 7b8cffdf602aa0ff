"""Markdown subset parser: cursor helpers, inline words, tables, document segmenter."""

from .ast import (
    Align,
    Bold,
    Heading,
    Italic,
    ListItem,
    ListNode,
    Node,
    ParsedResult,
    Plain,
    Record,
    Sentence,
    Span,
    Strikethrough,
    Table,
    Underline,
)
from .cursor import match_literal, skip_one_space, split_line
from .document import parse_document
from .heading import parse_heading
from .sentence import parse_sentence
from .table import parse_table
from .words import parse_words

__all__ = [
    "Align",
    "Bold",
    "Heading",
    "Italic",
    "ListItem",
    "ListNode",
    "Node",
    "ParsedResult",
    "Plain",
    "Record",
    "Sentence",
    "Span",
    "Strikethrough",
    "Table",
    "Underline",
    "match_literal",
    "skip_one_space",
    "split_line",
    "parse_document",
    "parse_heading",
    "parse_sentence",
    "parse_table",
    "parse_words",
]

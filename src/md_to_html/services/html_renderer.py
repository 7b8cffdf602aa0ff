"""AST -> HTML string.

Plain text is emitted verbatim; no HTML escaping is applied. Table body cells
carry an `align` attribute, header cells do not.
"""

from __future__ import annotations

from typing import Iterable

from ..parser.ast import (
    Align,
    Bold,
    Heading,
    Italic,
    Node,
    Plain,
    Record,
    Sentence,
    Span,
    Strikethrough,
    Table,
    Underline,
)

_SPAN_TAGS: dict[type[Span], str] = {
    Italic: "i",
    Bold: "b",
    Strikethrough: "s",
    Underline: "u",
}


def render_document(nodes: list[Node]) -> str:
    """Render every node and join them with newlines."""
    return "\n".join(render_node(node) for node in nodes)


def render_node(node: Node) -> str:
    if isinstance(node, Heading):
        return f"<h{node.level}>{render_spans(node.content)}</h{node.level}>"
    if isinstance(node, Sentence):
        return render_spans(node.content)
    if isinstance(node, Table):
        return _render_table(node)
    raise RuntimeError(f"No HTML rendering rule for node type {type(node).__name__}")


def render_spans(spans: Iterable[Span]) -> str:
    return "".join(render_span(span) for span in spans)


def render_span(span: Span) -> str:
    if isinstance(span, Plain):
        return span.text
    tag = _SPAN_TAGS.get(type(span))
    if tag is None:
        raise RuntimeError(f"No HTML rendering rule for span type {type(span).__name__}")
    return f"<{tag}>{render_spans(span.children)}</{tag}>"


def _render_header(record: Record) -> str:
    cells = "".join(f"<th>{render_spans(cell)}</th>" for cell in record.cells)
    return f"<tr>{cells}</tr>"


def _render_record(record: Record, align: Iterable[Align]) -> str:
    cells = "".join(
        f'<td align="{a.value}">{render_spans(cell)}</td>' for cell, a in zip(record.cells, align)
    )
    return f"<tr>{cells}</tr>\n"


def _render_table(table: Table) -> str:
    header = _render_header(table.header)
    records = "".join(_render_record(r, table.align) for r in table.records)
    return f"<table>\n{header}\n{records}</table>\n"

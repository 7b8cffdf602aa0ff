"""AST for the Markdown subset: block nodes, inline spans and table records.

Nodes are frozen and hold tuples, so a built tree cannot change. Constructors
accept any iterable (lists included) and store it as a tuple.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Iterable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ParsedResult(Generic[T]):
    """Token produced by a grammar rule plus the unconsumed suffix of its input."""

    token: T
    rest: str


def _freeze(node: object, name: str, value: Iterable[Any]) -> None:
    object.__setattr__(node, name, tuple(value))


# --- Inline spans ---


@dataclass(frozen=True)
class Span:
    """Base inline span."""

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class Plain(Span):
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": "plain", "text": self.text}


@dataclass(frozen=True)
class _Emphasis(Span):
    children: tuple[Span, ...] = ()
    kind = ""

    def __post_init__(self) -> None:
        _freeze(self, "children", self.children)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "children": spans_to_dicts(self.children)}


@dataclass(frozen=True)
class Italic(_Emphasis):
    kind = "italic"


@dataclass(frozen=True)
class Bold(_Emphasis):
    kind = "bold"


@dataclass(frozen=True)
class Strikethrough(_Emphasis):
    kind = "strikethrough"


@dataclass(frozen=True)
class Underline(_Emphasis):
    kind = "underline"


def spans_to_dicts(spans: Iterable[Span]) -> list[dict[str, Any]]:
    return [s.to_dict() for s in spans]


# --- Tables ---


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Record:
    """One pipe-delimited row; one span tuple per cell, in column order."""

    cells: tuple[tuple[Span, ...], ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "cells", (tuple(c) for c in self.cells))

    def __len__(self) -> int:
        return len(self.cells)

    def to_dict(self) -> list[list[dict[str, Any]]]:
        return [spans_to_dicts(c) for c in self.cells]


# --- Block nodes ---


@dataclass(frozen=True)
class Node:
    """Base block-level document node."""

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class Heading(Node):
    level: int
    content: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "content", self.content)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "heading", "level": self.level, "content": spans_to_dicts(self.content)}


@dataclass(frozen=True)
class Sentence(Node):
    content: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "content", self.content)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "sentence", "content": spans_to_dicts(self.content)}


@dataclass(frozen=True)
class Table(Node):
    header: Record
    align: tuple[Align, ...] = ()
    records: tuple[Record, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "align", self.align)
        _freeze(self, "records", self.records)

    @property
    def columns(self) -> int:
        return len(self.header)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "table",
            "header": self.header.to_dict(),
            "align": [a.value for a in self.align],
            "records": [r.to_dict() for r in self.records],
        }


@dataclass(frozen=True)
class ListItem:
    words: tuple[Span, ...] = ()
    children: tuple[ListItem, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "words", self.words)
        _freeze(self, "children", self.children)

    def to_dict(self) -> dict[str, Any]:
        return {
            "words": spans_to_dicts(self.words),
            "children": [c.to_dict() for c in self.children],
        }


@dataclass(frozen=True)
class ListNode(Node):
    """Nested list shape. Not produced by the parser yet."""

    items: tuple[ListItem, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "items", self.items)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "list", "items": [i.to_dict() for i in self.items]}

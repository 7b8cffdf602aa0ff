"""Substring-consumption helpers shared by the grammar rules."""

from __future__ import annotations


def match_literal(text: str, pattern: str) -> str | None:
    """Return what follows `pattern` if `text` starts with it exactly, else None."""
    if not text.startswith(pattern):
        return None
    return text[len(pattern) :]


def skip_one_space(text: str) -> str | None:
    """Require one leading space, then drop any further leading whitespace."""
    rest = match_literal(text, " ")
    if rest is None:
        return None
    return rest.lstrip()


def split_line(text: str) -> tuple[str, str]:
    """Split off the first line. The newline itself belongs to neither part."""
    line, _, rest = text.partition("\n")
    return line, rest

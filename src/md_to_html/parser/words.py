"""Inline word grammar: one line of text -> list of plain / emphasis spans.

Delimiters (longest match wins at every position):

    **x**  bold          __x__  underline
    ~~x~~  strikethrough  *x* / _x_  italic

An opener without a closer on the same line, or with nothing between opener and
closer, is kept as literal text. So is emphasis nested more than MAX_NESTING
levels deep.

Parsing runs in two passes without recursion. A right-to-left pass finds the
closer for every opener. A left-to-right pass then builds the spans on an
explicit stack of open emphasis frames.
"""

from __future__ import annotations

from .ast import Bold, Italic, Plain, Span, Strikethrough, Underline

# Two-character delimiters must come first.
DELIMITERS: dict[str, type[Span]] = {
    "**": Bold,
    "__": Underline,
    "~~": Strikethrough,
    "*": Italic,
    "_": Italic,
}

_DELIMITER_CHARS = frozenset("".join(DELIMITERS))

# Emphasis nested deeper than this is kept as literal text.
MAX_NESTING = 32


def delimiter_at(text: str, pos: int) -> str | None:
    """Longest delimiter token starting at `pos`, if any."""
    if pos >= len(text) or text[pos] not in _DELIMITER_CHARS:
        return None
    for token in DELIMITERS:
        if text.startswith(token, pos):
            return token
    return None


def parse_words(text: str) -> list[Span]:
    """Parse one line into spans. Never fails; plain input gives [Plain(text)]."""
    tokens, closers = find_closers(text)
    return _build_spans(text, tokens, closers) or [Plain(text)]


def find_closers(text: str) -> tuple[list[str | None], list[int | None]]:
    """Delimiter token at each position, and where each opener's closer starts.

    Scanning from a position walks forward one character at a time, steps over
    literal delimiters whole, and jumps over emphasis that closes. The walk is
    the same whichever closer is being looked for, so its first hit for every
    token is filled in from the right. `closers[q]` is None for a literal
    delimiter.
    """
    n = len(text)
    tokens = [delimiter_at(text, q) for q in range(n)]
    closers: list[int | None] = [None] * n
    # first_hit[t][q]: first position with token t on the walk from q
    first_hit: dict[str, list[int | None]] = {t: [None] * (n + 1) for t in DELIMITERS}
    for q in range(n - 1, -1, -1):
        token = tokens[q]
        if token is None:
            step = q + 1
        else:
            start = q + len(token)
            end = first_hit[token][start]
            if end is not None and end > start:
                closers[q] = end
                step = end + len(token)
            else:
                step = start
        for t, hits in first_hit.items():
            hits[q] = q if t == token else hits[step]
    return tokens, closers


def _flush(text: str, spans: list[Span], start: int, end: int) -> None:
    if end > start:
        spans.append(Plain(text[start:end]))


def _build_spans(text: str, tokens: list[str | None], closers: list[int | None]) -> list[Span]:
    root: list[Span] = []
    # (opener token, collected children, closer position); the root frame ends at len(text)
    stack: list[tuple[str | None, list[Span], int]] = [(None, root, len(text))]
    pos = plain_start = 0
    while True:
        token, spans, stop = stack[-1]
        if pos == stop:
            _flush(text, spans, plain_start, pos)
            if token is None:
                return root
            stack.pop()
            stack[-1][1].append(DELIMITERS[token](spans))
            pos = plain_start = pos + len(token)
            continue
        opener = tokens[pos]
        if opener is None:
            pos += 1
        elif closers[pos] is None:
            pos += len(opener)
        elif len(stack) > MAX_NESTING:
            # too deep: the whole emphasis, delimiters included, stays plain text
            pos = closers[pos] + len(opener)
        else:
            _flush(text, spans, plain_start, pos)
            stack.append((opener, [], closers[pos]))
            pos = plain_start = pos + len(opener)

"""Quote-aware splitting of a typed command line."""

from __future__ import annotations

QUOTE_CHARS = frozenset("\"'")


def tokenize(text: str) -> tuple[str, ...]:
    """Split `text` on unquoted whitespace.

    A span opened by `"` or `'` runs until the same quote character closes
    it; the delimiters are dropped and whitespace inside is kept. An
    unterminated quote runs to end of input. Backslashes are not escapes.
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None
    for char in text:
        if quote is None and char in QUOTE_CHARS:
            quote = char
        elif quote is not None and char == quote:
            quote = None
        elif quote is None and char.isspace():
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tuple(tokens)

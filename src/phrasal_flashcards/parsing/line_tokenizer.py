"""Tokenizer for one comma-delimited line of the embedded word list."""

from __future__ import annotations

QUOTE = '"'
DELIMITER = ","


def tokenize_line(line: str) -> list[str]:
    """Split one line into trimmed fields, honoring double-quoted segments.

    Quote characters toggle the quoted state and are dropped from the output,
    so a quoted field may carry commas. Quotes are never unescaped: an
    unterminated quote leaves the remainder of the line in the quoted state,
    and a quote in the middle of a field still toggles it. The final buffer
    is always emitted, which means an empty line yields ``[""]`` and a
    trailing comma yields a trailing empty field.

    Args:
        line: One line of source text without its newline.

    Returns:
        Field strings in source order, each stripped of surrounding
        whitespace.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields

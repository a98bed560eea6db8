"""Build flashcard records from the multi-line word list blob."""

from __future__ import annotations

from typing import Sequence

from phrasal_flashcards.models import WordRecord
from phrasal_flashcards.parsing.line_tokenizer import tokenize_line


def record_from_fields(fields: Sequence[str]) -> WordRecord:
    """Map a field sequence onto a record by position.

    Args:
        fields: Tokenized fields of one line.

    Returns:
        ``WordRecord`` using the first three fields; missing ones become empty
        strings and extras are ignored.
    """

    padded = [*fields[:3], "", "", ""]
    return WordRecord(english=padded[0], japanese=padded[1], tips=padded[2])


def build_records(data: str) -> list[WordRecord]:
    """Parse the whole word list into records, one per non-blank line.

    Lines are split on ``\\n`` and trimmed; lines that are empty after
    trimming are skipped. The function never raises, and blank-only input
    yields an empty list.

    Args:
        data: Newline-separated word list text.

    Returns:
        Records in source line order.
    """

    records: list[WordRecord] = []
    for raw_line in data.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        records.append(record_from_fields(tokenize_line(line)))
    return records

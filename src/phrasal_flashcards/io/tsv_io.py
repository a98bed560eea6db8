"""TSV write helper for exporting parsed flashcard records."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from phrasal_flashcards.models import WordRecord

TSV_HEADER = ["english", "japanese", "tips"]
ROW_BREAK_RE = re.compile(r"[\t\r\n]+")


def _cell(value: str) -> str:
    """Collapse tabs and line breaks so one record stays on one row."""

    return ROW_BREAK_RE.sub(" ", value)


def write_tsv(records: Sequence[WordRecord], output_path: Path, include_header: bool = True) -> None:
    """Write records to a TSV file using the canonical column order.

    Args:
        records: Parsed records to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for record in records:
            handle.write(
                "\t".join([_cell(record.english), _cell(record.japanese), _cell(record.tips)])
            )
            handle.write("\n")

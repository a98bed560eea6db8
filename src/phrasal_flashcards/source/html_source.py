"""Load the word list embedded in the flashcard page.

The page keeps its data in a JavaScript template literal of the form
``const WORD_DATA = `...`.trim();``. This module locates that literal, returns
its text, and optionally hands it to the record builder.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from phrasal_flashcards.models import WordRecord
from phrasal_flashcards.parsing.record_builder import build_records

logger = logging.getLogger(__name__)

WORD_DATA_RE = re.compile(r"const WORD_DATA = `([\s\S]*?)`\.trim\(\);")


class WordDataNotFoundError(ValueError):
    """Raised when a page does not contain the ``WORD_DATA`` literal."""


def extract_word_data(html: str) -> str:
    """Return the trimmed contents of the first ``WORD_DATA`` literal.

    Args:
        html: Full page source.

    Returns:
        Word list text with surrounding whitespace removed.

    Raises:
        WordDataNotFoundError: If the page has no ``WORD_DATA`` literal.
    """

    match = WORD_DATA_RE.search(html)
    if match is None:
        raise WordDataNotFoundError("WORD_DATA literal not found in page source")
    return match.group(1).strip()


def load_word_data(html_path: Path) -> str:
    """Read a page from disk and extract its word list text.

    Args:
        html_path: Path to the flashcard page.

    Returns:
        Word list text.

    Raises:
        FileNotFoundError: If ``html_path`` does not exist.
        WordDataNotFoundError: If the page has no ``WORD_DATA`` literal.
    """

    if not html_path.exists():
        raise FileNotFoundError(f"Flashcard page not found: {html_path}")

    html = html_path.read_text(encoding="utf-8")
    data = extract_word_data(html)
    logger.debug("Extracted %d characters of WORD_DATA from %s", len(data), html_path)
    return data


def load_records(html_path: Path) -> list[WordRecord]:
    """Load and parse the word list embedded in ``html_path``."""

    return build_records(load_word_data(html_path))

"""Unit tests for extracting the word list from the flashcard page."""

from __future__ import annotations

from pathlib import Path

import pytest

from phrasal_flashcards.source.html_source import (
    WordDataNotFoundError,
    extract_word_data,
    load_records,
    load_word_data,
)

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "mini_index.html"


def test_extract_word_data_returns_trimmed_literal() -> None:
    html = "<script>\nconst WORD_DATA = `\n  go on,進む\n`.trim();\n</script>"

    assert extract_word_data(html) == "go on,進む"


def test_extract_word_data_stops_at_first_closing_literal() -> None:
    html = "const WORD_DATA = `a,b`.trim();\nconst OTHER = `c,d`.trim();"

    assert extract_word_data(html) == "a,b"


def test_extract_word_data_raises_when_literal_missing() -> None:
    with pytest.raises(WordDataNotFoundError, match="WORD_DATA"):
        extract_word_data("<html><body>no data</body></html>")


def test_load_word_data_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_word_data(tmp_path / "missing.html")


def test_load_records_from_fixture_page() -> None:
    records = load_records(FIXTURE)

    assert len(records) == 6
    assert records[0].english == "go on"
    assert records[0].japanese == "起こる (65%)、進む (13%)"
    assert records[-1].english == "set about"

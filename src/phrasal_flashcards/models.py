"""Data models shared by the parser, validation, and reporting layers.

Records are immutable values built in one pass from the flashcard page's
embedded word list, so downstream consumers can rely on stable fields.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WordRecord:
    """One flashcard entry built positionally from a tokenized line.

    The first field is the English phrasal verb, the second its Japanese
    translation, and the third a free-form note. Missing fields are empty
    strings; the record never carries more than these three values.
    """

    english: str
    japanese: str
    tips: str


@dataclass(frozen=True)
class DatasetIssue:
    """One completeness problem found while checking a parsed dataset."""

    row: int
    field: str
    message: str


@dataclass(frozen=True)
class DatasetSummary:
    """Aggregate counts describing a parsed dataset.

    ``multi_sense`` counts entries whose Japanese translation lists more
    than one sense, separated by ``、`` or a comma.
    """

    total: int
    multiword: int
    multi_sense: int

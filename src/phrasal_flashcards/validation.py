"""Caller-level completeness checks for a parsed flashcard dataset.

The parser itself is total and never rejects input; these helpers apply the
business rules the shipped page relies on, such as every entry carrying a
translation and no quote characters surviving tokenization.
"""

from __future__ import annotations

import re
from typing import Sequence

from phrasal_flashcards.models import DatasetIssue, DatasetSummary, WordRecord

EXPECTED_ENTRY_COUNT = 150
SENSE_SEPARATOR_RE = re.compile(r"[、,]")
REQUIRED_FIELDS = ("english", "japanese", "tips")
QUOTE_CHECKED_FIELDS = ("english", "japanese")


def find_dataset_issues(
    records: Sequence[WordRecord],
    expected_count: int | None = None,
    require_tips: bool = True,
) -> list[DatasetIssue]:
    """Collect completeness issues for a dataset.

    Args:
        records: Parsed records in source order.
        expected_count: Required number of records, or ``None`` to skip the
            count check.
        require_tips: Whether an empty ``tips`` field is an issue.

    Returns:
        Issues ordered by row; the count issue, if any, uses row ``0``.
    """

    issues: list[DatasetIssue] = []
    if expected_count is not None and len(records) != expected_count:
        issues.append(
            DatasetIssue(0, "*", f"expected {expected_count} entries, found {len(records)}")
        )

    for idx, record in enumerate(records, start=1):
        for name in REQUIRED_FIELDS:
            if name == "tips" and not require_tips:
                continue
            if not getattr(record, name):
                issues.append(DatasetIssue(idx, name, f"empty {name}"))
        for name in QUOTE_CHECKED_FIELDS:
            if '"' in getattr(record, name):
                issues.append(DatasetIssue(idx, name, f"quote character left in {name}"))

    return issues


def validate_records(
    records: Sequence[WordRecord],
    expected_count: int | None = None,
    require_tips: bool = True,
) -> None:
    """Validate a dataset and raise when any issue is found.

    Args:
        records: Parsed records in source order.
        expected_count: Required number of records, or ``None``.
        require_tips: Whether an empty ``tips`` field is an issue.

    Raises:
        ValueError: If the dataset has any issue.
    """

    errors = [
        f"Row {issue.row}: {issue.message}" if issue.row else issue.message
        for issue in find_dataset_issues(records, expected_count, require_tips)
    ]

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"Dataset validation failed with {len(errors)} errors:\n{preview}{more}")


def count_multiword_entries(records: Sequence[WordRecord]) -> int:
    """Count records whose English phrase contains a space."""

    return sum(1 for record in records if " " in record.english)


def find_record(records: Sequence[WordRecord], english: str) -> WordRecord | None:
    """Return the first record with the given English phrase, if any."""

    for record in records:
        if record.english == english:
            return record
    return None


def summarize_records(records: Sequence[WordRecord]) -> DatasetSummary:
    """Compute aggregate counts for reporting.

    Args:
        records: Parsed records.

    Returns:
        ``DatasetSummary`` for ``records``.
    """

    return DatasetSummary(
        total=len(records),
        multiword=count_multiword_entries(records),
        multi_sense=sum(1 for record in records if SENSE_SEPARATOR_RE.search(record.japanese)),
    )

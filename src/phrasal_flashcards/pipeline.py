"""Top-level orchestration from flashcard page to checked records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from phrasal_flashcards.models import DatasetIssue, WordRecord
from phrasal_flashcards.source.html_source import load_records
from phrasal_flashcards.validation import find_dataset_issues

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result bundle returned by :func:`run_pipeline`.

    Attributes:
        records: Parsed records in source order.
        issues: Completeness issues found in ``records``.
    """

    records: tuple[WordRecord, ...]
    issues: tuple[DatasetIssue, ...]


def run_pipeline(
    html_path: Path,
    expected_count: int | None = None,
    require_tips: bool = True,
) -> PipelineResult:
    """Load the page, parse its word list, and collect completeness issues.

    Args:
        html_path: Flashcard page containing the ``WORD_DATA`` literal.
        expected_count: Required number of entries, or ``None``.
        require_tips: Whether an empty ``tips`` field counts as an issue.

    Returns:
        ``PipelineResult`` with records and issues.
    """

    records = load_records(html_path)
    logger.info("Parsed %d records from %s", len(records), html_path)

    issues = find_dataset_issues(records, expected_count=expected_count, require_tips=require_tips)
    for issue in issues:
        logger.warning("Row %d %s: %s", issue.row, issue.field, issue.message)

    return PipelineResult(records=tuple(records), issues=tuple(issues))

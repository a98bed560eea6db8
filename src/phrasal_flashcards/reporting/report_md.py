"""Markdown report generation for one parsing run."""

from __future__ import annotations

from typing import Iterable, Sequence

from phrasal_flashcards.models import DatasetIssue, WordRecord
from phrasal_flashcards.validation import summarize_records


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(_escape(cell) for cell in row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def _escape(cell: str) -> str:
    return cell.replace("|", "\\|")


def build_report_md(records: Sequence[WordRecord], issues: Sequence[DatasetIssue]) -> str:
    """Build the markdown report for one parsing run.

    Args:
        records: Parsed records in source order.
        issues: Completeness issues found for ``records``.

    Returns:
        Full markdown content with summary tables.
    """

    summary = summarize_records(records)
    summary_rows = [
        ("entries", str(summary.total)),
        ("multi-word phrasal verbs", str(summary.multiword)),
        ("multi-sense translations", str(summary.multi_sense)),
    ]

    edge_rows: list[tuple[str, str, str, str]] = []
    if records:
        edge_rows.append(("first", records[0].english, records[0].japanese, records[0].tips))
        edge_rows.append(("last", records[-1].english, records[-1].japanese, records[-1].tips))

    issue_rows = [
        (str(issue.row), issue.field, issue.message)
        for issue in sorted(issues, key=lambda item: (item.row, item.field, item.message))
    ]

    sections = [
        "# Word Data Report",
        "",
        "## Dataset summary",
        _markdown_table(["metric", "value"], summary_rows),
        "",
        "## First and last entries",
        _markdown_table(["position", "english", "japanese", "tips"], edge_rows),
        "",
        "## Issues",
        _markdown_table(["row", "field", "message"], issue_rows),
    ]

    return "\n".join(sections) + "\n"

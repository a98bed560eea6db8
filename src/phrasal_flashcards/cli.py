"""CLI entrypoint for parsing the flashcard page word list."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from phrasal_flashcards.io.tsv_io import write_tsv
from phrasal_flashcards.logging_setup import set_up_logging
from phrasal_flashcards.pipeline import run_pipeline
from phrasal_flashcards.reporting.report_md import build_report_md
from phrasal_flashcards.validation import EXPECTED_ENTRY_COUNT, summarize_records


def _resolve_default_html_path() -> Path:
    """Resolve default flashcard page path from project layout.

    Returns:
        ``public/index.html`` when present, otherwise ``index.html`` in the
        working directory.
    """

    public_page = Path("public") / "index.html"
    if public_page.exists():
        return public_page
    return Path("index.html")


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the parse command.
    """

    parser = argparse.ArgumentParser(
        description="Parse the phrasal-verb word list embedded in the flashcard page."
    )
    parser.add_argument(
        "--html",
        type=Path,
        default=_resolve_default_html_path(),
        help="Path to the flashcard page containing WORD_DATA.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional TSV output path.")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Optional markdown report output path.",
    )
    parser.add_argument(
        "--expected-count",
        type=int,
        default=EXPECTED_ENTRY_COUNT,
        help=f"Required number of entries (default: {EXPECTED_ENTRY_COUNT}; 0 disables the check).",
    )
    parser.add_argument(
        "--allow-missing-tips",
        action="store_true",
        help="Do not treat entries without tips as issues.",
    )
    parser.add_argument(
        "--allow-issues",
        action="store_true",
        help="Exit successfully even when completeness issues are found.",
    )
    parser.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Args:
        argv: Argument list; ``None`` reads ``sys.argv``.

    Returns:
        Zero on success, one when completeness issues are found and not
        allowed.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    set_up_logging(verbose=args.verbose)

    if not args.html.exists():
        raise SystemExit(f"Flashcard page not found: {args.html}")

    result = run_pipeline(
        html_path=args.html,
        expected_count=args.expected_count or None,
        require_tips=not args.allow_missing_tips,
    )

    if args.output is not None:
        write_tsv(result.records, output_path=args.output, include_header=not args.no_header)
        print(f"Wrote {len(result.records)} records to {args.output}")
    if args.report is not None:
        args.report.write_text(build_report_md(result.records, result.issues), encoding="utf-8")
        print(f"Wrote report to {args.report}")

    summary = summarize_records(result.records)
    print(
        _format_table(
            ["metric", "value"],
            [
                ["entries", str(summary.total)],
                ["multi-word", str(summary.multiword)],
                ["multi-sense", str(summary.multi_sense)],
                ["issues", str(len(result.issues))],
            ],
        )
    )

    if result.issues and not args.allow_issues:
        print(f"\nFound {len(result.issues)} issues; rerun with --allow-issues to ignore.")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

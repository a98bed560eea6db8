"""Integration tests running the page-to-artifact workflow on fixture data."""

from __future__ import annotations

from pathlib import Path

import pytest

from phrasal_flashcards.cli import main
from phrasal_flashcards.pipeline import run_pipeline
from phrasal_flashcards.validation import find_record

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "mini_index.html"


def test_run_pipeline_fixture_has_complete_records() -> None:
    """Every fixture entry should parse with all three fields populated."""

    result = run_pipeline(FIXTURE, expected_count=6)

    assert result.issues == ()
    assert [record.english for record in result.records] == [
        "go on",
        "go back",
        "come up",
        "find out",
        "pick up",
        "set about",
    ]
    come_up = find_record(result.records, "come up")
    assert come_up is not None
    assert come_up.japanese == "提案する (34%)、まもなく起こる (28%)"
    assert all('"' not in record.japanese for record in result.records)


def test_run_pipeline_reports_count_mismatch() -> None:
    result = run_pipeline(FIXTURE, expected_count=150)

    assert len(result.issues) == 1
    assert result.issues[0].message == "expected 150 entries, found 6"


def test_cli_writes_tsv_and_report(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "words.tsv"
    report = tmp_path / "report.md"

    exit_code = main(
        [
            "--html",
            str(FIXTURE),
            "--output",
            str(output),
            "--report",
            str(report),
            "--expected-count",
            "6",
        ]
    )

    assert exit_code == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "english\tjapanese\ttips"
    assert len(lines) == 7
    assert "| entries | 6 |" in report.read_text(encoding="utf-8")
    assert f"Wrote 6 records to {output}" in capsys.readouterr().out


def test_cli_fails_on_issues_unless_allowed() -> None:
    assert main(["--html", str(FIXTURE)]) == 1
    assert main(["--html", str(FIXTURE), "--allow-issues"]) == 0


def test_cli_exits_when_page_missing(tmp_path: Path) -> None:
    with pytest.raises(SystemExit, match="Flashcard page not found"):
        main(["--html", str(tmp_path / "missing.html")])

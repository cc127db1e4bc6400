"""Tests for report rendering."""

import io
import json

from rich.console import Console

from gridcheck import formatters
from gridcheck.enums import FailureKind, OutputFormat
from gridcheck.results import CheckResult, FileReport, ValidationResult


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, highlight=False, emoji=False, soft_wrap=True), buffer


def _batch() -> CheckResult:
    return CheckResult(
        reports=[
            FileReport("a.dat", ValidationResult.ok()),
            FileReport(
                "b.dat",
                ValidationResult.fail(FailureKind.MISSING_ROWS, "expected 2 rows but found 1"),
            ),
        ]
    )


def test_text_report():
    """Text output lists path, verdict and a blank separator per file."""
    console, buffer = _console()
    formatters.check(_batch(), OutputFormat.TEXT, console)
    assert buffer.getvalue() == (
        "a.dat\nVALID\n\nb.dat\nexpected 2 rows but found 1\nINVALID\n\n"
    )


def test_text_report_keeps_brackets():
    """Paths that look like markup are printed verbatim."""
    console, buffer = _console()
    result = CheckResult(reports=[FileReport("[red]x.dat", ValidationResult.ok())])
    formatters.check(result, OutputFormat.TEXT, console)
    assert buffer.getvalue().splitlines()[0] == "[red]x.dat"


def test_json_report():
    """JSON output carries per-file results and a summary."""
    console, buffer = _console()
    formatters.check(_batch(), OutputFormat.JSON, console)
    data = json.loads(buffer.getvalue())
    assert data["query"] == "check"
    assert [r["path"] for r in data["results"]] == ["a.dat", "b.dat"]
    assert data["results"][0] == {"path": "a.dat", "valid": True, "kind": None, "reason": None}
    assert data["results"][1]["kind"] == "missing_rows"
    assert data["summary"] == {"files": 2, "valid": 1, "invalid": 1}


def test_usage():
    """Usage notice is printed verbatim."""
    console, buffer = _console()
    formatters.usage(console)
    assert buffer.getvalue() == "Usage: gridcheck file1 [file2 ... fileN]\n"

"""Output formatters for CLI results.

Each formatter takes a result dataclass and renders it as text or JSON.
All Rich console output is contained here.
"""

import json

from rich.console import Console
from rich.markup import escape

from gridcheck.enums import OutputFormat
from gridcheck.results import CheckResult

USAGE = "Usage: gridcheck file1 [file2 ... fileN]"


def usage(console: Console) -> None:
    """Print the usage notice shown when no files are given."""
    console.print(escape(USAGE))


def check(result: CheckResult, output_format: OutputFormat, console: Console) -> None:
    """Format a batch of validation results."""
    if output_format == OutputFormat.JSON:
        data = {
            "query": "check",
            "results": [
                {
                    "path": r.path,
                    "valid": r.result.valid,
                    "kind": r.result.kind.value if r.result.kind else None,
                    "reason": r.result.reason,
                }
                for r in result.reports
            ],
            "summary": {
                "files": len(result.reports),
                "valid": result.valid_count,
                "invalid": result.invalid_count,
            },
        }
        console.print_json(json.dumps(data, indent=2))
        return

    for report in result.reports:
        console.print(escape(report.path))
        if report.result.valid:
            console.print("[green]VALID[/green]")
        else:
            console.print(escape(report.result.reason or ""))
            console.print("[red]INVALID[/red]")
        console.print()

"""Command-line interface for grid validation.

This module handles argument parsing only. Validation lives in validator.py,
output formatting lives in formatters.py.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from gridcheck import formatters
from gridcheck.config import CheckerConfig, ConfigError, load_config
from gridcheck.enums import OutputFormat
from gridcheck.results import CheckResult, FileReport
from gridcheck.validator import validate_file

HELP_TEXT = """Validate numeric grid files.

Each file must start with a header line holding two positive integers, the
row and column counts, followed by exactly that many rows of space-separated
numbers.

```
gridcheck data1.dat data2.dat
gridcheck -f json data1.dat
```
"""

app = typer.Typer(
    name="gridcheck",
    help=HELP_TEXT,
    rich_markup_mode="markdown",
)

console = Console(highlight=False, emoji=False, soft_wrap=True)

log = logging.getLogger("gridcheck")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        handlers=[logging.StreamHandler(sys.stderr)],
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[gridcheck] %(levelname)s %(message)s",
    )


@app.command()
def check(
    files: Annotated[
        list[str] | None, typer.Argument(help="Grid files to validate", show_default=False)
    ] = None,
    output_format: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "text",
    config_path: Annotated[
        Path | None, typer.Option("--config", "-c", help="YAML file with validator options")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log details to stderr")] = False,
) -> None:
    """Check each file in order and report VALID or the reason it is INVALID."""
    _configure_logging(verbose)

    if not files:
        formatters.usage(console)
        return

    try:
        fmt = OutputFormat(output_format)
    except ValueError:
        console.print(f"[red]Unknown format: {escape(output_format)}[/red]")
        console.print("Valid formats: text, json")
        raise typer.Exit(2) from None

    config = CheckerConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(2) from None
        log.debug("loaded config from %s: %s", config_path, config)

    result = CheckResult()
    for path in files:
        result.reports.append(FileReport(path=path, result=validate_file(path, config)))

    log.debug("%d valid, %d invalid", result.valid_count, result.invalid_count)
    formatters.check(result, fmt, console)


if __name__ == "__main__":
    app()

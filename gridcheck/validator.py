"""Structural validation of numeric grid files.

A grid file has a header line with two integers (rows, columns) followed by
exactly that many rows of space-separated floating-point values:

    2 3
    1.0 2.0 3.0
    4.0 5.0 6.0

Checks run in a fixed order and the first failing one decides the result.
Validation failures are returned as values; nothing here raises for a
malformed or unreadable file.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from itertools import islice
from pathlib import Path

from gridcheck.config import CheckerConfig
from gridcheck.enums import FailureKind
from gridcheck.results import ValidationResult

log = logging.getLogger(__name__)

_LINE_BREAK = re.compile("\r\n|[\n\r\u2028\u2029\u0085]")
# Scanner whitespace excludes the no-break spaces.
_SPACE = r"[^\S\u00a0\u2007\u202f]"
_TOKEN = re.compile(_SPACE + r"*((?:\S|[\u00a0\u2007\u202f])+)")
# Rows and numbers are trimmed of control characters and space only.
_TRIM = "".join(map(chr, range(0x21)))
_INT = re.compile(r"[+-]?\d+", re.ASCII)
_DECIMAL = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?)", re.ASCII
)
_HEX = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)[pP][+-]?\d+[fFdD]?", re.ASCII
)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def parse_int(token: str) -> int | None:
    """Parse a signed 32-bit decimal integer, or return None."""
    if not _INT.fullmatch(token):
        return None
    try:
        value = int(token)
    except ValueError:
        # beyond the interpreter's digit limit, so far out of range
        return None
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_double(token: str) -> float | None:
    """Parse a double-precision literal, or return None.

    Accepts plain and exponent decimals with an optional f/d suffix, NaN,
    Infinity and hexadecimal floats. Python-only spellings such as "inf",
    "nan" or underscore digit groups are rejected.
    """
    token = token.strip(_TRIM)
    if _DECIMAL.fullmatch(token):
        return float(token.rstrip("fFdD"))
    if _HEX.fullmatch(token):
        try:
            return float.fromhex(token.rstrip("fFdD"))
        except OverflowError:
            return float("-inf") if token.startswith("-") else float("inf")
    return None


def _split_lines(chunks: Iterable[str]) -> Iterator[str]:
    """Yield lines without terminators from text chunks.

    A terminator at the very end of the input does not produce a trailing
    empty line.
    """
    pending = ""
    for chunk in chunks:
        pieces = _LINE_BREAK.split(pending + chunk)
        pending = pieces.pop()
        yield from pieces
    if pending:
        yield pending


def _next_token(line: str, pos: int) -> tuple[str, int] | None:
    match = _TOKEN.match(line, pos)
    if match is None:
        return None
    return match.group(1), match.end()


def _fail(kind: FailureKind, reason: str) -> ValidationResult:
    log.debug("invalid (%s): %s", kind.value, reason)
    return ValidationResult.fail(kind, reason)


def _check(chunks: Iterable[str], config: CheckerConfig) -> ValidationResult:
    lines = _split_lines(chunks)
    header = next(lines, "")

    first = _next_token(header, 0)
    row_count = parse_int(first[0]) if first else None
    if first is None or row_count is None:
        return _fail(FailureKind.ROW_COUNT, "missing or invalid row count")

    second = _next_token(header, first[1])
    col_count = parse_int(second[0]) if second else None
    if second is None or col_count is None:
        return _fail(FailureKind.COLUMN_COUNT, "missing or invalid column count")

    # Any leftover text fails, even whitespace, unless the config relaxes it.
    remainder = header[second[1] :]
    blank_tail = _next_token(remainder, 0) is None
    if remainder and not (config.allow_header_trailing_whitespace and blank_tail):
        return _fail(FailureKind.HEADER_EXTRA, "file should not have a third parameter")

    if row_count <= 0 or col_count <= 0:
        return _fail(FailureKind.NON_POSITIVE, "row and column counts must be positive")

    rows_read = 0
    for line in islice(lines, row_count):
        row = rows_read + 1
        stripped = line.strip(_TRIM)
        tokens = stripped.split() if config.split_on_any_whitespace else stripped.split(" ")
        if len(tokens) != col_count:
            return _fail(
                FailureKind.COLUMN_MISMATCH, f"row {row} does not have {col_count} columns"
            )
        for token in tokens:
            if parse_double(token) is None:
                return _fail(
                    FailureKind.NUMBER_FORMAT, f'row {row} has non-numeric value "{token}"'
                )
        rows_read += 1

    if rows_read != row_count:
        return _fail(
            FailureKind.MISSING_ROWS, f"expected {row_count} rows but found {rows_read}"
        )

    if any(_next_token(line, 0) for line in lines):
        return _fail(FailureKind.EXTRA_DATA, "extra data after expected grid")

    return ValidationResult.ok()


def validate(content: str, config: CheckerConfig | None = None) -> ValidationResult:
    """Validate grid text already held in memory."""
    return _check([content], config or CheckerConfig())


def validate_file(path: str | Path, config: CheckerConfig | None = None) -> ValidationResult:
    """Validate a grid file, reading it line by line.

    The file is open only for the duration of the call. Files that cannot be
    opened or decoded produce a READ_ERROR result instead of raising.
    """
    config = config or CheckerConfig()
    log.debug("validating %s", path)
    try:
        with open(path, encoding=config.encoding, newline="") as handle:
            return _check(handle, config)
    except OSError as e:
        return _fail(FailureKind.READ_ERROR, f"cannot read {path}: {e.strerror or e}")
    except UnicodeDecodeError as e:
        return _fail(FailureKind.READ_ERROR, f"cannot read {path}: {e}")

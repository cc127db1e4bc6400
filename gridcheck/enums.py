"""Typed enums for grid validation.

All enums inherit from (str, Enum) to support JSON serialization and string comparison.
"""

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for the CLI report."""

    JSON = "json"
    TEXT = "text"


class FailureKind(str, Enum):
    """Why a file was rejected. Each kind maps to exactly one diagnostic message."""

    READ_ERROR = "read_error"
    ROW_COUNT = "row_count"
    COLUMN_COUNT = "column_count"
    HEADER_EXTRA = "header_extra"
    NON_POSITIVE = "non_positive"
    COLUMN_MISMATCH = "column_mismatch"
    NUMBER_FORMAT = "number_format"
    MISSING_ROWS = "missing_rows"
    EXTRA_DATA = "extra_data"

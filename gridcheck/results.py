"""Result dataclasses for validation.

These define the contract between the validator and the formatters.
"""

from dataclasses import dataclass, field

from gridcheck.enums import FailureKind


@dataclass
class ValidationResult:
    """Outcome of validating one input: valid, or invalid with a reason."""

    valid: bool
    kind: FailureKind | None = None
    reason: str | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, kind: FailureKind, reason: str) -> "ValidationResult":
        return cls(valid=False, kind=kind, reason=reason)


@dataclass
class FileReport:
    """Validation outcome for a single path."""

    path: str
    result: ValidationResult


@dataclass
class CheckResult:
    """Reports for one batch, in command-line order."""

    reports: list[FileReport] = field(default_factory=list)

    @property
    def valid_count(self) -> int:
        return sum(1 for r in self.reports if r.result.valid)

    @property
    def invalid_count(self) -> int:
        return len(self.reports) - self.valid_count

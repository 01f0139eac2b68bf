"""Validation models — failures and the result aggregator.

A ValidationResult is an immutable value: merging or combining always
returns a new result and never touches the inputs.
"""

from typing import Any, Optional

from pydantic import BaseModel

from common_validation.core.severity import Severity
from common_validation.errors import MissingArgumentError


class ValidationFailure(BaseModel):
    """A single failed check."""

    property_name: str
    error_message: str
    error_code: Optional[str] = None
    severity: Severity = Severity.FORBIDDEN
    attempted_value: Any = None

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"[{self.severity.value}] {self.property_name}: {self.error_message}"


class ValidationResult(BaseModel):
    """Ordered collection of failures produced by one evaluation."""

    errors: tuple[ValidationFailure, ...] = ()

    model_config = {"frozen": True}

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_forbidden(self) -> bool:
        """True when the operation must not proceed."""
        return self._has(Severity.FORBIDDEN)

    @property
    def has_at_own_risk(self) -> bool:
        return self._has(Severity.AT_OWN_RISK)

    @property
    def has_not_recommended(self) -> bool:
        return self._has(Severity.NOT_RECOMMENDED)

    def by_severity(self, severity: Severity) -> tuple[ValidationFailure, ...]:
        """Return only the failures of the given severity, in order."""
        return tuple(e for e in self.errors if e.severity == severity)

    def summary(self) -> dict[str, int]:
        """Count of failures by severity."""
        counts = {severity.value: 0 for severity in Severity}
        for err in self.errors:
            counts[err.severity.value] += 1
        return counts

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Return a new result with this result's failures followed by other's."""
        if other is None:
            raise MissingArgumentError("other")
        return ValidationResult(errors=self.errors + other.errors)

    @classmethod
    def combine(cls, *results: "ValidationResult") -> "ValidationResult":
        """Concatenate the failures of several results, preserving order. No deduplication."""
        combined: list[ValidationFailure] = []
        for result in results:
            if result is None:
                raise MissingArgumentError("results")
            combined.extend(result.errors)
        return cls(errors=tuple(combined))

    def _has(self, severity: Severity) -> bool:
        return any(e.severity == severity for e in self.errors)

    def __str__(self) -> str:
        if self.is_valid:
            return "Validation succeeded."
        lines = [f"Validation failed with {len(self.errors)} error(s):"]
        lines.extend(f"  - {e}" for e in self.errors)
        return "\n".join(lines)

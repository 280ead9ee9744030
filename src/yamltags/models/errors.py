"""Validation failure records with YAML source position tracking."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class FailureCode(StrEnum):
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    PARAMETER_PARSE_FAILURE = "PARAMETER_PARSE_FAILURE"
    UNKNOWN_RULE = "UNKNOWN_RULE"


class PositionedFailure(BaseModel):
    """A failure pointing at an exact location in the YAML source."""

    kind: Literal["positioned"] = "positioned"
    code: FailureCode = FailureCode.CONSTRAINT_VIOLATION
    message: str
    line: int
    column: int
    field: str | None = None
    rule: str | None = None

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"


class OpaqueFailure(BaseModel):
    """A failure without a source position (misconfigured rule or parameter)."""

    kind: Literal["opaque"] = "opaque"
    code: FailureCode
    message: str
    field: str | None = None
    rule: str | None = None

    def __str__(self) -> str:
        return self.message


Failure = Annotated[PositionedFailure | OpaqueFailure, Field(discriminator="kind")]


class ValidationReport(BaseModel):
    """All failures collected from one validation pass."""

    failures: list[Failure] = []

    @property
    def valid(self) -> bool:
        return not self.failures

    def render(self) -> str:
        """Render failures as a multi-line diagnostic list."""
        return "\n".join(f"  {failure}" for failure in self.failures)


class YAMLSafetyError(Exception):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: these reject oversized or excessively
    nested documents before any validation runs.
    """


class RuleParameterError(ValueError):
    """Raised by a validator whose rule parameter cannot be parsed."""

    def __init__(self, rule: str, param: str, reason: str) -> None:
        self.rule = rule
        self.param = param
        super().__init__(f"rule '{rule}': invalid parameter '{param}': {reason}")


class UnknownRuleError(Exception):
    """Raised when a tag names a rule with no registered validator."""

    def __init__(self, rule: str, field: str, available: list[str]) -> None:
        self.rule = rule
        self.field = field
        self.available = available
        super().__init__(
            f"no validator registered for rule '{rule}' on field '{field}'. "
            f"Available: {', '.join(available)}"
        )


class DocumentValidationError(Exception):
    """Raised by ``unmarshal`` when the decoded document fails validation."""

    def __init__(self, report: ValidationReport, filename: str = "<string>") -> None:
        self.report = report
        self.filename = filename
        super().__init__(f"{filename}: validation errors:\n{report.render()}")

    @property
    def failures(self) -> list[PositionedFailure | OpaqueFailure]:
        return self.report.failures

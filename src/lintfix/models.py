# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lintfix package."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Ecosystem(str, Enum):
    """Enumerate the toolchain families whose diagnostics can be parsed."""

    JS = "js"
    GO = "go"
    RUST = "rust"


class LintSeverity(str, Enum):
    """Two-bucket severity vocabulary shared by every ecosystem."""

    ERROR = "error"
    WARNING = "warning"


class LintTarget(BaseModel):
    """Describe where one toolchain's linter applies and how to run it."""

    model_config = ConfigDict(frozen=True)

    pattern: str
    ecosystem: Ecosystem
    check: str
    fix: str


class LintError(BaseModel):
    """Canonical diagnostic record produced by the output parsers."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    rule: str
    severity: LintSeverity
    message: str
    fixable: bool


class LintSummary(BaseModel):
    """Counters describing a :class:`LintResult` error list."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    fixable: int = Field(ge=0)
    unfixable: int = Field(ge=0)


class LintResult(BaseModel):
    """Outcome of one check command for a single lint target."""

    model_config = ConfigDict(frozen=True)

    ecosystem: Ecosystem
    target: str
    errors: tuple[LintError, ...] = Field(default_factory=tuple)
    summary: LintSummary

    @model_validator(mode="after")
    def _validate_summary(self) -> LintResult:
        """Reject summaries that disagree with the error list.

        Returns:
            LintResult: The validated result.

        Raises:
            ValueError: If the summary counters are inconsistent.
        """

        if self.summary.total != len(self.errors):
            raise ValueError(f"summary total {self.summary.total} does not match {len(self.errors)} errors")
        if self.summary.fixable + self.summary.unfixable != self.summary.total:
            raise ValueError("summary fixable and unfixable counts must add up to the total")
        return self

    @classmethod
    def from_errors(cls, target: LintTarget, errors: Iterable[LintError]) -> LintResult:
        """Build a result whose summary is derived from ``errors``.

        Args:
            target: Lint target the errors were collected for.
            errors: Parsed diagnostics in tool order.

        Returns:
            LintResult: Result carrying a consistent summary.
        """

        collected = tuple(errors)
        fixable = sum(1 for error in collected if error.fixable)
        return cls(
            ecosystem=target.ecosystem,
            target=target.pattern,
            errors=collected,
            summary=LintSummary(total=len(collected), fixable=fixable, unfixable=len(collected) - fixable),
        )

    @classmethod
    def unverified(cls, target: LintTarget, errors: Iterable[LintError]) -> LintResult:
        """Build a result for a check command that failed to execute.

        Fixability cannot be asserted when the tool did not run normally, so
        every error is counted as unfixable.

        Args:
            target: Lint target the errors were collected for.
            errors: Diagnostics recovered from whatever output was captured.

        Returns:
            LintResult: Result with ``fixable`` forced to zero.
        """

        collected = tuple(errors)
        return cls(
            ecosystem=target.ecosystem,
            target=target.pattern,
            errors=collected,
            summary=LintSummary(total=len(collected), fixable=0, unfixable=len(collected)),
        )

    @property
    def has_errors(self) -> bool:
        """Return ``True`` when the check reported at least one diagnostic."""

        return bool(self.errors)


@dataclass(frozen=True, slots=True)
class IterationState:
    """Iteration counters reconstructed from conversation history."""

    prior_attempts: int
    max_iterations: int

    def __post_init__(self) -> None:
        if self.prior_attempts < 0:
            raise ValueError("prior_attempts must be non-negative")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

    @property
    def exhausted(self) -> bool:
        """Return ``True`` when no further runs should perform checks."""

        return self.prior_attempts >= self.max_iterations

    @property
    def next_iteration(self) -> int:
        """Return the iteration number a new fix request would carry."""

        return self.prior_attempts + 1

    @property
    def can_request(self) -> bool:
        """Return ``True`` when another fix request fits in the budget."""

        return self.next_iteration < self.max_iterations


__all__ = [
    "Ecosystem",
    "IterationState",
    "LintError",
    "LintResult",
    "LintSeverity",
    "LintSummary",
    "LintTarget",
]

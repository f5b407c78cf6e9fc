# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for Cargo/Clippy ``--message-format=json`` output."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from ..models import LintError, LintSeverity
from .base import clamp_position

LOGGER = logging.getLogger(__name__)

CARGO_DIAGNOSTIC_REASON: Final[str] = "compiler-message"
CLIPPY_FALLBACK_RULE: Final[str] = "clippy"
HELP_LEVEL: Final[str] = "help"
ERROR_LEVEL: Final[str] = "error"
SUGGESTION_MARKER: Final[str] = "did you mean"


class CompilerSpan(BaseModel):
    """Source span attached to a compiler message."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    line_start: int
    column_start: int
    is_primary: bool = False


class CompilerCode(BaseModel):
    """Diagnostic code block of a compiler message."""

    model_config = ConfigDict(frozen=True)

    code: str | None = None


class CompilerChild(BaseModel):
    """Advisory note nested under a compiler message."""

    model_config = ConfigDict(frozen=True)

    level: str
    message: str


class CompilerMessage(BaseModel):
    """Compiler diagnostic payload carried by a ``compiler-message`` record."""

    model_config = ConfigDict(frozen=True)

    message: str
    level: str
    code: CompilerCode | None = None
    spans: list[CompilerSpan] = Field(default_factory=list)
    children: list[CompilerChild] = Field(default_factory=list)

    def primary_span(self) -> CompilerSpan | None:
        """Return the span flagged as primary, if any."""

        return next((span for span in self.spans if span.is_primary), None)

    def has_suggestion(self) -> bool:
        """Return ``True`` when a help note proposes a replacement."""

        return any(child.level == HELP_LEVEL and SUGGESTION_MARKER in child.message for child in self.children)


def _parse_record(line: str) -> LintError | None:
    """Return the lint error described by one JSON line, if any.

    Raises:
        ValueError: If the line is not valid JSON or the message payload is malformed.
    """

    record = json.loads(line)
    if not isinstance(record, dict) or record.get("reason") != CARGO_DIAGNOSTIC_REASON:
        return None
    payload = record.get("message")
    if not payload:
        return None
    message = CompilerMessage.model_validate(payload)
    primary = message.primary_span()
    if primary is None:
        return None
    code = message.code.code if message.code is not None else None
    return LintError(
        file=primary.file_name,
        line=clamp_position(primary.line_start),
        column=clamp_position(primary.column_start),
        rule=code or CLIPPY_FALLBACK_RULE,
        severity=LintSeverity.ERROR if message.level == ERROR_LEVEL else LintSeverity.WARNING,
        message=message.message,
        fixable=message.has_suggestion(),
    )


def parse_cargo_clippy(output: str, root: Path) -> Sequence[LintError]:
    """Parse newline-delimited Cargo JSON records into lint errors.

    Each line is decoded on its own; a line that fails to decode is skipped
    without affecting the rest of the stream.

    Args:
        output: Raw stdout captured from ``cargo clippy``.
        root: Project root (span filenames are already root-relative).

    Returns:
        Sequence[LintError]: Errors for every compiler message with a primary span.
    """

    del root
    errors: list[LintError] = []
    for line_number, raw_line in enumerate(output.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue
        try:
            error = _parse_record(line)
        except ValueError as exc:
            # ValidationError and JSONDecodeError are both ValueError subclasses.
            LOGGER.debug("Skipping malformed cargo record on line %d: %s", line_number, exc)
            continue
        if error is not None:
            errors.append(error)
    return errors


__all__ = [
    "CARGO_DIAGNOSTIC_REASON",
    "CLIPPY_FALLBACK_RULE",
    "CompilerChild",
    "CompilerCode",
    "CompilerMessage",
    "CompilerSpan",
    "parse_cargo_clippy",
]

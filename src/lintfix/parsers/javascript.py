# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for ESLint's JSON formatter output."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..models import LintError, LintSeverity
from .base import MIN_POSITION, clamp_position, relative_to_root

LOGGER = logging.getLogger(__name__)

ESLINT_ERROR_LEVEL: Final[int] = 2
ESLINT_UNKNOWN_RULE: Final[str] = "unknown"


class EslintMessage(BaseModel):
    """Single message entry inside an ESLint file result."""

    model_config = ConfigDict(frozen=True)

    ruleId: str | None = None
    severity: int
    message: str
    line: int | None = None
    column: int | None = None
    fix: Any = None


class EslintFileResult(BaseModel):
    """Per-file entry of the ESLint JSON report."""

    model_config = ConfigDict(frozen=True)

    filePath: str
    messages: list[EslintMessage]


_REPORT_ADAPTER: Final[TypeAdapter[list[EslintFileResult]]] = TypeAdapter(list[EslintFileResult])


def parse_eslint(output: str, root: Path) -> Sequence[LintError]:
    """Parse ESLint ``--format json`` output into lint errors.

    Severity ``2`` maps to an error and every other level to a warning. A
    message is fixable when it carries a ``fix`` object. File-level messages
    without a position, such as ignored-file warnings, point at ``1:1``.

    Args:
        output: Raw stdout captured from ESLint.
        root: Project root used to relativise ``filePath`` values.

    Returns:
        Sequence[LintError]: Parsed errors, or an empty list when the output is malformed.
    """

    try:
        report = _REPORT_ADAPTER.validate_json(output)
    except ValidationError as exc:
        LOGGER.debug("Failed to parse ESLint output: %s", exc)
        return []
    errors: list[LintError] = []
    for file_result in report:
        file = relative_to_root(file_result.filePath, root)
        for message in file_result.messages:
            errors.append(
                LintError(
                    file=file,
                    line=clamp_position(message.line or MIN_POSITION),
                    column=clamp_position(message.column or MIN_POSITION),
                    rule=message.ruleId or ESLINT_UNKNOWN_RULE,
                    severity=LintSeverity.ERROR if message.severity == ESLINT_ERROR_LEVEL else LintSeverity.WARNING,
                    message=message.message,
                    fixable=message.fix is not None,
                ),
            )
    return errors


__all__ = ["EslintFileResult", "EslintMessage", "parse_eslint"]

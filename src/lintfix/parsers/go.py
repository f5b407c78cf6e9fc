# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parser for golangci-lint JSON output."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from ..models import LintError, LintSeverity
from .base import clamp_position

LOGGER = logging.getLogger(__name__)


class GolangciPosition(BaseModel):
    """Source position attached to a golangci-lint issue."""

    model_config = ConfigDict(frozen=True)

    Filename: str
    Line: int
    Column: int


class GolangciIssue(BaseModel):
    """Issue entry reported by golangci-lint."""

    model_config = ConfigDict(frozen=True)

    FromLinter: str
    Text: str
    Pos: GolangciPosition


class GolangciReport(BaseModel):
    """Top-level golangci-lint ``--out-format json`` document."""

    model_config = ConfigDict(frozen=True)

    Issues: list[GolangciIssue] | None = None


def parse_golangci_lint(output: str, root: Path) -> Sequence[LintError]:
    """Parse golangci-lint JSON output into lint errors.

    The report carries neither severities nor fix hints, so every issue is
    an unfixable error. A missing or null ``Issues`` array means no issues.

    Args:
        output: Raw stdout captured from golangci-lint.
        root: Project root (filenames are already root-relative).

    Returns:
        Sequence[LintError]: Parsed errors, or an empty list when the output is malformed.
    """

    del root
    try:
        report = GolangciReport.model_validate_json(output)
    except ValidationError as exc:
        LOGGER.debug("Failed to parse golangci-lint output: %s", exc)
        return []
    return [
        LintError(
            file=issue.Pos.Filename,
            line=clamp_position(issue.Pos.Line),
            column=clamp_position(issue.Pos.Column),
            rule=issue.FromLinter,
            severity=LintSeverity.ERROR,
            message=issue.Text,
            fixable=False,
        )
        for issue in report.Issues or ()
    ]


__all__ = ["GolangciIssue", "GolangciPosition", "GolangciReport", "parse_golangci_lint"]

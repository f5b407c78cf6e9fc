# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants for the lint fix loop."""

from __future__ import annotations

from pathlib import Path
from typing import Final

DEFAULT_MAX_ITERATIONS: Final[int] = 3
DEFAULT_JOBS: Final[int] = 1

FIX_TASK_NAME: Final[str] = "fix_lint_errors"
FIX_TASK_MARKER: Final[str] = f'"task":"{FIX_TASK_NAME}"'
FIX_INSTRUCTION: Final[str] = "Fix these lint errors by editing files. Do not disable lint rules."

USER_ROLE: Final[str] = "user"
TEXT_PART_TYPE: Final[str] = "text"

CONFIG_DIRNAME: Final[str] = ".lintfix"
CONFIG_FILENAME: Final[str] = "lint-fix.json"
CONFIG_RELATIVE_PATH: Final[Path] = Path(CONFIG_DIRNAME) / CONFIG_FILENAME
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "lintfix"

DEFAULT_SESSION_ID: Final[str] = "default"
TRANSCRIPT_SUFFIX: Final[str] = ".jsonl"

NOTICE_RUNNING: Final[str] = "Running lint checks..."
NOTICE_PASSED: Final[str] = "Lint passed ✓"
NOTICE_FAILED: Final[str] = "Lint failed after retries"

TIMEOUT_RETURNCODE: Final[int] = 124
NOT_STARTED_RETURNCODE: Final[int] = 127

__all__ = [
    "CONFIG_DIRNAME",
    "CONFIG_FILENAME",
    "CONFIG_RELATIVE_PATH",
    "DEFAULT_JOBS",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_SESSION_ID",
    "FIX_INSTRUCTION",
    "FIX_TASK_MARKER",
    "FIX_TASK_NAME",
    "NOTICE_FAILED",
    "NOTICE_PASSED",
    "NOTICE_RUNNING",
    "NOT_STARTED_RETURNCODE",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "TEXT_PART_TYPE",
    "TIMEOUT_RETURNCODE",
    "TRANSCRIPT_SUFFIX",
    "USER_ROLE",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for changed-file sources."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lintfix.process import CommandResult
from lintfix.sources import GIT_DIFF_COMMAND, GitDiffSource, StaticFilesSource


def test_git_diff_source_returns_non_blank_lines(tmp_path: Path) -> None:
    seen: list[tuple[Sequence[str], Path]] = []

    def runner(args: Sequence[str], root: Path) -> CommandResult:
        seen.append((args, root))
        return CommandResult(args=tuple(args), returncode=0, stdout="src/a.ts\n\nsrc/b.go\n")

    files = GitDiffSource(runner=runner).changed_files(tmp_path)

    assert files == ["src/a.ts", "src/b.go"]
    assert seen == [(GIT_DIFF_COMMAND, tmp_path)]


def test_git_diff_source_failure_yields_no_files(tmp_path: Path) -> None:
    def runner(args: Sequence[str], root: Path) -> CommandResult:
        return CommandResult(args=tuple(args), returncode=128, stderr="fatal: not a git repository")

    assert GitDiffSource(runner=runner).changed_files(tmp_path) == []


def test_static_files_source_normalises_separators(tmp_path: Path) -> None:
    assert StaticFilesSource(["src/a.ts", "lib/b.rs"]).changed_files(tmp_path) == ["src/a.ts", "lib/b.rs"]

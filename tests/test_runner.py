# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for running lint target check and fix commands."""

from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path

import pytest
from helpers import make_target

from lintfix.models import Ecosystem, LintSummary
from lintfix.process import CommandOptions, CommandResult
from lintfix.runner import CommandRunner

ESLINT_REPORT = json.dumps(
    [
        {
            "filePath": "/repo/src/index.ts",
            "messages": [
                {"ruleId": "semi", "severity": 2, "message": "Missing semicolon.", "line": 1, "column": 9, "fix": {}},
                {"ruleId": "no-undef", "severity": 2, "message": "'foo' is not defined.", "line": 2, "column": 1},
            ],
        },
    ],
)

GOLANGCI_REPORT = json.dumps(
    {
        "Issues": [
            {"FromLinter": "errcheck", "Text": "unchecked", "Pos": {"Filename": "cmd/main.go", "Line": 7, "Column": 0}},
        ],
    },
)


class RecordingExecutor:
    """Executor returning canned results keyed by command."""

    def __init__(self, results: dict[str, CommandResult]) -> None:
        self._results = results
        self.calls: list[tuple[str, CommandOptions]] = []

    def __call__(self, command: str, *, options: CommandOptions) -> CommandResult:
        self.calls.append((command, options))
        return self._results[command]


def test_check_parses_output_despite_non_zero_exit() -> None:
    target = make_target()
    executor = RecordingExecutor({"eslint check": CommandResult(args=("eslint",), returncode=1, stdout=ESLINT_REPORT)})

    result = CommandRunner(executor=executor).check(target, Path("/repo"))

    assert result.summary == LintSummary(total=2, fixable=1, unfixable=1)
    assert [error.file for error in result.errors] == ["src/index.ts", "src/index.ts"]
    assert executor.calls[0][1].cwd == Path("/repo")


def test_check_falls_back_to_stderr() -> None:
    target = make_target()
    executor = RecordingExecutor(
        {"eslint check": CommandResult(args=("eslint",), returncode=1, stdout="", stderr=ESLINT_REPORT)},
    )

    result = CommandRunner(executor=executor).check(target, Path("/repo"))

    assert result.summary.total == 2


def test_check_execution_failure_forces_unfixable() -> None:
    target = make_target()
    executor = RecordingExecutor(
        {
            "eslint check": CommandResult(
                args=("eslint",),
                returncode=124,
                stdout=ESLINT_REPORT,
                timed_out=True,
            ),
        },
    )

    result = CommandRunner(executor=executor).check(target, Path("/repo"))

    assert result.summary == LintSummary(total=2, fixable=0, unfixable=2)


def test_check_missing_binary_yields_empty_result(tmp_path: Path) -> None:
    target = make_target().model_copy(update={"check": "definitely-not-a-real-linter-binary --format json"})

    result = CommandRunner().check(target, tmp_path)

    assert result.errors == ()
    assert result.summary == LintSummary(total=0, fixable=0, unfixable=0)


def test_fix_swallows_failures(tmp_path: Path) -> None:
    target = make_target().model_copy(update={"fix": "definitely-not-a-real-linter-binary --fix"})

    assert CommandRunner().fix(target, tmp_path) is None


def test_fix_runs_in_root(tmp_path: Path) -> None:
    script = "import pathlib; pathlib.Path('fixed.txt').write_text('ok')"
    target = make_target().model_copy(update={"fix": f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"})

    CommandRunner().fix(target, tmp_path)

    assert (tmp_path / "fixed.txt").read_text() == "ok"


def test_check_runs_real_process(tmp_path: Path) -> None:
    report = json.dumps(
        {"Issues": [{"FromLinter": "govet", "Text": "shadow", "Pos": {"Filename": "main.go", "Line": 3, "Column": 2}}]},
    )
    script = f"import sys; print({report!r}); sys.exit(1)"
    target = make_target("**/*.go", Ecosystem.GO).model_copy(
        update={"check": f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"},
    )

    result = CommandRunner(timeout=30).check(target, tmp_path)

    assert result.ecosystem is Ecosystem.GO
    assert result.target == "**/*.go"
    assert result.summary == LintSummary(total=1, fixable=0, unfixable=1)


def test_check_runs_project_relative_tool_from_any_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    project = tmp_path / "project"
    tool = project / "bin" / "lint"
    tool.parent.mkdir(parents=True)
    tool.write_text(f"#!/bin/sh\nprintf '%s' {shlex.quote(GOLANGCI_REPORT)}\nexit 1\n", encoding="utf-8")
    tool.chmod(0o755)
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)
    target = make_target("**/*.go", Ecosystem.GO).model_copy(update={"check": "./bin/lint run --out-format json"})

    result = CommandRunner(timeout=30).check(target, project)

    assert result.summary == LintSummary(total=1, fixable=0, unfixable=1)
    assert result.errors[0].file == "cmd/main.go"


def test_check_command_may_use_shell_operators(tmp_path: Path) -> None:
    target = make_target("**/*.go", Ecosystem.GO).model_copy(
        update={"check": f"printf '%s' {shlex.quote(GOLANGCI_REPORT)} 2>/dev/null || true"},
    )

    result = CommandRunner(timeout=30).check(target, tmp_path)

    assert result.summary == LintSummary(total=1, fixable=0, unfixable=1)
    assert result.errors[0].line == 7
    assert result.errors[0].column == 1

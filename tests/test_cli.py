# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Smoke tests for the lintfix CLI."""

from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path

from typer.testing import CliRunner

from lintfix.cli.app import app
from lintfix.history import count_prior_attempts
from lintfix.transcript import JsonlTranscript

RUNNER = CliRunner()

_FAILING_REPORT = [
    {
        "filePath": "src/a.ts",
        "messages": [{"ruleId": "semi", "severity": 2, "message": "Missing semicolon.", "line": 1, "column": 9}],
    },
]


def _python_command(script: str) -> str:
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(script)}"


def _write_project(root: Path, *, report: list[dict[str, object]], max_iterations: int = 3) -> None:
    check = _python_command(f"import sys; print({json.dumps(report)!r}); sys.exit(1 if {bool(report)} else 0)")
    config = {
        "maxIterations": max_iterations,
        "targets": [
            {"pattern": "src/**/*.ts", "ecosystem": "js", "check": check, "fix": _python_command("pass")},
        ],
    }
    config_path = root / ".lintfix" / "lint-fix.json"
    config_path.parent.mkdir(parents=True)
    config_path.write_text(json.dumps(config), encoding="utf-8")


def test_run_requests_fix_iteration(tmp_path: Path) -> None:
    _write_project(tmp_path, report=_FAILING_REPORT)

    result = RUNNER.invoke(
        app,
        ["run", "--root", str(tmp_path), "--session", "s1", "--file", "src/a.ts", "--no-emoji"],
    )

    assert result.exit_code == 0, result.output
    assert "Requested fix iteration 1/3" in result.output
    messages = JsonlTranscript(tmp_path / ".lintfix" / "sessions").messages("s1")
    assert count_prior_attempts(messages) == 1


def test_run_reports_failure_when_budget_ends(tmp_path: Path) -> None:
    _write_project(tmp_path, report=_FAILING_REPORT, max_iterations=1)

    result = RUNNER.invoke(app, ["run", "--root", str(tmp_path), "--file", "src/a.ts", "--no-emoji"])

    assert result.exit_code == 1
    assert "Lint failed after retries" in result.output


def test_run_reports_success_for_clean_project(tmp_path: Path) -> None:
    _write_project(tmp_path, report=[])

    result = RUNNER.invoke(app, ["run", "--root", str(tmp_path), "--file", "src/a.ts", "--no-emoji"])

    assert result.exit_code == 0
    assert "Lint passed" in result.output


def test_run_without_configuration_exits_with_config_status(tmp_path: Path) -> None:
    result = RUNNER.invoke(app, ["run", "--root", str(tmp_path), "--file", "src/a.ts", "--no-emoji"])

    assert result.exit_code == 2


def test_run_rejects_session_outside_transcript_dir(tmp_path: Path) -> None:
    _write_project(tmp_path, report=_FAILING_REPORT)

    result = RUNNER.invoke(
        app,
        ["run", "--root", str(tmp_path), "--session", "../escape", "--file", "src/a.ts", "--no-emoji"],
    )

    assert result.exit_code == 2
    assert not (tmp_path / ".lintfix" / "escape.jsonl").exists()
    assert not (tmp_path / ".lintfix" / "sessions").exists()
    assert "No lint-fix configuration" in result.output


def test_check_json_output(tmp_path: Path) -> None:
    _write_project(tmp_path, report=_FAILING_REPORT)

    result = RUNNER.invoke(app, ["check", "--root", str(tmp_path), "--file", "src/a.ts", "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload[0]["target"] == "src/**/*.ts"
    assert payload[0]["errors"][0]["rule"] == "semi"


def test_targets_lists_matches(tmp_path: Path) -> None:
    _write_project(tmp_path, report=[])

    result = RUNNER.invoke(
        app,
        ["targets", "--root", str(tmp_path), "--file", "src/a.ts", "--file", "docs/readme.md", "--no-emoji"],
    )

    assert result.exit_code == 0
    assert result.stdout.startswith("js\tsrc/**/*.ts\t")

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run lint targets' check and fix commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .models import LintResult, LintTarget
from .parsers import parse_output
from .process import CommandOptions, CommandResult, run_command

LOGGER = logging.getLogger(__name__)

CommandExecutor = Callable[..., CommandResult]


class CommandRunner:
    """Execute check/fix commands for lint targets inside a project root."""

    def __init__(self, *, timeout: float | None = None, executor: CommandExecutor | None = None) -> None:
        """Create a runner.

        Args:
            timeout: Optional per-command timeout in seconds.
            executor: Command executor compatible with :func:`run_command`;
                mainly a seam for tests.
        """

        self._timeout = timeout
        self._executor = executor or run_command

    def _execute(self, command: str, root: Path) -> CommandResult:
        return self._executor(command, options=CommandOptions(cwd=root, timeout=self._timeout))

    def check(self, target: LintTarget, root: Path) -> LintResult:
        """Run ``target``'s check command and parse whatever it printed.

        Lint tools exit non-zero when they find issues, so the exit status
        is ignored. When the command could not run normally the result is
        still built from the captured output, but every error is treated as
        unfixable.

        Args:
            target: Lint target to check.
            root: Project root used as the working directory.

        Returns:
            LintResult: Parsed result for the target.
        """

        completed = self._execute(target.check, root)
        errors = parse_output(target.ecosystem, completed.output, root)
        LOGGER.debug(
            "check pattern=%s returncode=%d errors=%d",
            target.pattern,
            completed.returncode,
            len(errors),
        )
        if not completed.started or completed.timed_out:
            LOGGER.warning("check command for %s did not run normally: %s", target.pattern, completed.stderr.strip())
            return LintResult.unverified(target, errors)
        return LintResult.from_errors(target, errors)

    def fix(self, target: LintTarget, root: Path) -> None:
        """Run ``target``'s fix command, ignoring any failure.

        Args:
            target: Lint target to fix.
            root: Project root used as the working directory.
        """

        completed = self._execute(target.fix, root)
        if not completed.succeeded:
            LOGGER.debug(
                "fix command for %s exited with %d (ignored)",
                target.pattern,
                completed.returncode,
            )


__all__ = ["CommandExecutor", "CommandRunner"]

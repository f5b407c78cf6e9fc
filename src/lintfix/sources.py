# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Changed-file sources feeding a run."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from .process import CommandOptions, CommandResult, run_command

LOGGER = logging.getLogger(__name__)

GitRunner = Callable[[Sequence[str], Path], CommandResult]

GIT_DIFF_COMMAND: tuple[str, ...] = ("git", "diff", "--name-only")


def _default_git_runner(args: Sequence[str], root: Path) -> CommandResult:
    return run_command(args, options=CommandOptions(cwd=root))


class GitDiffSource:
    """Collect working-tree changes reported by ``git diff --name-only``."""

    def __init__(self, *, runner: GitRunner | None = None) -> None:
        """Create a git-backed source.

        Args:
            runner: Optional command runner used to execute git; defaults to
                :func:`run_command`.
        """

        self._runner = runner or _default_git_runner

    def changed_files(self, root: Path) -> list[str]:
        """Return changed files relative to ``root``, in git's order.

        Args:
            root: Repository root directory.

        Returns:
            list[str]: Non-blank paths; empty when git fails.
        """

        completed = self._runner(GIT_DIFF_COMMAND, root)
        if not completed.succeeded:
            LOGGER.debug("git diff failed in %s: %s", root, completed.stderr.strip())
            return []
        return [line.strip() for line in completed.stdout.splitlines() if line.strip()]


class StaticFilesSource:
    """Return a fixed list of changed files."""

    def __init__(self, files: Sequence[str]) -> None:
        self._files = [Path(file).as_posix() for file in files]

    def changed_files(self, root: Path) -> list[str]:
        del root
        return list(self._files)


__all__ = ["GIT_DIFF_COMMAND", "GitDiffSource", "GitRunner", "StaticFilesSource"]

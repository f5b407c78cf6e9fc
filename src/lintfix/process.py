# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import logging
import os
import shutil

# Bandit: subprocess usage is intentional; commands run without ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .constants import NOT_STARTED_RETURNCODE, TIMEOUT_RETURNCODE

LOGGER = logging.getLogger(__name__)

# Configured check and fix commands are shell command lines.
SHELL_PREFIX: Final[tuple[str, ...]] = ("sh", "-c")


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    timeout: float | None = None


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of an external command.

    ``started`` is ``False`` when the process could not be launched at all
    (missing executable, invalid working directory). A tool missing from a
    shell command line surfaces as the shell's exit status ``127``. A non-zero
    ``returncode`` on a started process is ordinary data, not a failure.
    """

    args: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""
    started: bool = True
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when the process ran and exited with status zero."""

        return self.started and not self.timed_out and self.returncode == 0

    @property
    def output(self) -> str:
        """Return stdout, falling back to stderr when stdout is blank."""

        return self.stdout if self.stdout.strip() else self.stderr


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="ignore")




def shell_command(command: str) -> list[str]:
    """Wrap a configured command line so it runs through ``sh``.

    Args:
        command: Command line as written in the configuration; operators such
            as ``&&``, ``||`` and redirections are interpreted by the shell.

    Returns:
        list[str]: Argument list invoking the shell with ``command``.

    Raises:
        ValueError: If the command is blank.
    """

    if not command.strip():
        raise ValueError("command must not be empty")
    return [*SHELL_PREFIX, command]


def _has_separator(value: str) -> bool:
    return os.sep in value or "/" in value or (os.altsep is not None and os.altsep in value)


def _normalize_args(args: Sequence[str], cwd: Path | None) -> list[str]:
    """Resolve the executable of ``args``.

    Bare names are looked up on ``PATH``; relative paths are taken relative
    to ``cwd``, the directory the command runs in.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If a bare executable name cannot be resolved.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")
    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]
    if _has_separator(head):
        base = cwd.absolute() if cwd is not None else Path.cwd()
        return [str(base / head_path), *rest]
    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(args: Sequence[str] | str, *, options: CommandOptions | None = None) -> CommandResult:
    """Execute ``args`` and capture its output without raising.

    Args:
        args: Argument list executed directly, or a command line run through
            :func:`shell_command`.
        options: Execution options; defaults to :class:`CommandOptions`.

    Returns:
        CommandResult: Captured outcome. Launch problems produce ``started=False``.
    """

    resolved_options = options or CommandOptions()
    try:
        argv = shell_command(args) if isinstance(args, str) else list(args)
        normalized = _normalize_args(argv, resolved_options.cwd)
    except (ValueError, FileNotFoundError) as exc:
        LOGGER.debug("unable to launch %r: %s", args, exc)
        return CommandResult(
            args=tuple(args) if not isinstance(args, str) else (args,),
            returncode=NOT_STARTED_RETURNCODE,
            stderr=str(exc),
            started=False,
        )

    try:
        # Bandit: the argument list is executed directly; shell command lines
        # come from project configuration and are passed to ``sh -c``.
        completed = subprocess.run(  # nosec B603
            normalized,
            cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
            check=False,
            capture_output=True,
            text=True,
            timeout=resolved_options.timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {resolved_options.timeout:.1f}s"
        return CommandResult(
            args=tuple(normalized),
            returncode=TIMEOUT_RETURNCODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
            timed_out=True,
        )
    except OSError as exc:
        LOGGER.debug("failed to execute %s: %s", normalized[0], exc)
        return CommandResult(
            args=tuple(normalized),
            returncode=NOT_STARTED_RETURNCODE,
            stderr=str(exc),
            started=False,
        )

    return CommandResult(
        args=tuple(normalized),
        returncode=completed.returncode,
        stdout=_ensure_text(completed.stdout),
        stderr=_ensure_text(completed.stderr),
    )


__all__ = ["SHELL_PREFIX", "CommandOptions", "CommandResult", "run_command", "shell_command"]

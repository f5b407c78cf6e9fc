# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, configuration)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import ConfigError, EngineConfig, load_config
from ..console import fail as core_fail
from ..console import info as core_info
from ..console import ok as core_ok
from ..console import warn as core_warn
from ..interfaces import ChangedFilesSource
from ..sources import GitDiffSource, StaticFilesSource

PACKAGE_LOGGER_NAME: Final[str] = "lintfix"
EXIT_FAILURE: Final[int] = 1
EXIT_CONFIG: Final[int] = 2


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = EXIT_FAILURE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around console helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        """Log a failure message."""

        core_fail(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Log a success message."""

        core_ok(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        """Log an informational message."""

        core_info(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout verbatim."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = Console(highlight=False)
    return CLILogger(console=console, use_emoji=emoji)


def configure_logging(*, verbose: bool) -> None:
    """Stream package log records to stderr.

    Args:
        verbose: Emit debug records when ``True``; warnings and above otherwise.
    """

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not getattr(logger, "_lintfix_configured", False):
        handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        setattr(logger, "_lintfix_configured", True)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def require_config(root: Path) -> EngineConfig:
    """Load the configuration for ``root`` or raise a :class:`CLIError`.

    Args:
        root: Project root directory.

    Returns:
        EngineConfig: Validated configuration.

    Raises:
        CLIError: If the configuration is missing or invalid.
    """

    try:
        config = load_config(root)
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=EXIT_CONFIG) from exc
    if config is None:
        raise CLIError(f"No lint-fix configuration found under {root}", exit_code=EXIT_CONFIG)
    return config


def resolve_files_source(files: Sequence[str] | None) -> ChangedFilesSource:
    """Return an explicit file source when ``files`` is given, git otherwise."""

    if files:
        return StaticFilesSource(files)
    return GitDiffSource()


__all__ = [
    "CLIError",
    "CLILogger",
    "EXIT_CONFIG",
    "EXIT_FAILURE",
    "build_cli_logger",
    "configure_logging",
    "require_config",
    "resolve_files_source",
]

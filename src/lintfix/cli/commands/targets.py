# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command listing the lint targets matched by changed files."""

from __future__ import annotations

from pathlib import Path

import typer

from ...matching import match_targets
from ..options import EmojiOption, FilesOption, RootOption, VerboseOption
from ..shared import CLIError, build_cli_logger, configure_logging, require_config, resolve_files_source


def list_targets(
    root: RootOption = Path("."),
    files: FilesOption = None,
    emoji: EmojiOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Show which configured targets the changed files select.

    Raises:
        typer.Exit: When the configuration cannot be loaded.
    """

    configure_logging(verbose=verbose)
    logger = build_cli_logger(emoji=emoji)
    resolved_root = root.resolve()
    try:
        config = require_config(resolved_root)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    changed = resolve_files_source(files).changed_files(resolved_root)
    matched = match_targets(changed, config.targets)
    if not matched:
        logger.info("No lint targets match the changed files.")
        return
    for target in matched:
        logger.echo(f"{target.ecosystem.value}\t{target.pattern}\t{target.check}")


def register(app: typer.Typer) -> None:
    """Register the ``targets`` command on ``app``."""

    app.command("targets")(list_targets)


__all__ = ["list_targets", "register"]

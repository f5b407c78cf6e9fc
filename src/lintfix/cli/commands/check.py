# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command running check commands without fixing or escalating."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from ...matching import match_targets
from ...models import LintResult
from ...runner import CommandRunner
from ..options import EmojiOption, FilesOption, RootOption, VerboseOption
from ..shared import (
    EXIT_FAILURE,
    CLIError,
    build_cli_logger,
    configure_logging,
    require_config,
    resolve_files_source,
)


def render_results(results: Sequence[LintResult], console: Console) -> None:
    """Render ``results`` as a Rich table.

    Args:
        results: Results with at least one error each.
        console: Console receiving the table.
    """

    table = Table(show_lines=False)
    for column in ("Target", "Location", "Rule", "Severity", "Fixable", "Message"):
        table.add_column(column)
    for result in results:
        for error in result.errors:
            table.add_row(
                result.target,
                f"{error.file}:{error.line}:{error.column}",
                error.rule,
                error.severity.value,
                "yes" if error.fixable else "no",
                error.message,
            )
    console.print(table)


def check_targets(
    root: RootOption = Path("."),
    files: FilesOption = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print results as JSON.")] = False,
    emoji: EmojiOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Run check commands for the matched targets and report their errors.

    Raises:
        typer.Exit: With status 1 when any target reports errors.
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
    runner = CommandRunner(timeout=config.timeout)
    results = [runner.check(target, resolved_root) for target in match_targets(changed, config.targets)]
    failing = [result for result in results if result.has_errors]

    if as_json:
        logger.echo(json.dumps([result.model_dump(mode="json") for result in failing], indent=2))
    elif failing:
        render_results(failing, logger.console)
        total = sum(result.summary.total for result in failing)
        fixable = sum(result.summary.fixable for result in failing)
        logger.fail(f"{total} lint issue(s) across {len(failing)} target(s), {fixable} fixable")
    elif results:
        logger.ok(f"{len(results)} target(s) clean")
    else:
        logger.info("No lint targets match the changed files.")
    if failing:
        raise typer.Exit(code=EXIT_FAILURE)


def register(app: typer.Typer) -> None:
    """Register the ``check`` command on ``app``."""

    app.command("check")(check_targets)


__all__ = ["check_targets", "register", "render_results"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command performing one check, fix and decide pass."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer

from ...constants import CONFIG_DIRNAME, DEFAULT_SESSION_ID
from ...controller import FixIterationController, RunOutcome
from ...notify import ConsoleNotifier
from ...transcript import JsonlTranscript, validate_session_id
from ..options import EmojiOption, FilesOption, RootOption, VerboseOption
from ..shared import (
    EXIT_FAILURE,
    CLIError,
    build_cli_logger,
    configure_logging,
    require_config,
    resolve_files_source,
)

SESSIONS_DIRNAME: Final[str] = "sessions"
FAILING_OUTCOMES: Final[frozenset[RunOutcome]] = frozenset({RunOutcome.FAILED, RunOutcome.ABORTED})


def run_loop(
    root: RootOption = Path("."),
    session: Annotated[str, typer.Option("--session", "-s", help="Conversation identifier.")] = DEFAULT_SESSION_ID,
    transcript_dir: Annotated[
        Path | None,
        typer.Option("--transcript-dir", help="Directory holding <session>.jsonl transcripts."),
    ] = None,
    files: FilesOption = None,
    emoji: EmojiOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Check changed files, run fixers, and request another iteration if needed.

    Raises:
        typer.BadParameter: If ``--session`` cannot name a transcript file.
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    try:
        validate_session_id(session)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--session") from exc

    configure_logging(verbose=verbose)
    logger = build_cli_logger(emoji=emoji)
    resolved_root = root.resolve()
    try:
        config = require_config(resolved_root)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    transcript = JsonlTranscript(transcript_dir or resolved_root / CONFIG_DIRNAME / SESSIONS_DIRNAME)
    controller = FixIterationController(
        config,
        resolved_root,
        conversation=transcript,
        notifier=ConsoleNotifier(use_emoji=emoji),
        files_source=resolve_files_source(files),
    )
    report = controller.run(session)

    if report.outcome is RunOutcome.REQUESTED and report.request is not None:
        logger.warn(
            f"Requested fix iteration {report.request.iteration}/{report.request.max_iterations} "
            f"in {transcript.path_for(session)}",
        )
    elif report.outcome is RunOutcome.BUDGET_EXHAUSTED:
        logger.info("Iteration budget already used for this session; nothing to do.")
    elif report.outcome is RunOutcome.ABORTED:
        logger.fail("Lint fix run aborted; re-run with --verbose for details.")
    raise typer.Exit(code=EXIT_FAILURE if report.outcome in FAILING_OUTCOMES else 0)


def register(app: typer.Typer) -> None:
    """Register the ``run`` command on ``app``."""

    app.command("run")(run_loop)


__all__ = ["register", "run_loop"]

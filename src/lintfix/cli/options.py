# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Reusable Typer option declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

RootOption = Annotated[
    Path,
    typer.Option(
        "--root",
        "-r",
        help="Project root containing the lint-fix configuration.",
        file_okay=False,
        dir_okay=True,
    ),
]
FilesOption = Annotated[
    list[str] | None,
    typer.Option(
        "--file",
        "-f",
        help="Changed file relative to the root (repeatable). Defaults to `git diff --name-only`.",
    ),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in console output.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Emit debug logging to stderr.")]

__all__ = ["EmojiOption", "FilesOption", "RootOption", "VerboseOption"]

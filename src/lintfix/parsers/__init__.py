# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tool output parsers and ecosystem dispatch."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..models import Ecosystem, LintError
from .base import OutputParser, relative_to_root
from .go import parse_golangci_lint
from .javascript import parse_eslint
from .rust import parse_cargo_clippy


def parser_for(ecosystem: Ecosystem | str) -> OutputParser | None:
    """Return the parser registered for ``ecosystem``.

    Args:
        ecosystem: Ecosystem tag, either as an enum member or raw string.

    Returns:
        OutputParser | None: Matching parser, or ``None`` for unknown tags.
    """

    try:
        tag = Ecosystem(ecosystem)
    except ValueError:
        return None
    match tag:
        case Ecosystem.JS:
            return parse_eslint
        case Ecosystem.GO:
            return parse_golangci_lint
        case Ecosystem.RUST:
            return parse_cargo_clippy
        case _:
            return None


def parse_output(ecosystem: Ecosystem | str, output: str, root: Path) -> Sequence[LintError]:
    """Parse ``output`` using the parser for ``ecosystem``.

    Args:
        ecosystem: Ecosystem tag of the tool that produced ``output``.
        output: Raw text captured from the tool.
        root: Project root the tool ran in.

    Returns:
        Sequence[LintError]: Parsed errors; empty for unknown ecosystems or bad input.
    """

    parser = parser_for(ecosystem)
    if parser is None:
        return []
    return parser(output, root)


__all__ = [
    "OutputParser",
    "parse_cargo_clippy",
    "parse_eslint",
    "parse_golangci_lint",
    "parse_output",
    "parser_for",
    "relative_to_root",
]

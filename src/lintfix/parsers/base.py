# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared parser infrastructure and helper utilities."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

from ..models import LintError

OutputParser = Callable[[str, Path], Sequence[LintError]]

MIN_POSITION: Final[int] = 1


def clamp_position(value: int) -> int:
    """Return ``value`` raised to the first valid 1-based position.

    Several tools report ``0`` for whole-line or whole-file diagnostics.

    Args:
        value: Line or column reported by the tool.

    Returns:
        int: Position that is at least ``1``.
    """

    return max(value, MIN_POSITION)


def relative_to_root(path: str, root: Path) -> str:
    """Strip the ``root`` prefix and its separator from ``path``.

    Args:
        path: Path emitted by the tool, usually absolute.
        root: Project root directory the tool ran in.

    Returns:
        str: Root-relative path, or ``path`` unchanged when it lies elsewhere.
    """

    root_text = str(root)
    for separator in dict.fromkeys(("/", os.sep)):
        prefix = root_text if root_text.endswith(separator) else f"{root_text}{separator}"
        if path.startswith(prefix):
            return path[len(prefix) :]
    return path


__all__ = ["MIN_POSITION", "OutputParser", "clamp_position", "relative_to_root"]

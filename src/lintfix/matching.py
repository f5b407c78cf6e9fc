# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Match changed files against configured lint targets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from wcmatch import glob

from .models import LintTarget

# ``**`` spans directories, ``*`` stays inside one segment, braces expand.
GLOB_FLAGS: Final[int] = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB


def matches_pattern(path: str, pattern: str) -> bool:
    """Return ``True`` when ``path`` satisfies the glob ``pattern``.

    Args:
        path: Project-relative file path using ``/`` separators.
        pattern: Glob pattern taken from a lint target.

    Returns:
        bool: Whether the path matches.
    """

    return glob.globmatch(path, pattern, flags=GLOB_FLAGS)


def match_targets(files: Iterable[str], targets: Sequence[LintTarget]) -> list[LintTarget]:
    """Return the distinct targets whose pattern matches at least one file.

    Each file is attributed to the first target, in configured order, whose
    pattern it matches. The result keeps the configured relative order of the
    qualifying targets and lists each of them once.

    Args:
        files: Changed file paths relative to the project root.
        targets: Targets in configured order.

    Returns:
        list[LintTarget]: Qualifying targets, deduplicated.
    """

    if not targets:
        return []
    matched: set[LintTarget] = set()
    for file in files:
        for target in targets:
            if matches_pattern(file, target.pattern):
                matched.add(target)
                break
    ordered: list[LintTarget] = []
    for target in targets:
        if target in matched and target not in ordered:
            ordered.append(target)
    return ordered


__all__ = ["GLOB_FLAGS", "match_targets", "matches_pattern"]

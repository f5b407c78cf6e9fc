# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from enum import Enum
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.text import Text


class MessageLevel(str, Enum):
    """Severity levels understood by :func:`emit`."""

    INFO = "info"
    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


# level -> (glyph, rich style)
_LEVEL_DECORATIONS: Final[dict[MessageLevel, tuple[str, str]]] = {
    MessageLevel.INFO: ("ℹ️ ", "cyan"),
    MessageLevel.OK: ("✅ ", "green"),
    MessageLevel.WARN: ("⚠️ ", "yellow"),
    MessageLevel.FAIL: ("❌ ", "red"),
}


def stdout_is_tty() -> bool:
    """Return ``True`` when stdout is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def console_for(*, color: bool, emoji: bool, tty: bool) -> Console:
    """Return a cached Rich console for one combination of output preferences.

    Args:
        color: Whether ANSI colour output is wanted.
        emoji: Whether Rich should render emoji shortcodes.
        tty: Whether stdout is a terminal at the time of the call.

    Returns:
        Console: Shared console instance for the preference triple.
    """

    colored = color and tty
    return Console(
        color_system="auto" if colored else None,
        force_terminal=tty,
        no_color=not colored,
        emoji=emoji,
        soft_wrap=True,
    )


def emit(level: MessageLevel, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` decorated for ``level``.

    Args:
        level: Message level selecting glyph and colour.
        msg: Text to print.
        use_emoji: Prefix the message with the level glyph.
        use_color: Force colour on or off; ``None`` follows the terminal.
    """

    tty = stdout_is_tty()
    color_enabled = tty if use_color is None else use_color
    glyph, style = _LEVEL_DECORATIONS[level]
    text = Text(f"{glyph}{msg}" if use_emoji else msg)
    if color_enabled:
        text.stylize(style)
    console_for(color=color_enabled, emoji=use_emoji, tty=tty).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    emit(MessageLevel.INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(MessageLevel.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(MessageLevel.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(MessageLevel.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


__all__ = [
    "MessageLevel",
    "console_for",
    "emit",
    "fail",
    "info",
    "ok",
    "stdout_is_tty",
    "warn",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console notifier rendering run notices through Rich."""

from __future__ import annotations

from dataclasses import dataclass

from .console import fail, info, ok
from .interfaces import NoticeVariant


@dataclass(slots=True)
class ConsoleNotifier:
    """Print notices to the terminal honouring emoji and colour preferences."""

    use_emoji: bool = True
    use_color: bool | None = None

    def notify(self, message: str, variant: NoticeVariant) -> None:
        """Render ``message`` styled for ``variant``.

        Args:
            message: Notice text.
            variant: Notice flavour selecting the style.
        """

        if variant is NoticeVariant.SUCCESS:
            ok(message, use_emoji=self.use_emoji, use_color=self.use_color)
        elif variant is NoticeVariant.ERROR:
            fail(message, use_emoji=self.use_emoji, use_color=self.use_color)
        else:
            info(message, use_emoji=self.use_emoji, use_color=self.use_color)


__all__ = ["ConsoleNotifier"]

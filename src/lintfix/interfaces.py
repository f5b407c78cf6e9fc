# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the collaborators the controller depends on."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from .history import ConversationMessage


class NoticeVariant(str, Enum):
    """Enumerate user-visible notification flavours."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@runtime_checkable
class ChangedFilesSource(Protocol):
    """Provide the changed-file list for a run."""

    def changed_files(self, root: Path) -> Sequence[str]:
        """Return changed files relative to ``root``."""
        ...


@runtime_checkable
class ConversationClient(Protocol):
    """Read conversation history and append follow-up instructions."""

    def messages(self, session_id: str) -> Sequence[ConversationMessage]:
        """Return the messages recorded for ``session_id``."""
        ...

    def prompt(self, session_id: str, text: str) -> None:
        """Append a user message containing ``text`` to ``session_id``."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """Surface short notices to the user."""

    def notify(self, message: str, variant: NoticeVariant) -> None:
        """Display ``message`` using the given ``variant``."""
        ...


__all__ = ["ChangedFilesSource", "ConversationClient", "NoticeVariant", "Notifier"]

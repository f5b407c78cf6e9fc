# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File-backed conversation transcripts stored as JSON lines."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .constants import TRANSCRIPT_SUFFIX
from .history import ConversationMessage

LOGGER = logging.getLogger(__name__)


def validate_session_id(session_id: str) -> str:
    """Return ``session_id`` when it can name a transcript file.

    Args:
        session_id: Conversation identifier.

    Returns:
        str: The unchanged identifier.

    Raises:
        ValueError: If the identifier is not a plain file name.
    """

    separators = {"/", os.sep, os.altsep} - {None}
    if not session_id.strip() or session_id in {".", ".."} or any(sep in session_id for sep in separators):
        raise ValueError(f"invalid session id {session_id!r}: expected a plain file name")
    return session_id


class JsonlTranscript:
    """Store each session as ``<directory>/<session_id>.jsonl``.

    Messages are only ever appended; existing lines are never rewritten.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def path_for(self, session_id: str) -> Path:
        """Return the transcript file backing ``session_id``.

        Raises:
            ValueError: If ``session_id`` is not a plain file name.
        """

        return self._directory / f"{validate_session_id(session_id)}{TRANSCRIPT_SUFFIX}"

    def messages(self, session_id: str) -> list[ConversationMessage]:
        """Return the messages stored for ``session_id``.

        Args:
            session_id: Conversation identifier.

        Returns:
            list[ConversationMessage]: Stored messages; malformed or undecodable
            lines are skipped.
        """

        path = self.path_for(session_id)
        if not path.is_file():
            return []
        messages: list[ConversationMessage] = []
        for line_number, raw_bytes in enumerate(path.read_bytes().splitlines(), start=1):
            if not raw_bytes.strip():
                continue
            try:
                messages.append(ConversationMessage.model_validate_json(raw_bytes.decode("utf-8")))
            except (UnicodeDecodeError, ValidationError) as exc:
                LOGGER.debug("skipping malformed transcript line %s:%d: %s", path, line_number, exc)
        return messages

    def append(self, session_id: str, message: ConversationMessage) -> None:
        """Append ``message`` to the transcript of ``session_id``."""

        path = self.path_for(session_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(message.model_dump_json())
            handle.write("\n")

    def prompt(self, session_id: str, text: str) -> None:
        """Append a user message containing ``text``."""

        self.append(session_id, ConversationMessage.user_text(text))


__all__ = ["JsonlTranscript", "validate_session_id"]

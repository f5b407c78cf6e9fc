# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Conversation messages, fix-request payloads and history scanning."""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .constants import FIX_INSTRUCTION, FIX_TASK_MARKER, FIX_TASK_NAME, TEXT_PART_TYPE, USER_ROLE
from .models import IterationState, LintResult


class MessagePart(BaseModel):
    """One part of a conversation message; only text parts are inspected."""

    model_config = ConfigDict(frozen=True)

    type: str
    text: str | None = None


class ConversationMessage(BaseModel):
    """Message authored in the conversation that triggered a run."""

    model_config = ConfigDict(frozen=True)

    role: str
    parts: tuple[MessagePart, ...] = Field(default_factory=tuple)

    @classmethod
    def user_text(cls, text: str) -> ConversationMessage:
        """Return a user message carrying a single text part."""

        return cls(role=USER_ROLE, parts=(MessagePart(type=TEXT_PART_TYPE, text=text),))

    def texts(self) -> Iterable[str]:
        """Yield the text of every text part."""

        for part in self.parts:
            if part.type == TEXT_PART_TYPE and part.text:
                yield part.text


class FixRequest(BaseModel):
    """Machine-readable instruction asking the agent to fix lint errors."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    task: str = FIX_TASK_NAME
    instruction: str = FIX_INSTRUCTION
    iteration: int = Field(ge=1)
    max_iterations: int = Field(ge=1, alias="maxIterations")
    results: tuple[LintResult, ...]

    def to_text(self) -> str:
        """Serialise the request as compact JSON.

        The compact separators keep ``"task":"fix_lint_errors"`` verbatim in
        the text so that history scans recognise it.
        """

        return json.dumps(self.model_dump(mode="json", by_alias=True), separators=(",", ":"), ensure_ascii=False)


def build_fix_request(state: IterationState, results: Sequence[LintResult]) -> FixRequest:
    """Return the fix request for the next iteration.

    Args:
        state: Iteration counters derived from history.
        results: Targets still failing after the fix attempt.

    Returns:
        FixRequest: Payload ready to be sent into the conversation.
    """

    return FixRequest(iteration=state.next_iteration, max_iterations=state.max_iterations, results=tuple(results))


def is_fix_request_text(text: str) -> bool:
    """Return ``True`` when ``text`` is a fix request produced by this engine.

    A text counts when it decodes to a JSON object whose ``task`` equals the
    fix task name. Texts that do not decode fall back to a search for the
    compact marker.

    Args:
        text: Text content of a message part.

    Returns:
        bool: Whether the text is a fix request.
    """

    try:
        payload = json.loads(text)
    except ValueError:
        return FIX_TASK_MARKER in text
    if isinstance(payload, dict):
        return payload.get("task") == FIX_TASK_NAME
    return FIX_TASK_MARKER in text


def count_prior_attempts(messages: Iterable[ConversationMessage]) -> int:
    """Count the user messages in ``messages`` that carry a fix request.

    Args:
        messages: Conversation history in any order.

    Returns:
        int: Number of earlier fix requests.
    """

    return sum(
        1
        for message in messages
        if message.role == USER_ROLE and any(is_fix_request_text(text) for text in message.texts())
    )


__all__ = [
    "ConversationMessage",
    "FixRequest",
    "MessagePart",
    "build_fix_request",
    "count_prior_attempts",
    "is_fix_request_text",
]

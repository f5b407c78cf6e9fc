# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Collaborator fakes and model builders shared by the test-suite."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lintfix.history import ConversationMessage
from lintfix.interfaces import NoticeVariant
from lintfix.models import Ecosystem, LintError, LintResult, LintSeverity, LintTarget


def make_target(pattern: str = "src/**/*.ts", ecosystem: Ecosystem = Ecosystem.JS, name: str = "eslint") -> LintTarget:
    return LintTarget(pattern=pattern, ecosystem=ecosystem, check=f"{name} check", fix=f"{name} fix")


def make_error(*, fixable: bool = False, rule: str = "no-unused-vars") -> LintError:
    return LintError(
        file="src/index.ts",
        line=3,
        column=7,
        rule=rule,
        severity=LintSeverity.ERROR,
        message="'x' is assigned a value but never used.",
        fixable=fixable,
    )


class FakeConversation:
    """In-memory conversation recording prompts."""

    def __init__(self, messages: Sequence[ConversationMessage] = ()) -> None:
        self.history = list(messages)
        self.prompts: list[tuple[str, str]] = []
        self.reads = 0

    def messages(self, session_id: str) -> list[ConversationMessage]:
        self.reads += 1
        return list(self.history)

    def prompt(self, session_id: str, text: str) -> None:
        self.prompts.append((session_id, text))
        self.history.append(ConversationMessage.user_text(text))


class FakeNotifier:
    """Notifier capturing notices."""

    def __init__(self) -> None:
        self.notices: list[tuple[str, NoticeVariant]] = []

    def notify(self, message: str, variant: NoticeVariant) -> None:
        self.notices.append((message, variant))


class FakeFiles:
    """Changed-file source returning a fixed list."""

    def __init__(self, files: Sequence[str]) -> None:
        self.files = list(files)

    def changed_files(self, root: Path) -> list[str]:
        return list(self.files)


class ScriptedRunner:
    """Runner returning queued check results per target and recording calls."""

    def __init__(self, script: dict[str, list[int]]) -> None:
        self._script = {pattern: list(counts) for pattern, counts in script.items()}
        self.calls: list[tuple[str, str]] = []

    def check(self, target: LintTarget, root: Path) -> LintResult:
        self.calls.append(("check", target.pattern))
        queue = self._script.get(target.pattern, [])
        count = queue.pop(0) if queue else 0
        return LintResult.from_errors(target, [make_error() for _ in range(count)])

    def fix(self, target: LintTarget, root: Path) -> None:
        self.calls.append(("fix", target.pattern))

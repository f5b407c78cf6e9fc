# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Bounded check, fix and re-check loop driven by conversation history."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .config import EngineConfig
from .constants import NOTICE_FAILED, NOTICE_PASSED, NOTICE_RUNNING
from .history import FixRequest, build_fix_request, count_prior_attempts
from .interfaces import ChangedFilesSource, ConversationClient, NoticeVariant, Notifier
from .matching import match_targets
from .models import IterationState, LintResult, LintTarget
from .runner import CommandRunner
from .sources import GitDiffSource

LOGGER = logging.getLogger(__name__)


class RunState(str, Enum):
    """States a single controller run moves through."""

    IDLE = "idle"
    DETECTING = "detecting"
    PER_TARGET_CHECK_FIX = "per_target_check_fix"
    DECIDING = "deciding"
    REQUESTING = "requesting"
    REPORTING = "reporting"
    DONE = "done"


class RunOutcome(str, Enum):
    """Observable result of a run."""

    NOOP = "noop"
    BUDGET_EXHAUSTED = "budget_exhausted"
    SUCCESS = "success"
    REQUESTED = "requested"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class RunReport:
    """Summary of what one run observed and decided."""

    state: RunState
    outcome: RunOutcome
    iteration: IterationState | None = None
    targets: tuple[LintTarget, ...] = ()
    results: tuple[LintResult, ...] = ()
    request: FixRequest | None = None
    files: tuple[str, ...] = field(default_factory=tuple)


class FixIterationController:
    """Drive one detect, check/fix and decide pass for a conversation.

    The controller keeps no state between runs: the iteration count is
    rebuilt from the conversation history every time :meth:`run` is called.
    """

    def __init__(
        self,
        config: EngineConfig,
        root: Path,
        *,
        conversation: ConversationClient,
        notifier: Notifier,
        files_source: ChangedFilesSource | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        """Create a controller bound to a project root.

        Args:
            config: Validated engine configuration.
            root: Project root used for matching and command execution.
            conversation: Client used to read history and send fix requests.
            notifier: Sink for user-visible notices.
            files_source: Changed-file provider; defaults to :class:`GitDiffSource`.
            runner: Command runner; defaults to one honouring ``config.timeout``.
        """

        self._config = config
        self._root = root
        self._conversation = conversation
        self._notifier = notifier
        self._files_source = files_source or GitDiffSource()
        self._runner = runner or CommandRunner(timeout=config.timeout)

    def run(self, session_id: str) -> RunReport:
        """Execute one run for ``session_id``.

        Failures raised by collaborators are logged and end the run; they never
        propagate to the caller.

        Args:
            session_id: Conversation whose history bounds the iteration count.

        Returns:
            RunReport: Final state and outcome of the run.
        """

        try:
            return self._run(session_id)
        except Exception:  # noqa: BLE001
            LOGGER.exception("lint fix run aborted for session %s", session_id)
            return RunReport(state=RunState.DONE, outcome=RunOutcome.ABORTED)

    def _run(self, session_id: str) -> RunReport:
        LOGGER.debug("state=%s session=%s", RunState.DETECTING.value, session_id)
        files = tuple(self._files_source.changed_files(self._root))
        if not files:
            return RunReport(state=RunState.DONE, outcome=RunOutcome.NOOP)

        targets = tuple(match_targets(files, self._config.targets))
        if not targets:
            return RunReport(state=RunState.DONE, outcome=RunOutcome.NOOP, files=files)

        prior_attempts = count_prior_attempts(self._conversation.messages(session_id))
        iteration = IterationState(prior_attempts=prior_attempts, max_iterations=self._config.max_iterations)
        if iteration.exhausted:
            LOGGER.debug("iteration budget exhausted (%d/%d)", prior_attempts, iteration.max_iterations)
            return RunReport(
                state=RunState.DONE,
                outcome=RunOutcome.BUDGET_EXHAUSTED,
                iteration=iteration,
                targets=targets,
                files=files,
            )

        self._notifier.notify(NOTICE_RUNNING, NoticeVariant.INFO)
        LOGGER.debug("state=%s targets=%d", RunState.PER_TARGET_CHECK_FIX.value, len(targets))
        results = tuple(self.check_and_fix_all(targets))

        LOGGER.debug("state=%s failing=%d", RunState.DECIDING.value, len(results))
        if not results:
            self._notifier.notify(NOTICE_PASSED, NoticeVariant.SUCCESS)
            return RunReport(
                state=RunState.REPORTING,
                outcome=RunOutcome.SUCCESS,
                iteration=iteration,
                targets=targets,
                files=files,
            )

        if iteration.can_request:
            request = build_fix_request(iteration, results)
            self._conversation.prompt(session_id, request.to_text())
            return RunReport(
                state=RunState.REQUESTING,
                outcome=RunOutcome.REQUESTED,
                iteration=iteration,
                targets=targets,
                results=results,
                request=request,
                files=files,
            )

        self._notifier.notify(NOTICE_FAILED, NoticeVariant.ERROR)
        return RunReport(
            state=RunState.REPORTING,
            outcome=RunOutcome.FAILED,
            iteration=iteration,
            targets=targets,
            results=results,
            files=files,
        )

    def check_and_fix(self, target: LintTarget) -> LintResult | None:
        """Check ``target``, attempt a fix when needed, and re-check.

        Args:
            target: Lint target to process.

        Returns:
            LintResult | None: Post-fix result when errors remain, otherwise ``None``.
        """

        result = self._runner.check(target, self._root)
        if not result.has_errors:
            return None
        self._runner.fix(target, self._root)
        result = self._runner.check(target, self._root)
        return result if result.has_errors else None

    def check_and_fix_all(self, targets: Sequence[LintTarget]) -> list[LintResult]:
        """Process ``targets`` and return the results that still have errors.

        Targets run concurrently when ``jobs`` allows it; results keep the
        order of ``targets`` either way.

        Args:
            targets: Matched targets in matcher order.

        Returns:
            list[LintResult]: Failing results in target order.
        """

        if self._config.jobs > 1 and len(targets) > 1:
            ordered = self._execute_in_parallel(targets)
        else:
            ordered = [self.check_and_fix(target) for target in targets]
        return [result for result in ordered if result is not None]

    def _execute_in_parallel(self, targets: Sequence[LintTarget]) -> list[LintResult | None]:
        slots: list[LintResult | None] = [None] * len(targets)
        with ThreadPoolExecutor(max_workers=self._config.jobs) as executor:
            future_map = {executor.submit(self.check_and_fix, target): order for order, target in enumerate(targets)}
            for future in as_completed(future_map):
                slots[future_map[future]] = future.result()
        return slots


__all__ = ["FixIterationController", "RunOutcome", "RunReport", "RunState"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from helpers import FakeConversation, FakeNotifier


@pytest.fixture
def conversation() -> FakeConversation:
    """Return an empty in-memory conversation."""
    return FakeConversation()


@pytest.fixture
def notifier() -> FakeNotifier:
    """Return a notifier that records notices."""
    return FakeNotifier()

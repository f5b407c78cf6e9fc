# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for matching changed files to lint targets."""

from __future__ import annotations

from helpers import make_target

from lintfix.matching import match_targets, matches_pattern
from lintfix.models import Ecosystem


def test_match_targets_matches_files_against_patterns() -> None:
    targets = [
        make_target("src/**/*.ts"),
        make_target("tests/**/*.test.ts", name="eslint-tests"),
    ]

    result = match_targets(["src/index.ts", "src/utils.ts", "tests/parsers.test.ts"], targets)

    assert result == targets


def test_match_targets_deduplicates_targets() -> None:
    target = make_target("src/**/*.ts")

    result = match_targets(["src/index.ts", "src/utils.ts", "src/deep/nested/mod.ts"], [target])

    assert result == [target]


def test_match_targets_excludes_unmatched_files() -> None:
    targets = [make_target("src/**/*.ts")]

    assert match_targets(["docs/README.md", ".gitignore"], targets) == []


def test_match_targets_empty_inputs() -> None:
    targets = [make_target("src/**/*.ts")]

    assert match_targets([], targets) == []
    assert match_targets(["src/index.ts"], []) == []


def test_match_targets_single_target_scenario() -> None:
    targets = [make_target("src/**/*.ts")]

    result = match_targets(["src/a.ts", "docs/readme.md"], targets)

    assert len(result) == 1
    assert result[0].pattern == "src/**/*.ts"


def test_first_matching_target_wins_per_file() -> None:
    broad = make_target("**/*.ts", name="broad")
    narrow = make_target("src/**/*.ts", name="narrow")

    result = match_targets(["src/index.ts"], [broad, narrow])

    assert result == [broad]


def test_match_targets_preserves_configured_order() -> None:
    go = make_target("**/*.go", Ecosystem.GO, name="golangci")
    rust = make_target("**/*.rs", Ecosystem.RUST, name="clippy")
    js = make_target("web/**/*.js", name="eslint")

    result = match_targets(["web/app.js", "crates/core/lib.rs", "cmd/main.go"], [go, rust, js])

    assert result == [go, rust, js]


def test_equal_target_records_count_once() -> None:
    first = make_target("src/**/*.ts")
    duplicate = make_target("src/**/*.ts")

    result = match_targets(["src/index.ts"], [first, duplicate])

    assert result == [first]


def test_matches_pattern_globstar_semantics() -> None:
    assert matches_pattern("src/a.ts", "src/**/*.ts")
    assert matches_pattern("src/a/b/c.ts", "src/**/*.ts")
    assert not matches_pattern("src/a/b.ts", "src/*.ts")
    assert not matches_pattern("lib/a.ts", "src/**/*.ts")


def test_matches_pattern_brace_expansion() -> None:
    assert matches_pattern("src/view.tsx", "src/**/*.{ts,tsx}")
    assert not matches_pattern("src/view.js", "src/**/*.{ts,tsx}")

"""Tests for colorchain.core.pattern – transition patterns and move rules."""

from __future__ import annotations

import pytest

from colorchain.core.colors import Color
from colorchain.core.pattern import (
    collapse_runs,
    derive_pattern,
    extend_pattern,
    is_pattern_complete,
    is_valid_next_color,
)

R, B, G, Y = Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW


# ---------------------------------------------------------------------------
# collapse_runs / extend_pattern
# ---------------------------------------------------------------------------

class TestCollapseRuns:
    def test_empty(self):
        assert collapse_runs([]) == []

    def test_runs_collapse(self):
        assert collapse_runs([R, R, B, B, B, R]) == [R, B, R]

    def test_no_duplicates_unchanged(self):
        seq = [R, B, G, R, Y, B]
        assert collapse_runs(seq) == seq

    def test_idempotent(self):
        once = collapse_runs([G, G, R, B, B, G, G])
        assert collapse_runs(once) == once

    def test_non_consecutive_repeats_kept(self):
        assert collapse_runs([R, B, R, B]) == [R, B, R, B]


class TestExtendPattern:
    def test_first_color_appended(self):
        assert extend_pattern([], R) == [R]

    def test_repeat_not_appended(self):
        assert extend_pattern([R, B], B) == [R, B]

    def test_new_color_appended(self):
        assert extend_pattern([R, B], R) == [R, B, R]

    def test_does_not_mutate_input(self):
        original = [R]
        extend_pattern(original, B)
        assert original == [R]


# ---------------------------------------------------------------------------
# derive_pattern
# ---------------------------------------------------------------------------

class TestDerivePattern:
    def test_transitions(self):
        assert derive_pattern([R, R, B, G, G, B]) == [R, B, G, B]

    def test_empty_sequence(self):
        assert derive_pattern([]) == []

    def test_single_color_is_doubled(self):
        assert derive_pattern([R]) == [R, R]

    def test_monochrome_run_is_doubled(self):
        assert derive_pattern([B, B, B, B]) == [B, B]

    def test_always_at_least_two(self):
        for seq in ([R], [R, R], [R, B], [G, G, G, Y]):
            assert len(derive_pattern(seq)) >= 2


# ---------------------------------------------------------------------------
# is_valid_next_color
# ---------------------------------------------------------------------------

class TestIsValidNextColor:
    def test_first_must_match_pattern_start(self):
        assert is_valid_next_color([], [R, B, R], R)
        assert not is_valid_next_color([], [R, B, R], B)

    def test_same_color_continuation(self):
        assert is_valid_next_color([R], [R, B, R], R)
        assert is_valid_next_color([R, B], [R, B, R], B)

    def test_next_transition(self):
        assert is_valid_next_color([R], [R, B, R], B)
        assert not is_valid_next_color([R], [R, B, R], G)

    def test_wraps_cyclically(self):
        # After the full pattern, the next transition wraps to pattern[0].
        assert is_valid_next_color([R, B], [R, B], R)
        assert not is_valid_next_color([R, B], [R, B], G)

    def test_wrap_on_longer_pattern(self):
        target = [R, B, G]
        assert is_valid_next_color([R, B, G], target, R)
        assert not is_valid_next_color([R, B, G], target, B)

    def test_empty_target_rejects(self):
        assert not is_valid_next_color([], [], R)


# ---------------------------------------------------------------------------
# is_pattern_complete
# ---------------------------------------------------------------------------

class TestIsPatternComplete:
    def test_exact_match(self):
        assert is_pattern_complete([R, B, R], [R, B, R])

    @pytest.mark.parametrize("selected", [[R], [R, B], [R, B, R, B]])
    def test_length_mismatch(self, selected):
        assert not is_pattern_complete(selected, [R, B, R])

    def test_element_mismatch(self):
        assert not is_pattern_complete([R, G, R], [R, B, R])

    def test_prefix_is_not_complete(self):
        assert not is_pattern_complete([R, B], [R, B, R])

    def test_empty_never_complete(self):
        assert not is_pattern_complete([], [R, B])
        assert not is_pattern_complete([R, B], [])

#!/usr/bin/env python3
"""
Tests for step-by-step replay of the search algorithms.
"""

import random

import pytest

from genomatch.matching import (
    Algorithm,
    ShiftReason,
    StepState,
    count_steps,
    search,
    step_state,
    trace,
)

ALL_ALGORITHMS = list(Algorithm)
COMPARISON_STEPPED = [a for a in Algorithm if a is not Algorithm.RABIN_KARP]


class TestHorspoolTrajectory:
    """Replay of Horspool on ATGCATGC / ATGC."""

    SUBJECT = "ATGCATGC"
    PATTERN = "ATGC"

    def state(self, k):
        return step_state(self.SUBJECT, self.PATTERN, Algorithm.HORSPOOL, k)

    def test_first_step(self):
        assert self.state(0) == StepState(
            search_index=0,
            pattern_index=3,
            is_match=True,
            comparisons_so_far=0,
            positions_found=(),
            last_shift=0,
            shift_reason=None,
        )

    def test_second_step(self):
        state = self.state(1)
        assert state.search_index == 0
        assert state.pattern_index == 2
        assert state.comparisons_so_far == 1

    def test_after_first_match(self):
        state = self.state(4)
        assert state.search_index == 1
        assert state.pattern_index == 3
        assert state.is_match is False
        assert state.positions_found == (0,)
        assert state.last_shift == 1
        assert state.shift_reason is ShiftReason.MATCH

    def test_after_bad_character_shift(self):
        state = self.state(5)
        assert state.search_index == 4
        assert state.is_match is True
        assert state.comparisons_so_far == 5
        assert state.last_shift == 3
        assert state.shift_reason is ShiftReason.BAD_CHARACTER

    def test_final_state(self):
        assert count_steps(self.SUBJECT, self.PATTERN, "horspool") == 9
        final = self.state(9)
        assert final.done
        assert final.positions_found == (0, 4)
        assert final.comparisons_so_far == 9
        assert final.search_index == 5
        assert self.state(100) == final


class TestReplayMatchesSearch:
    """Replaying to the end reproduces ``search``."""

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_final_state_matches_search(self, algorithm):
        rng = random.Random(5)
        for _ in range(20):
            subject = "".join(rng.choice("ACGT") for _ in range(rng.randint(0, 40)))
            pattern = "".join(rng.choice("ACG") for _ in range(rng.randint(1, 4)))
            result = search(subject, pattern, algorithm)
            steps = count_steps(subject, pattern, algorithm)
            final = step_state(subject, pattern, algorithm, steps)
            assert final.done
            assert final.positions_found == result.positions
            assert final.comparisons_so_far == result.comparisons

    @pytest.mark.parametrize("algorithm", COMPARISON_STEPPED)
    def test_one_comparison_per_step(self, algorithm):
        subject, pattern = "ACGTTACGTACGGACGT", "ACG"
        for k in range(count_steps(subject, pattern, algorithm)):
            state = step_state(subject, pattern, algorithm, k)
            assert state.comparisons_so_far == k
            assert not state.done
            j = state.pattern_index
            expected = subject[state.search_index + j] == pattern[j]
            assert state.is_match == expected

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_positions_grow_monotonically(self, algorithm):
        states = trace("ACGACGACGTACG", "ACG", algorithm)
        for previous, current in zip(states, states[1:]):
            seen = len(previous.positions_found)
            assert current.positions_found[:seen] == previous.positions_found
        assert states[-1].positions_found == (0, 3, 6, 10)


class TestPurity:
    """Replay is deterministic and restartable."""

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_same_arguments_same_state(self, algorithm):
        first = step_state("ATGCATGCATGC", "TGCA", algorithm, 3)
        second = step_state("ATGCATGCATGC", "TGCA", algorithm, 3)
        assert first == second

    def test_backwards_and_forwards(self):
        states = [step_state("ATGCATGC", "ATGC", "boyer-moore", k) for k in range(9)]
        again = [step_state("ATGCATGC", "ATGC", "boyer-moore", k) for k in reversed(range(9))]
        assert states == list(reversed(again))

    def test_algorithm_names_accepted(self):
        by_name = step_state("ATGC", "TG", "Boyer Moore", 0)
        assert by_name == step_state("ATGC", "TG", Algorithm.BOYER_MOORE, 0)


class TestShiftReasons:
    """Boyer-Moore reports which rule produced each shift."""

    def test_good_suffix_rule_is_reported(self):
        subject = "GCATCGCAGAGAGTATACAGTACG"
        states = trace(subject, "GCAGAGAG", Algorithm.BOYER_MOORE)
        reasons = {s.shift_reason for s in states}
        assert ShiftReason.BAD_CHARACTER in reasons
        assert ShiftReason.GOOD_SUFFIX in reasons
        assert ShiftReason.MATCH in reasons
        assert states[-1].positions_found == (5,)

    def test_kmp_failure_links(self):
        states = trace("AAAB", "AAB", Algorithm.KMP)
        assert ShiftReason.FAILURE_LINK in {s.shift_reason for s in states}


class TestEdgeCases:
    """Degenerate inputs and argument checks."""

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_empty_pattern(self, algorithm):
        assert count_steps("AAAA", "", algorithm) == 0
        state = step_state("AAAA", "", algorithm, 0)
        assert state.done
        assert state.positions_found == ()
        assert state.comparisons_so_far == 0

    def test_negative_step(self):
        with pytest.raises(ValueError):
            step_state("ATGC", "TG", "naive", -1)

    def test_rabin_karp_steps_are_windows(self):
        assert count_steps("ATGCATGC", "ATGC", "rabin-karp") == 5
        state = step_state("ATGCATGC", "ATGC", "rabin-karp", 1)
        assert state.search_index == 1
        assert state.pattern_index == -1
        assert state.is_match is False
        assert state.comparisons_so_far == 4
        assert state.positions_found == (0,)

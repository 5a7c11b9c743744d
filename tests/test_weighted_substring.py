"""Tests for the weighted approximate common substring matcher."""

import threading

import pytest

from dp_tools.errors import ComputationCancelled, InvalidConfigurationError, UnknownSymbolError
from dp_tools.weighted_substring import (
    EMPTY_MATCH,
    SubstringResult,
    WeightedSubstringMatcher,
    find_best_substring,
)
from dp_tools.weights import WeightTable


class TestGoldenValues:
    def test_reference_pair(self, uniform):
        result = find_best_substring("ABCAABCAA", "ABBCAACCBBBBBB", uniform, 5.0)
        assert (result.score, result.start1, result.start2, result.length) == (4.0, 1, 2, 4)
        assert result.text1 == "BCAA"
        assert result.text2 == "BCAA"

    def test_idempotent(self, uniform):
        matcher = WeightedSubstringMatcher(uniform, 5.0)
        assert matcher.run("ABCAABCAA", "ABBCAACCBBBBBB") == matcher.run("ABCAABCAA", "ABBCAACCBBBBBB")

    def test_str(self, uniform):
        text = str(find_best_substring("ABCAABCAA", "ABBCAACCBBBBBB", uniform, 5.0))
        assert "Score: 4.00" in text
        assert "Substring1: BCAA" in text


class TestApproximateRuns:
    def test_zero_penalty_spans_mismatch(self, uniform):
        result = find_best_substring("ABXCD", "ABYCD", uniform, 0.0)
        assert result == SubstringResult(4.0, 0, 0, 5, "ABXCD", "ABYCD")

    def test_small_penalty_keeps_run_alive(self, uniform):
        result = find_best_substring("ABXCD", "ABYCD", uniform, 1.0)
        assert result == SubstringResult(3.0, 0, 0, 5, "ABXCD", "ABYCD")

    def test_large_penalty_resets_and_first_max_wins(self, uniform):
        result = find_best_substring("ABXCD", "ABYCD", uniform, 5.0)
        assert result == SubstringResult(2.0, 0, 0, 2, "AB", "AB")

    def test_weights_change_the_winner(self, proportional):
        # E is the most frequent letter, Z the least
        result = find_best_substring("ZZZE", "ZZZQE", proportional, 5.0)
        assert result.text1 == "E"
        assert result.score == pytest.approx(10.0)


class TestCaseInsensitivity:
    def test_mixed_case_matches(self, uniform):
        result = find_best_substring("abc", "ABC", uniform, 5.0)
        assert result.score == 3.0
        assert result.text1 == "abc"
        assert result.text2 == "ABC"

    def test_lowercase_weight_lookup(self, proportional):
        assert find_best_substring("e", "E", proportional, 1.0).score == pytest.approx(10.0)


class TestEdgeCases:
    @pytest.mark.parametrize("v,w", [("", ""), ("ABC", ""), ("", "ABC")])
    def test_empty_sequences(self, uniform, v, w):
        assert find_best_substring(v, w, uniform, 5.0) == EMPTY_MATCH

    def test_no_common_symbol(self, uniform):
        result = find_best_substring("ABC", "XYZ", uniform, 5.0)
        assert result == SubstringResult(0.0, -1, -1, 0, "", "")

    def test_unknown_symbol_in_first(self, uniform):
        with pytest.raises(UnknownSymbolError) as exc:
            find_best_substring("AB1", "AB", uniform, 5.0)
        assert exc.value.symbol == "1"

    def test_unknown_symbol_in_second_without_match(self, uniform):
        with pytest.raises(UnknownSymbolError):
            find_best_substring("AB", "X-Y", uniform, 5.0)

    def test_unknown_symbol_is_a_key_error(self, uniform):
        with pytest.raises(KeyError):
            find_best_substring("A B", "AB", uniform, 5.0)

    @pytest.mark.parametrize("penalty", [-1.0, float("nan"), float("inf")])
    def test_invalid_penalty(self, uniform, penalty):
        with pytest.raises(InvalidConfigurationError):
            WeightedSubstringMatcher(uniform, penalty)


class TestCancellation:
    def test_set_event_cancels(self, uniform):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(ComputationCancelled):
            find_best_substring("ABC", "ABC", uniform, 5.0, cancel=cancel)

    def test_empty_first_string_never_checks(self, uniform):
        cancel = threading.Event()
        cancel.set()
        assert find_best_substring("", "ABC", uniform, 5.0, cancel=cancel) == EMPTY_MATCH

"""Tests for spec tolerance rules."""

import pytest

from mpn_mcp.similarity.tolerance import (
    CompatibleSet,
    ExactMatch,
    MaximumAllowed,
    MinimumRequired,
    PercentageTolerance,
    RangeTolerance,
    as_number,
    compatible_set,
    exact_match,
    maximum_allowed,
    minimum_required,
    percentage_tolerance,
    range_tolerance,
)


class TestAsNumber:

    def test_numbers_and_strings(self):
        assert as_number(5) == 5.0
        assert as_number(" 3.3 ") == 3.3
        assert as_number("X7R") is None

    def test_bool_is_not_number(self):
        assert as_number(True) is None


class TestExactMatch:

    def test_case_insensitive_strings(self):
        assert exact_match().compare("x7r", "X7R ") == 1.0

    def test_numeric_strings(self):
        assert exact_match().compare(3.3, "3.3") == 1.0
        assert exact_match().compare(3.3, 5) == 0.0

    def test_missing(self):
        assert exact_match().compare(None, "A") == 0.0
        assert not exact_match().is_acceptable("A", None)


class TestPercentageTolerance:

    def test_within_band(self):
        assert percentage_tolerance(5.0).compare(100, 104) == 1.0

    def test_linear_decay(self):
        assert percentage_tolerance(5.0).compare(100, 107.5) == pytest.approx(0.5)

    def test_outside_double_band(self):
        assert percentage_tolerance(5.0).compare(100, 110) == 0.0

    def test_zero_original(self):
        rule = PercentageTolerance(5.0)
        assert rule.compare(0, 0) == 1.0
        assert rule.compare(0, 1) == 0.0


class TestMinimumRequired:

    @pytest.mark.parametrize("original,candidate,score", [
        (100, 100, 1.0),
        (100, 110, 0.95),
        (100, 90, 0.8),
        (100, 89, 0.0),
    ])
    def test_scores(self, original, candidate, score):
        assert minimum_required().compare(original, candidate) == pytest.approx(score)

    @pytest.mark.parametrize("original,candidate,acceptable", [
        (100, 90, True),
        (100, 89, False),
        (100, 100, True),
        (100, 110, True),
    ])
    def test_acceptable(self, original, candidate, acceptable):
        assert MinimumRequired().is_acceptable(original, candidate) is acceptable


class TestMaximumAllowed:

    def test_lower_is_better(self):
        assert maximum_allowed(2.0).compare(10, 5) == 0.98

    def test_within_factor(self):
        assert maximum_allowed(2.0).compare(10, 15) == pytest.approx(0.85)

    def test_beyond_factor(self):
        assert MaximumAllowed(2.0).compare(10, 25) == 0.0


class TestRangeTolerance:

    def test_in_range(self):
        assert range_tolerance(0.5, 2.0).compare(10, 15) == 0.9
        assert range_tolerance(0.5, 2.0).compare(10, 10) == 1.0

    def test_out_of_range(self):
        assert range_tolerance(0.5, 2.0).compare(10, 30) == 0.0

    @pytest.mark.parametrize("low,high", [(-1.0, 1.0), (2.0, 1.0)])
    def test_invalid_factors(self, low, high):
        with pytest.raises(ValueError):
            RangeTolerance(low, high)


class TestCompatibleSet:

    def test_groups(self):
        rule = compatible_set({"X7R", "X5R"}, {"C0G", "NP0"})
        assert rule.compare("X7R", "X7R") == 1.0
        assert rule.compare("X7R", "x5r") == 0.8
        assert rule.compare("X7R", "C0G") == 0.0
        assert not rule.is_acceptable("X7R", "C0G")

    def test_empty_groups(self):
        assert CompatibleSet().compare("A", "B") == 0.0


class TestRulesAreValues:

    def test_frozen(self):
        assert ExactMatch() == ExactMatch()
        assert percentage_tolerance(5.0) == PercentageTolerance(5.0)

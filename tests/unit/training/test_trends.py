"""Tests for the week-over-week trend comparator."""

import pytest

from app.schemas.weekly_summary import TrendDirection
from app.training.trends import compare, compare_all

TOL = 0.01


class TestCompare:
    def test_both_missing(self):
        result = compare(None, None, TOL)
        assert result.direction == TrendDirection.UNCHANGED
        assert result.value is None

    def test_new_data_reads_as_increase(self):
        result = compare(4.0, None, TOL)
        assert result.direction == TrendDirection.INCREASING
        assert result.value == 4.0

    def test_lost_data_reads_as_decrease(self):
        result = compare(None, 4.0, TOL)
        assert result.direction == TrendDirection.DECREASING
        assert result.value is None

    def test_within_tolerance_is_unchanged(self):
        result = compare(4.055, 4.05, TOL)
        assert result.direction == TrendDirection.UNCHANGED
        assert result.value == 4.055

    def test_difference_equal_to_tolerance_is_a_trend(self):
        assert compare(2.0, 1.5, 0.5).direction == TrendDirection.INCREASING
        assert compare(1.5, 2.0, 0.5).direction == TrendDirection.DECREASING

    @pytest.mark.parametrize("current, previous, expected", [
        (5.0, 3.33, TrendDirection.INCREASING),
        (7.0, 7.5, TrendDirection.DECREASING),
        (60.0, 60.0, TrendDirection.UNCHANGED),
        (0.0, 0.0, TrendDirection.UNCHANGED),
    ])
    def test_directions(self, current, previous, expected):
        assert compare(current, previous, TOL).direction == expected

    @pytest.mark.parametrize("a, b", [(5.0, 3.0), (3.0, 5.0), (60.2, 60.1), (-1.0, 1.0), (7.5, 7.49)])
    def test_symmetric_under_swap(self, a, b):
        forward = compare(a, b, TOL).direction
        backward = compare(b, a, TOL).direction
        assert (forward == TrendDirection.DECREASING) == (backward == TrendDirection.INCREASING)
        assert (forward == TrendDirection.INCREASING) == (backward == TrendDirection.DECREASING)


class TestCompareAll:
    def test_one_comparison_per_tracked_metric(self):
        current = {"stress": 5.0, "sleep": 7.0}
        previous = {"stress": 4.0, "resting_heart_rate": 60.0}
        trends = compare_all(current, previous, TOL)
        assert trends.stress.direction == TrendDirection.INCREASING
        assert trends.sleep.direction == TrendDirection.INCREASING
        assert trends.resting_heart_rate.direction == TrendDirection.DECREASING
        assert trends.exercise_heart_rate.direction == TrendDirection.UNCHANGED
        assert trends.perceived_exertion.value is None

"""Tests for the intensity trend analysis."""

from datetime import date, timedelta

import pytest

from color_diary_api.engine.trend import analyze_trend, consistency, split_halves, trend_direction


@pytest.fixture
def week(make_entry, as_of):
    """Seven consecutive daily entries ending at ``as_of`` from a list of palette keys."""

    def _week(keys):
        first = as_of - timedelta(days=len(keys) - 1)
        return [make_entry(first + timedelta(days=n), key) for n, key in enumerate(keys)]

    return _week


class TestSplitHalves:
    """Halving of the score sequence."""

    def test_even_length(self):
        assert split_halves([1, 2, 3, 4]) == ([1, 2], [3, 4])

    def test_odd_length_shares_the_middle(self):
        assert split_halves([1, 2, 3]) == ([1, 2], [2, 3])

    def test_single_score(self):
        assert split_halves([5]) == ([5], [5])


class TestDirection:
    """Threshold on the difference of half means."""

    def test_difference_of_exactly_one_is_stable(self):
        assert trend_direction([4], [5]) == "stable"
        assert trend_direction([5], [4]) == "stable"

    def test_beyond_threshold(self):
        assert trend_direction([4], [6]) == "increasing"
        assert trend_direction([6], [4]) == "decreasing"


class TestConsistency:
    """Standard-deviation based consistency."""

    def test_identical_scores(self):
        assert consistency([6, 6, 6]) == 1.0

    def test_scaled_deviation(self):
        # population standard deviation of [2, 8] is 3
        assert consistency([2, 8]) == pytest.approx(0.4)

    def test_clamped_at_zero(self):
        assert consistency([0, 20]) == 0.0


class TestAnalyzeTrend:
    """Trend over a run of daily entries."""

    def test_no_entries(self):
        assert analyze_trend([]) is None

    def test_constant_week_is_stable(self, week):
        result = analyze_trend(week(["green"] * 7))

        assert result.trend_direction == "stable"
        assert result.consistency == 1.0
        assert result.average_score == 5.0
        assert (result.score_range.min, result.score_range.max) == (5, 5)

    def test_rising_week(self, week):
        # intensities 2, 2, 2, 2, 8, 8, 8
        result = analyze_trend(week(["white"] * 4 + ["yellow"] * 3))

        assert result.trend_direction == "increasing"
        assert result.average_score == pytest.approx(32 / 7)
        assert (result.score_range.min, result.score_range.max) == (2, 8)
        assert 0 <= result.consistency < 1

    def test_falling_week(self, week):
        result = analyze_trend(week(["yellow"] * 3 + ["white"] * 4))
        assert result.trend_direction == "decreasing"

    def test_entries_are_sorted_by_date_first(self, week):
        entries = week(["white"] * 4 + ["yellow"] * 3)
        shuffled = entries[3:] + entries[:3]
        assert analyze_trend(shuffled) == analyze_trend(entries)

    def test_scores_come_from_classification(self, make_entry, as_of):
        # near-red colors score as red regardless of the stored hex
        result = analyze_trend([make_entry(as_of, "#FE3A31")])
        assert result.average_score == 9.0

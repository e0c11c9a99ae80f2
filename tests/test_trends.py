"""
Unit tests for trend detection, extremes, correlation and mood patterns.
"""
import pytest

from healthtwin.entries import MoodValue
from healthtwin.trends import (
    Correlation,
    DayScore,
    Trend,
    analyze_mood_pattern,
    correlate_mood_with_sleep,
    detect_trend,
    get_energy_extremes,
    get_extremes,
)


class TestDetectTrend:
    """Recent half vs older half, with a 5-point dead band."""

    def test_flat_series_is_stable(self):
        result = detect_trend([50, 50, 50, 50])
        assert result.trend == Trend.STABLE
        assert result.change == 0.0
        assert result.description == "Your energy levels are stable."

    def test_improving(self):
        result = detect_trend([40, 40, 80, 80])
        assert result.trend == Trend.IMPROVING
        assert result.change == 40.0
        assert result.description == "Your energy has improved by 40 points!"

    def test_declining(self):
        result = detect_trend([80, 80, 40, 40])
        assert result.trend == Trend.DECLINING
        assert result.change == -40.0
        assert result.description == "Your energy has decreased by 40 points."

    def test_odd_length_gives_extra_point_to_recent_half(self):
        # older [10], recent [20, 30]
        result = detect_trend([10, 20, 30])
        assert result.change == 15.0
        assert result.trend == Trend.IMPROVING

    def test_change_of_exactly_five_is_stable(self):
        assert detect_trend([50, 55]).trend == Trend.STABLE
        assert detect_trend([50, 45]).trend == Trend.STABLE

    @pytest.mark.parametrize("scores", [[], [50]])
    def test_insufficient_data(self, scores):
        result = detect_trend(scores)
        assert result.trend == Trend.STABLE
        assert result.change == 0.0
        assert result.description == "Not enough data to determine trend"

    def test_emotion_wording(self):
        assert detect_trend([], subject="emotion").description == (
            "Not enough data to determine emotional trend"
        )
        assert detect_trend([30, 30, 60, 60], subject="emotion").description == (
            "Your emotional wellbeing has improved by 30 points!"
        )


class TestExtremes:
    """Best and worst day selection."""

    def test_empty(self):
        assert get_extremes([]) == (None, None)

    def test_ties_keep_first_occurrence(self):
        days = [
            DayScore("2024-06-03", 50),
            DayScore("2024-06-04", 80),
            DayScore("2024-06-05", 80),
            DayScore("2024-06-06", 20),
            DayScore("2024-06-07", 20),
        ]
        best, worst = get_extremes(days)
        assert best.date == "2024-06-04"
        assert worst.date == "2024-06-06"

    def test_single_day_is_both(self):
        day = DayScore("2024-06-03", 42)
        assert get_extremes([day]) == (day, day)

    def test_energy_extremes_from_entries(self, week_health):
        best, worst = get_energy_extremes(week_health)
        assert best == DayScore("2024-06-05", 100.0)
        assert worst == DayScore("2024-06-06", 49.5)


class TestCorrelation:
    """Sleep-mood correlation buckets."""

    def test_fewer_than_three_points(self):
        result = correlate_mood_with_sleep([50, 60], [6, 7])
        assert result.correlation == Correlation.WEAK
        assert result.description == "Not enough data to determine correlation"
        assert result.coefficient is None

    def test_mismatched_lengths_raise(self):
        with pytest.raises(ValueError, match="paired day by day"):
            correlate_mood_with_sleep([50, 60, 70], [6, 7])

    def test_zero_variance_is_weak(self):
        result = correlate_mood_with_sleep([50, 50, 50], [6, 7, 8])
        assert result.correlation == Correlation.WEAK
        assert result.coefficient is None

    def test_strong_positive(self):
        result = correlate_mood_with_sleep([40, 60, 80], [5, 6, 7])
        assert result.correlation == Correlation.STRONG_POSITIVE
        assert result.coefficient == 1.0
        assert result.description == "Your mood strongly improves with better sleep!"

    def test_strong_negative(self):
        result = correlate_mood_with_sleep([80, 60, 40], [5, 6, 7])
        assert result.correlation == Correlation.STRONG_NEGATIVE

    def test_moderate_positive(self):
        # r = 0.6
        result = correlate_mood_with_sleep([30, 10, 20, 50, 40], [1, 2, 3, 4, 5])
        assert result.correlation == Correlation.MODERATE_POSITIVE
        assert result.coefficient == pytest.approx(0.6)

    def test_moderate_negative(self):
        result = correlate_mood_with_sleep([30, 10, 20, 50, 40], [5, 4, 3, 2, 1])
        assert result.correlation == Correlation.MODERATE_NEGATIVE

    def test_weak(self):
        # r = 0.1
        result = correlate_mood_with_sleep([20, 50, 10, 40, 30], [1, 2, 3, 4, 5])
        assert result.correlation == Correlation.WEAK
        assert result.description == "No clear relationship between sleep and mood detected."


class TestMoodPattern:
    """Most common mood, distribution and variety."""

    def test_empty(self):
        result = analyze_mood_pattern([])
        assert result.most_common == MoodValue.OKAY
        assert set(result.distribution.values()) == {0}
        assert result.variety == 0.0

    def test_distribution_and_variety(self):
        result = analyze_mood_pattern(["good", "bad", "good", "okay"])
        assert result.most_common == MoodValue.GOOD
        assert result.distribution == {"great": 0, "good": 2, "okay": 1, "low": 0, "bad": 1}
        assert result.variety == 60.0

    def test_tie_goes_to_earlier_mood(self):
        assert analyze_mood_pattern(["bad", "good", "bad", "good"]).most_common == MoodValue.GOOD
        assert analyze_mood_pattern(["low", "okay"]).most_common == MoodValue.OKAY

    def test_all_moods_is_full_variety(self):
        assert analyze_mood_pattern(["great", "good", "okay", "low", "bad"]).variety == 100.0

    def test_unknown_mood_raises(self):
        with pytest.raises(ValueError):
            analyze_mood_pattern(["good", "fine"])

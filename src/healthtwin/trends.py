"""
Trend and Correlation Analysis.

Aggregates over ordered score sequences: first-half vs second-half trend
detection, best/worst days, sleep-mood correlation buckets and mood
distribution.
"""

import logging
import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from .entries import MOOD_ORDER, HealthEntry, MoodValue, coerce_mood
from .numeric import mean, round1
from .scoring import energy_score

logger = logging.getLogger(__name__)

TREND_THRESHOLD = 5.0
MIN_CORRELATION_POINTS = 3


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class Correlation(str, Enum):
    STRONG_POSITIVE = "strong_positive"
    MODERATE_POSITIVE = "moderate_positive"
    WEAK = "weak"
    MODERATE_NEGATIVE = "moderate_negative"
    STRONG_NEGATIVE = "strong_negative"


@dataclass(frozen=True)
class TrendResult:
    trend: Trend
    change: float
    description: str

    def to_dict(self) -> dict:
        return {"trend": self.trend.value, "change": self.change, "description": self.description}


@dataclass(frozen=True)
class DayScore:
    date: str
    score: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CorrelationResult:
    correlation: Correlation
    description: str
    coefficient: Optional[float] = None  # None when r is undefined or not computed

    def to_dict(self) -> dict:
        return {
            "correlation": self.correlation.value,
            "description": self.description,
            "coefficient": self.coefficient,
        }


@dataclass(frozen=True)
class MoodPattern:
    most_common: MoodValue
    distribution: Dict[str, int]
    variety: float  # 0-100, share of the five moods seen at least once

    def to_dict(self) -> dict:
        return {
            "most_common": self.most_common.value,
            "distribution": dict(self.distribution),
            "variety": self.variety,
        }


# Wording differs slightly between the energy and emotion views.
TREND_DESCRIPTIONS = {
    "energy": {
        "insufficient": "Not enough data to determine trend",
        Trend.IMPROVING: "Your energy has improved by {change} points!",
        Trend.DECLINING: "Your energy has decreased by {change} points.",
        Trend.STABLE: "Your energy levels are stable.",
    },
    "emotion": {
        "insufficient": "Not enough data to determine emotional trend",
        Trend.IMPROVING: "Your emotional wellbeing has improved by {change} points!",
        Trend.DECLINING: "Your emotional wellbeing has decreased by {change} points.",
        Trend.STABLE: "Your emotional state is stable.",
    },
}

CORRELATION_DESCRIPTIONS = {
    Correlation.STRONG_POSITIVE: "Your mood strongly improves with better sleep!",
    Correlation.MODERATE_POSITIVE: "Better sleep tends to improve your mood.",
    Correlation.STRONG_NEGATIVE: "Interesting: more sleep seems to negatively affect your mood.",
    Correlation.MODERATE_NEGATIVE: "There may be a negative relationship between sleep and mood.",
    Correlation.WEAK: "No clear relationship between sleep and mood detected.",
}
INSUFFICIENT_CORRELATION_DESCRIPTION = "Not enough data to determine correlation"


def _format_change(value: float) -> str:
    return f"{value:g}"


def detect_trend(scores: Sequence[float], subject: str = "energy") -> TrendResult:
    """
    Compare the recent half of a score series to the older half.

    The split point is floor(n/2); the recent half gets any odd element.
    A change beyond +/-5 points counts as a trend.

    Args:
        scores: Scores in chronological order
        subject: "energy" or "emotion", selects the description wording
    """
    descriptions = TREND_DESCRIPTIONS[subject]
    if len(scores) < 2:
        return TrendResult(Trend.STABLE, 0.0, descriptions["insufficient"])

    midpoint = len(scores) // 2
    older = scores[:midpoint]
    recent = scores[midpoint:]
    change = round1(mean(recent) - mean(older))

    if change > TREND_THRESHOLD:
        trend = Trend.IMPROVING
    elif change < -TREND_THRESHOLD:
        trend = Trend.DECLINING
    else:
        trend = Trend.STABLE

    description = descriptions[trend].format(change=_format_change(abs(change)))
    logger.debug(f"[TRENDS] {subject} n={len(scores)} change={change} -> {trend.value}")
    return TrendResult(trend, change, description)


def get_extremes(dated_scores: Sequence[DayScore]) -> Tuple[Optional[DayScore], Optional[DayScore]]:
    """
    Best and worst day by score. Ties keep the earliest entry.

    Returns:
        (best, worst), both None for empty input
    """
    if not dated_scores:
        return None, None

    best = worst = dated_scores[0]
    for item in dated_scores[1:]:
        if item.score > best.score:
            best = item
        if item.score < worst.score:
            worst = item
    return best, worst


def get_energy_extremes(entries: Sequence[HealthEntry]) -> Tuple[Optional[DayScore], Optional[DayScore]]:
    """Score each health entry for energy and return its best and worst days."""
    scored = [
        DayScore(entry.date, energy_score(entry.sleep_hours, entry.steps).score)
        for entry in entries
    ]
    return get_extremes(scored)


def pearson(xs: Sequence[float], ys: Sequence[float]) -> Optional[float]:
    """Pearson correlation coefficient, or None if either series has zero variance."""
    n = len(xs)
    mean_x = sum(xs) / n
    mean_y = sum(ys) / n

    numerator = 0.0
    ss_x = 0.0
    ss_y = 0.0
    for x, y in zip(xs, ys):
        dx = x - mean_x
        dy = y - mean_y
        numerator += dx * dy
        ss_x += dx * dx
        ss_y += dy * dy

    denominator = math.sqrt(ss_x * ss_y)
    if denominator == 0:
        return None
    return numerator / denominator


def _bucket(r: float) -> Correlation:
    if r > 0.7:
        return Correlation.STRONG_POSITIVE
    if r > 0.4:
        return Correlation.MODERATE_POSITIVE
    if r < -0.7:
        return Correlation.STRONG_NEGATIVE
    if r < -0.4:
        return Correlation.MODERATE_NEGATIVE
    return Correlation.WEAK


def correlate_mood_with_sleep(
    emotion_scores: Sequence[float],
    sleep_hours: Sequence[float],
) -> CorrelationResult:
    """
    Bucket the correlation between daily emotion scores and sleep hours.

    Both series must describe the same days in the same order. Days missing
    either signal have to be dropped from both lists by the caller.

    Raises:
        ValueError: if the two series differ in length
    """
    if len(emotion_scores) != len(sleep_hours):
        raise ValueError(
            f"Mood and sleep series must be paired day by day: got "
            f"{len(emotion_scores)} emotion scores and {len(sleep_hours)} sleep values"
        )

    if len(emotion_scores) < MIN_CORRELATION_POINTS:
        return CorrelationResult(Correlation.WEAK, INSUFFICIENT_CORRELATION_DESCRIPTION)

    r = pearson(emotion_scores, sleep_hours)
    if r is None:
        logger.warning(
            f"[TRENDS] Correlation undefined for {len(emotion_scores)} points (zero variance)"
        )
        return CorrelationResult(Correlation.WEAK, CORRELATION_DESCRIPTIONS[Correlation.WEAK])

    bucket = _bucket(r)
    return CorrelationResult(bucket, CORRELATION_DESCRIPTIONS[bucket], round(r, 3))


def analyze_mood_pattern(mood_values: Sequence) -> MoodPattern:
    """
    Most common mood, per-mood counts and variety over a list of mood values.

    Ties for most common go to the earlier mood in great > good > okay >
    low > bad order.
    """
    distribution = {mood.value: 0 for mood in MOOD_ORDER}
    if not mood_values:
        return MoodPattern(MoodValue.OKAY, distribution, 0.0)

    for value in mood_values:
        distribution[coerce_mood(value).value] += 1

    most_common = MOOD_ORDER[0]
    for mood in MOOD_ORDER[1:]:
        if distribution[mood.value] > distribution[most_common.value]:
            most_common = mood

    distinct = sum(1 for count in distribution.values() if count > 0)
    variety = round1(distinct / len(MOOD_ORDER) * 100)
    return MoodPattern(most_common, distribution, variety)

"""
Energy and Emotion Scoring.

Energy blends sleep and step data into a 0-100 score:
    energy = (sleep_hours / 8) x 0.6 + (steps / 10000) x 0.4
with oversleep capped at 125% and activity at 150% of the baseline.

Emotion starts from a fixed base per mood value and is nudged by a
keyword count over the diary text.
"""

import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Iterable, Optional, Tuple

from .entries import MoodValue, coerce_mood
from .numeric import clamp, mean, round1

logger = logging.getLogger(__name__)

SLEEP_BASELINE_HOURS = 8.0
STEPS_BASELINE = 10000
SLEEP_WEIGHT = 0.6
STEPS_WEIGHT = 0.4
SLEEP_CAP = 1.25  # oversleep
STEPS_CAP = 1.5  # very active day


class EnergyLevel(str, Enum):
    VERY_LOW = "very_low"
    LOW = "low"
    MODERATE = "moderate"
    GOOD = "good"
    EXCELLENT = "excellent"


class EmotionLevel(str, Enum):
    VERY_NEGATIVE = "very_negative"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    POSITIVE = "positive"
    VERY_POSITIVE = "very_positive"


@dataclass(frozen=True)
class EnergyScore:
    """Energy score for one day."""

    score: float  # 0-100
    sleep_contribution: float
    steps_contribution: float
    level: EnergyLevel
    feedback: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["level"] = self.level.value
        return data


@dataclass(frozen=True)
class EmotionScore:
    """Emotion score for one mood entry."""

    score: float  # 0-100
    mood_base_score: int
    text_adjustment: float  # -10..10
    level: EmotionLevel
    feedback: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["level"] = self.level.value
        return data


# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------

# Upper bounds are exclusive; anything at or above the last cut is excellent.
ENERGY_LEVEL_CUTS: Tuple[Tuple[float, EnergyLevel], ...] = (
    (30, EnergyLevel.VERY_LOW),
    (50, EnergyLevel.LOW),
    (70, EnergyLevel.MODERATE),
    (85, EnergyLevel.GOOD),
)

ENERGY_FEEDBACK = {
    EnergyLevel.EXCELLENT: "Fantastic! Your energy levels are excellent. Keep up the great routine!",
    EnergyLevel.GOOD: "Great job! Your energy is good. Small improvements could make it even better.",
    EnergyLevel.LOW: "Your energy is low. Consider prioritizing rest and gentle movement today.",
    EnergyLevel.VERY_LOW: "Your energy is very low. Please prioritize rest and self-care.",
}

# (needs_sleep, needs_steps) -> message
MODERATE_ENERGY_FEEDBACK = {
    (True, True): "Your energy is moderate. Try getting more sleep and increasing your daily activity.",
    (True, False): "Your energy is moderate. Getting more sleep could help boost your levels.",
    (False, True): "Your energy is moderate. Try moving more throughout the day.",
    (False, False): "Your energy is moderate. Maintain consistency to improve further.",
}


def _non_negative(name: str, value: Optional[float]) -> float:
    if value is None:
        return 0.0
    if value < 0:
        logger.warning(f"[SCORING] Negative {name}={value} clamped to 0")
        return 0.0
    return float(value)


def energy_level(score: float) -> EnergyLevel:
    for upper, level in ENERGY_LEVEL_CUTS:
        if score < upper:
            return level
    return EnergyLevel.EXCELLENT


def energy_feedback(level: EnergyLevel, sleep_hours: float, steps: float) -> str:
    if level == EnergyLevel.MODERATE:
        return MODERATE_ENERGY_FEEDBACK[(sleep_hours < 6, steps < 5000)]
    return ENERGY_FEEDBACK[level]


def energy_score(sleep_hours: Optional[float], steps: Optional[float]) -> EnergyScore:
    """
    Calculate the energy score from a day's sleep and steps.

    Args:
        sleep_hours: Hours slept (None or negative counts as 0)
        steps: Step count (None or negative counts as 0)

    Returns:
        EnergyScore with the score and each component rounded to one decimal
    """
    sleep_hours = _non_negative("sleep_hours", sleep_hours)
    steps = _non_negative("steps", steps)

    sleep_contribution = min(sleep_hours / SLEEP_BASELINE_HOURS, SLEEP_CAP) * SLEEP_WEIGHT
    steps_contribution = min(steps / STEPS_BASELINE, STEPS_CAP) * STEPS_WEIGHT

    score = clamp((sleep_contribution + steps_contribution) * 100, 0, 100)
    level = energy_level(score)

    return EnergyScore(
        score=round1(score),
        sleep_contribution=round1(sleep_contribution * 100),
        steps_contribution=round1(steps_contribution * 100),
        level=level,
        feedback=energy_feedback(level, sleep_hours, steps),
    )


def average_energy(inputs: Iterable[Tuple[Optional[float], Optional[float]]]) -> float:
    """Mean energy score over (sleep_hours, steps) pairs; 0 when empty."""
    scores = [energy_score(sleep, steps).score for sleep, steps in inputs]
    return round1(mean(scores)) if scores else 0.0


# ---------------------------------------------------------------------------
# Emotion
# ---------------------------------------------------------------------------

MOOD_BASE_SCORES = {
    MoodValue.GREAT: 90,
    MoodValue.GOOD: 75,
    MoodValue.OKAY: 50,
    MoodValue.LOW: 30,
    MoodValue.BAD: 15,
}

POSITIVE_KEYWORDS = (
    "happy", "joy", "great", "wonderful", "amazing", "excited", "grateful",
    "love", "awesome", "fantastic", "excellent", "good", "better", "improved",
    "accomplished", "proud", "energized", "motivated", "peaceful", "calm",
)

NEGATIVE_KEYWORDS = (
    "sad", "tired", "exhausted", "stressed", "anxious", "worried", "frustrated",
    "angry", "upset", "disappointed", "difficult", "hard", "struggle", "pain",
    "hurt", "lonely", "depressed", "terrible", "awful", "bad", "worse",
)

SENTIMENT_POINTS_PER_KEYWORD = 3
MAX_TEXT_ADJUSTMENT = 10

EMOTION_LEVEL_CUTS: Tuple[Tuple[float, EmotionLevel], ...] = (
    (25, EmotionLevel.VERY_NEGATIVE),
    (45, EmotionLevel.NEGATIVE),
    (65, EmotionLevel.NEUTRAL),
    (85, EmotionLevel.POSITIVE),
)

EMOTION_FEEDBACK = {
    EmotionLevel.VERY_POSITIVE: "Your emotional state is excellent! Embrace this positive energy.",
    EmotionLevel.POSITIVE: "You're feeling good today. Keep nurturing these positive emotions.",
    EmotionLevel.NEUTRAL: "Your emotions are balanced. It's okay to have neutral days.",
    EmotionLevel.NEGATIVE: "You're experiencing some low feelings. Be kind to yourself.",
    EmotionLevel.VERY_NEGATIVE: "You're going through a tough time. Consider reaching out for support.",
}


def keyword_sentiment(text: Optional[str]) -> int:
    """
    Score diary text by counting sentiment keywords.

    Each keyword counts once if it appears anywhere in the lowercased text.
    Matching is substring containment, so "goodbye" hits "good" and
    "unhappy" hits "happy". Kept as-is because stored emotion scores were
    computed this way.

    Returns:
        Adjustment in [-10, 10]
    """
    if not text:
        return 0
    lowered = text.lower()
    positive = sum(1 for keyword in POSITIVE_KEYWORDS if keyword in lowered)
    negative = sum(1 for keyword in NEGATIVE_KEYWORDS if keyword in lowered)
    adjustment = (positive - negative) * SENTIMENT_POINTS_PER_KEYWORD
    return int(clamp(adjustment, -MAX_TEXT_ADJUSTMENT, MAX_TEXT_ADJUSTMENT))


def emotion_level(score: float) -> EmotionLevel:
    for upper, level in EMOTION_LEVEL_CUTS:
        if score < upper:
            return level
    return EmotionLevel.VERY_POSITIVE


def emotion_score(mood_value, diary_text: Optional[str] = None) -> EmotionScore:
    """
    Calculate the emotion score from a mood value and optional diary text.

    Args:
        mood_value: MoodValue or its string label
        diary_text: Free text written with the mood log

    Raises:
        ValueError: if mood_value is not a known mood
    """
    mood = coerce_mood(mood_value)
    base = MOOD_BASE_SCORES[mood]
    adjustment = keyword_sentiment(diary_text)
    score = clamp(base + adjustment, 0, 100)
    level = emotion_level(score)

    return EmotionScore(
        score=round1(score),
        mood_base_score=base,
        text_adjustment=round1(adjustment),
        level=level,
        feedback=EMOTION_FEEDBACK[level],
    )


def average_emotion(inputs: Iterable[Tuple[str, Optional[str]]]) -> float:
    """Mean emotion score over (mood_value, diary_text) pairs; 0 when empty."""
    scores = [emotion_score(mood, text).score for mood, text in inputs]
    return round1(mean(scores)) if scores else 0.0

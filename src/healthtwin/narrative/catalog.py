"""
Built-in narrative template catalog.

Order matters: weighted selection walks candidates in catalog order.
"""

from typing import Tuple

from ..trends import Correlation, Trend
from .templates import NarrativeCategory as Cat
from .templates import NarrativeSubCategory as Sub
from .templates import NarrativeTemplate


def _n(value: float) -> str:
    """Render 80.0 as "80" and 72.5 as "72.5"."""
    return f"{value:g}"


ENERGY_TEMPLATES = (
    NarrativeTemplate(
        id="energy-high-improving",
        category=Cat.ENERGY,
        sub_category=Sub.IMPROVEMENT,
        condition=lambda a: a.avg_energy_score > 75 and a.energy_trend == Trend.IMPROVING,
        render=lambda a, name: (
            f"You've been on fire this week, {name}! Your energy levels are soaring, "
            f"averaging a fantastic {_n(a.avg_energy_score)}. It's clear that your consistent "
            f"habits are paying off."
        ),
        weight=1.5,
    ),
    NarrativeTemplate(
        id="energy-high-stable",
        category=Cat.ENERGY,
        sub_category=Sub.HIGH,
        condition=lambda a: a.avg_energy_score > 75 and a.energy_trend == Trend.STABLE,
        render=lambda a, name: (
            f"Another solid week of high energy! You maintained an impressive average of "
            f"{_n(a.avg_energy_score)}. Consistency is key, and you've mastered it."
        ),
    ),
    NarrativeTemplate(
        id="energy-moderate",
        category=Cat.ENERGY,
        sub_category=Sub.STABLE,
        condition=lambda a: 50 <= a.avg_energy_score <= 75,
        render=lambda a, name: (
            f"Your energy was steady this week, averaging {_n(a.avg_energy_score)}. You're doing "
            f"well, but there might be room to boost those levels with a bit more sleep or movement."
        ),
    ),
    NarrativeTemplate(
        id="energy-low-declining",
        category=Cat.ENERGY,
        sub_category=Sub.DECLINE,
        condition=lambda a: a.avg_energy_score < 50 and a.energy_trend == Trend.DECLINING,
        render=lambda a, name: (
            f"It looks like your energy took a dip this week, {name}. With an average score of "
            f"{_n(a.avg_energy_score)}, you might be feeling a bit drained. Let's focus on "
            f"recharging next week."
        ),
        weight=1.2,
    ),
    NarrativeTemplate(
        id="energy-low-improving",
        category=Cat.ENERGY,
        sub_category=Sub.IMPROVEMENT,
        condition=lambda a: a.avg_energy_score < 50 and a.energy_trend == Trend.IMPROVING,
        render=lambda a, name: (
            f"Even though your energy is lower than ideal ({_n(a.avg_energy_score)}), you're "
            f"trending in the right direction! Small steps lead to big changes. Keep it up!"
        ),
        weight=1.5,
    ),
    NarrativeTemplate(
        id="energy-best-day",
        category=Cat.ENERGY,
        sub_category=Sub.HIGH,
        condition=lambda a: a.best_energy_day is not None and a.best_energy_day.score > 80,
        render=lambda a, name: (
            f"You had a standout day on {a.best_energy_day.date}! Your energy peaked at "
            f"{_n(a.best_energy_day.score)}. Think back to what you did differently that day; "
            f"it clearly worked for you."
        ),
        weight=0.8,
    ),
)

EMOTION_TEMPLATES = (
    NarrativeTemplate(
        id="emotion-positive-improving",
        category=Cat.EMOTION,
        sub_category=Sub.IMPROVEMENT,
        condition=lambda a: a.avg_emotion_score > 70 and a.emotion_trend == Trend.IMPROVING,
        render=lambda a, name: (
            f"Your emotional well-being is flourishing, {name}. We've noticed a lift in your "
            f"spirits this week, with your mood scores trending upward. Embrace this positive momentum!"
        ),
        weight=1.5,
    ),
    NarrativeTemplate(
        id="emotion-high-stable",
        category=Cat.EMOTION,
        sub_category=Sub.HIGH,
        condition=lambda a: a.avg_emotion_score > 75 and a.emotion_trend == Trend.STABLE,
        render=lambda a, name: (
            f"You've maintained a great positive outlook this week. Your emotional stability is "
            f"strong, averaging a score of {_n(a.avg_emotion_score)}. Keep nurturing what makes you happy."
        ),
    ),
    NarrativeTemplate(
        id="emotion-neutral",
        category=Cat.EMOTION,
        sub_category=Sub.STABLE,
        condition=lambda a: 45 <= a.avg_emotion_score <= 70,
        render=lambda a, name: (
            f"It's been a balanced week emotionally. You've had some ups and downs, averaging a "
            f"score of {_n(a.avg_emotion_score)}. Remember, feeling \"okay\" is perfectly normal "
            f"and part of the journey."
        ),
    ),
    NarrativeTemplate(
        id="emotion-low",
        category=Cat.EMOTION,
        sub_category=Sub.LOW,
        condition=lambda a: a.avg_emotion_score < 45,
        render=lambda a, name: (
            f"This week seems to have been emotionally challenging for you, {name}. Your average "
            f"score was {_n(a.avg_emotion_score)}. Be gentle with yourself and prioritize "
            f"self-care in the coming days."
        ),
        weight=1.2,
    ),
    NarrativeTemplate(
        id="emotion-variety",
        category=Cat.EMOTION,
        sub_category=Sub.INSIGHT,
        condition=lambda a: a.most_common_mood != "okay" and a.total_entries > 3,
        render=lambda a, name: (
            f"Your most frequent mood this week was \"{a.most_common_mood}\". Recognizing patterns "
            f"like this is the first step to understanding your emotional landscape."
        ),
        weight=0.8,
    ),
)

CORRELATION_TEMPLATES = (
    NarrativeTemplate(
        id="corr-sleep-mood-strong",
        category=Cat.CORRELATION,
        sub_category=Sub.INSIGHT,
        condition=lambda a: a.sleep_mood_correlation_level == Correlation.STRONG_POSITIVE,
        render=lambda a, name: (
            f"Here's a key insight, {name}: There is a strong link between your sleep and your "
            f"happiness. On days you slept well, your mood soared. Prioritizing rest is your secret weapon!"
        ),
        weight=2.0,
    ),
    NarrativeTemplate(
        id="corr-sleep-mood-moderate",
        category=Cat.CORRELATION,
        sub_category=Sub.INSIGHT,
        condition=lambda a: a.sleep_mood_correlation_level == Correlation.MODERATE_POSITIVE,
        render=lambda a, name: (
            "We noticed that better sleep often leads to better days for you. It's not a perfect "
            "rule, but getting those extra Zzz's definitely seems to help your mood."
        ),
        weight=1.5,
    ),
    NarrativeTemplate(
        id="summary-active",
        category=Cat.SUMMARY,
        sub_category=Sub.HIGH,
        condition=lambda a: a.avg_steps > 8000,
        render=lambda a, name: (
            f"You were really moving this week! Averaging {a.avg_steps} steps a day is a fantastic "
            f"achievement. Your body thanks you for the activity."
        ),
    ),
    NarrativeTemplate(
        id="summary-sleep-low",
        category=Cat.SUMMARY,
        sub_category=Sub.LOW,
        condition=lambda a: a.avg_sleep < 6,
        render=lambda a, name: (
            f"Rest was a bit elusive this week, with an average of only {_n(a.avg_sleep)} hours per "
            f"night. Trying to get to bed 30 minutes earlier might make a big difference next week."
        ),
        weight=1.2,
    ),
    NarrativeTemplate(
        id="summary-balanced",
        category=Cat.SUMMARY,
        sub_category=Sub.STABLE,
        condition=lambda a: a.avg_sleep >= 6 and a.avg_steps >= 5000,
        render=lambda a, name: (
            f"A solid week in the books, {name}. You managed a healthy balance of rest "
            f"({_n(a.avg_sleep)} hrs) and activity ({a.avg_steps} steps). Keep finding that sweet spot!"
        ),
        weight=0.8,
    ),
)

DEFAULT_TEMPLATES: Tuple[NarrativeTemplate, ...] = (
    ENERGY_TEMPLATES + EMOTION_TEMPLATES + CORRELATION_TEMPLATES
)

"""Narrative template type."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..analytics import WeeklyAnalytics


class NarrativeCategory(str, Enum):
    ENERGY = "energy"
    EMOTION = "emotion"
    SLEEP = "sleep"
    ACTIVITY = "activity"
    CORRELATION = "correlation"
    SUMMARY = "summary"


class NarrativeSubCategory(str, Enum):
    """Descriptive only; selection never looks at it."""

    IMPROVEMENT = "improvement"
    DECLINE = "decline"
    STABLE = "stable"
    HIGH = "high"
    LOW = "low"
    INSIGHT = "insight"


@dataclass(frozen=True)
class NarrativeTemplate:
    """
    A conditionally applicable piece of story text.

    Attributes:
        id: Stable identifier
        category: Story section the template belongs to
        sub_category: Descriptive tag
        condition: Predicate over the week's analytics
        render: Builds the sentence from analytics and the user's name
        weight: Relative selection probability, must be positive
    """

    id: str
    category: NarrativeCategory
    sub_category: NarrativeSubCategory
    condition: Callable[[WeeklyAnalytics], bool]
    render: Callable[[WeeklyAnalytics, str], str]
    weight: float = 1.0

    def __post_init__(self):
        if not self.weight > 0:
            raise ValueError(f"Template '{self.id}' weight must be positive, got {self.weight}")

    def applies_to(self, analytics: WeeklyAnalytics) -> bool:
        return bool(self.condition(analytics))

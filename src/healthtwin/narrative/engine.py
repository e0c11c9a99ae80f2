"""
Narrative Engine.

Turns a week of analytics into a short story by picking one template per
section. Selection is weighted-random; pass a seeded ``random.Random`` for
reproducible output.
"""

import logging
import random
from typing import Optional, Sequence, Tuple

from ..analytics import WeeklyAnalytics
from .catalog import DEFAULT_TEMPLATES
from .templates import NarrativeCategory, NarrativeTemplate

logger = logging.getLogger(__name__)

STORY_SECTIONS: Tuple[NarrativeCategory, ...] = (
    NarrativeCategory.SUMMARY,
    NarrativeCategory.CORRELATION,
    NarrativeCategory.ENERGY,
    NarrativeCategory.EMOTION,
)

CLOSING_TEMPLATE = "Keep tracking to learn more about your unique rhythm, {name}."


class NarrativeEngine:
    """
    Selects and assembles narrative templates for a week of analytics.

    The template catalog is stored as a tuple and never modified after
    construction, so one engine can be shared between callers. The random
    source is the only mutable state.
    """

    def __init__(
        self,
        templates: Optional[Sequence[NarrativeTemplate]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            templates: Template catalog (defaults to the built-in catalog)
            rng: Random source used for weighted selection
        """
        self.templates: Tuple[NarrativeTemplate, ...] = tuple(
            DEFAULT_TEMPLATES if templates is None else templates
        )
        self.rng = rng or random.Random()

    def generate_story(self, analytics: WeeklyAnalytics, user_name: str) -> str:
        """Build the full story: one paragraph per section plus a closing line."""
        parts = [
            self.generate_section(analytics, user_name, category)
            for category in STORY_SECTIONS
        ]
        parts.append(CLOSING_TEMPLATE.format(name=user_name))
        story = "\n\n".join(part for part in parts if part)
        logger.info(
            f"[NARRATIVE] Story for {analytics.week_start}..{analytics.week_end}: "
            f"{sum(1 for p in parts if p)} paragraphs"
        )
        return story

    def candidates(
        self, analytics: WeeklyAnalytics, category: NarrativeCategory
    ) -> Tuple[NarrativeTemplate, ...]:
        """Templates of a category whose condition holds, in catalog order."""
        return tuple(
            t for t in self.templates
            if t.category == category and t.applies_to(analytics)
        )

    def generate_section(
        self,
        analytics: WeeklyAnalytics,
        user_name: str,
        category: NarrativeCategory,
    ) -> str:
        """Render one section; empty string when no template applies."""
        valid = self.candidates(analytics, category)
        if not valid:
            logger.debug(f"[NARRATIVE] No template applies for {category.value}")
            return ""

        selected = self.select_weighted_template(valid)
        logger.debug(
            f"[NARRATIVE] {category.value}: picked {selected.id} of {[t.id for t in valid]}"
        )
        return selected.render(analytics, user_name)

    def select_weighted_template(
        self, templates: Sequence[NarrativeTemplate]
    ) -> NarrativeTemplate:
        """
        Pick one template with probability proportional to its weight.

        Raises:
            ValueError: if there is nothing to pick from
        """
        if not templates:
            raise ValueError("Cannot select from an empty template list")

        total = sum(t.weight for t in templates)
        remaining = self.rng.random() * total

        for template in templates:
            remaining -= template.weight
            if remaining <= 0:
                return template
        return templates[0]  # float rounding left a sliver above zero

"""
Rule-based wellness advice.

Threshold reasoning over a week of health and mood entries: a short
narrative, three prioritized tips and an expected outcome. Used when no
generative model is available. Phrase variants are picked with an
injectable random source.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .entries import HealthEntry, MoodEntry
from .numeric import mean

logger = logging.getLogger(__name__)

THRESHOLDS = {
    "steps": {"great": 9000, "good": 7000, "low": 4000},
    "sleep": {"great": 7.5, "good": 6.5, "low": 5.5},
    "water": {"great": 2.0, "good": 1.5, "low": 1.0},
    "energy": {"great": 75, "good": 55, "low": 35},
    "stress": {"low": 3, "high": 7},
}

DEFAULT_MOOD_LEVEL = 5  # 1..10 scale, used when energy/stress were not logged
TIPS_PER_ANALYSIS = 3

DISCLAIMER = (
    "This is general wellness guidance only and is not medical advice. "
    "Please consult a healthcare professional for medical concerns."
)

STEP_PHRASES = {
    "great": [
        "Your step count has been impressive; you're clearly keeping active throughout the day.",
        "You've been crushing your movement goals with great step numbers this week.",
        "Your daily steps show you're making physical activity a real priority.",
    ],
    "good": [
        "Your activity level has been solid. A bit more movement could take you to the next level.",
        "You're moving well, though there's room to push that step count a little higher.",
        "Decent activity this week. A short walk each evening would make a real difference.",
    ],
    "low": [
        "Your step count has been lower than ideal. Even small walks can have a big impact.",
        "Movement has been limited this week. Try breaking up sitting time with short strolls.",
        "Your activity level is something to focus on. Gentle, consistent movement is key.",
    ],
}

SLEEP_PHRASES = {
    "great": [
        "Your sleep has been excellent. Consistent rest is one of the biggest factors in energy and focus.",
        "You've been sleeping well, which sets a strong foundation for everything else.",
        "Great sleep pattern this week. Your body is clearly getting the recovery it needs.",
    ],
    "good": [
        "Your sleep is decent, though nudging it closer to 7-8 hours would noticeably boost your energy.",
        "Sleep has been okay but slightly under the ideal range. An earlier bedtime could help.",
        "You're getting reasonable sleep, though your energy could improve with just 30 more minutes per night.",
    ],
    "low": [
        "Sleep has been your biggest challenge this week and is likely affecting your mood and energy directly.",
        "Your sleep hours are below what your body needs to recover. This should be your top focus.",
        "Limited sleep this week. Even a small improvement here will cascade into better energy and mood.",
    ],
}

TIPS: Dict[str, List[str]] = {
    "sleep_low": [
        "Set a consistent bedtime alarm 30 minutes earlier than usual. Consistency matters more than total hours at first.",
        "Avoid screens for 30 minutes before bed. Try reading or light stretching instead to wind down.",
        "Keep your bedroom cool and dark. Temperature regulation significantly improves sleep depth.",
    ],
    "sleep_good": [
        "Try to go to bed and wake at the same time every day, even on weekends, to lock in your sleep rhythm.",
        "A 10-minute wind-down routine (journaling, deep breathing) can improve your sleep quality noticeably.",
    ],
    "steps_low": [
        "Add a 15-minute walk after meals. It's one of the easiest ways to increase your daily step count.",
        "Take the stairs instead of the lift and park further away. These micro-habits add up quickly.",
        "Set a reminder every 90 minutes to stand up and walk for 5 minutes. This alone can add 2,000+ steps.",
    ],
    "steps_good": [
        "Challenge yourself with one longer walk per week. Even 30 minutes makes a meaningful difference.",
        "Try a walking meeting or listening to podcasts while walking to make extra steps feel effortless.",
    ],
    "water_low": [
        "Start each morning with a full glass of water before anything else.",
        "Set phone reminders to drink water at 10am, 1pm, 4pm, and 7pm.",
        "Keep a visible 1-litre water bottle on your desk so drinking it becomes near-automatic.",
    ],
    "water_good": [
        "Try adding a slice of lemon or cucumber to your water to make it more appealing.",
    ],
    "stress_high": [
        "Spend 5 minutes on box breathing when stress peaks: inhale 4s, hold 4s, exhale 4s, hold 4s.",
        "Try a 10-minute mindfulness session before bed.",
        "Schedule one no-obligation hour per day where you give yourself permission to fully relax.",
    ],
    "energy_low": [
        "Eat a protein-rich breakfast within an hour of waking to stabilise energy through the morning.",
        "Avoid caffeine after 2pm. It disrupts sleep quality even if you don't feel its effects at night.",
    ],
    "general": [
        "Log your health data daily this week. The more data you log, the more accurate your insights become.",
        "Track your mood alongside your physical metrics. The pattern between them often reveals your biggest lever.",
        "Share your weekly analysis with a friend or accountability partner to help you follow through.",
    ],
}

OUTCOMES = {
    "sleep": [
        "In two weeks of better sleep, you're likely to feel noticeably sharper, more patient, and more motivated.",
        "With consistent sleep improvements, expect to wake up feeling genuinely rested within 10-14 days.",
    ],
    "steps": [
        "With 2 more weeks of regular movement, your energy typically rises and afternoon slumps become less common.",
        "In two weeks of consistent activity, most people report better mood and more natural daytime energy.",
    ],
    "water": [
        "Better hydration usually shows results within a week, starting with clearer thinking and better energy.",
    ],
    "general": [
        "Following these habits for two weeks can noticeably shift how you feel each morning.",
        "In two weeks of applying even one of these tips consistently, most people feel a positive shift in energy and mood.",
        "Small consistent changes compound quickly. Two weeks from now you'll likely notice real differences.",
    ],
}


@dataclass
class WellnessAnalysis:
    narrative: str
    tips: List[str] = field(default_factory=list)
    predicted_outcome: str = ""
    disclaimer: str = DISCLAIMER
    from_fallback: bool = True

    def to_dict(self) -> dict:
        return {
            "narrative": self.narrative,
            "tips": list(self.tips),
            "predicted_outcome": self.predicted_outcome,
            "disclaimer": self.disclaimer,
            "from_fallback": self.from_fallback,
        }


def _tier(value: float, thresholds: Dict[str, float]) -> str:
    if value >= thresholds["great"]:
        return "great"
    if value >= thresholds["good"]:
        return "good"
    return "low"


def _logging_note(days_logged: int) -> str:
    if days_logged >= 6:
        return "You've done a great job logging consistently, so this week's picture is clear."
    if days_logged >= 4:
        return (
            f"You logged {days_logged} out of 7 days. Good effort, though daily logging "
            f"would give even sharper insights."
        )
    return (
        f"You logged {days_logged} day(s) this week. Try to log daily so patterns "
        f"can be tracked more accurately."
    )


def select_tips(
    avg_steps: float,
    avg_sleep: float,
    avg_water: float,
    avg_stress: float,
    avg_energy: float,
    rng: random.Random,
) -> List[str]:
    """Top three tips by priority, topped up with general tips."""
    priorities = []

    if avg_sleep < THRESHOLDS["sleep"]["low"]:
        priorities.append(("sleep_low", 10))
    elif avg_sleep < THRESHOLDS["sleep"]["good"]:
        priorities.append(("sleep_good", 6))

    if avg_steps < THRESHOLDS["steps"]["low"]:
        priorities.append(("steps_low", 9))
    elif avg_steps < THRESHOLDS["steps"]["good"]:
        priorities.append(("steps_good", 5))

    if avg_water < THRESHOLDS["water"]["low"]:
        priorities.append(("water_low", 8))
    elif avg_water < THRESHOLDS["water"]["good"]:
        priorities.append(("water_good", 4))

    if avg_stress > THRESHOLDS["stress"]["high"]:
        priorities.append(("stress_high", 7))
    if avg_energy < THRESHOLDS["energy"]["low"]:
        priorities.append(("energy_low", 6))

    # Stable sort keeps insertion order among equal priorities
    priorities.sort(key=lambda item: item[1], reverse=True)

    tips = [rng.choice(TIPS[key]) for key, _ in priorities[:TIPS_PER_ANALYSIS]]

    general_pool = list(TIPS["general"])
    while len(tips) < TIPS_PER_ANALYSIS and general_pool:
        tips.append(general_pool.pop(rng.randrange(len(general_pool))))
    return tips


def weakest_metric(avg_sleep: float, avg_steps: float, avg_water: float) -> str:
    """Metric furthest below its 'great' threshold, relatively."""
    ratios = {
        "sleep": avg_sleep / THRESHOLDS["sleep"]["great"],
        "steps": avg_steps / THRESHOLDS["steps"]["great"],
        "water": avg_water / THRESHOLDS["water"]["great"],
    }
    return min(ratios, key=ratios.get)


def generate_wellness_analysis(
    health_entries: Sequence[HealthEntry],
    mood_entries: Sequence[MoodEntry],
    rng: Optional[random.Random] = None,
) -> WellnessAnalysis:
    """
    Build rule-based wellness advice from a week of entries.

    Args:
        health_entries: Health entries for the period
        mood_entries: Mood entries for the period
        rng: Random source for phrase and tip variants

    Returns:
        WellnessAnalysis with narrative, three tips and an outcome
    """
    rng = rng or random.Random()

    avg_steps = mean(e.steps or 0 for e in health_entries)
    avg_sleep = mean(e.sleep_hours or 0 for e in health_entries)
    avg_water = mean(e.water_litres or 0 for e in health_entries)
    avg_energy = mean(m.energy_level or DEFAULT_MOOD_LEVEL for m in mood_entries) * 10
    avg_stress = mean(m.stress_level or DEFAULT_MOOD_LEVEL for m in mood_entries)

    sleep_phrase = rng.choice(SLEEP_PHRASES[_tier(avg_sleep, THRESHOLDS["sleep"])])
    step_phrase = rng.choice(STEP_PHRASES[_tier(avg_steps, THRESHOLDS["steps"])])
    narrative = f"{sleep_phrase} {step_phrase} {_logging_note(len(health_entries))}"

    if health_entries:
        weakest = weakest_metric(avg_sleep, avg_steps, avg_water)
    else:
        weakest = "general"
    outcome = rng.choice(OUTCOMES[weakest])

    logger.info(
        f"[WELLNESS] {len(health_entries)} health / {len(mood_entries)} mood entries, "
        f"steps={avg_steps:.0f} sleep={avg_sleep:.1f} water={avg_water:.1f}, weakest={weakest}"
    )

    return WellnessAnalysis(
        narrative=narrative,
        tips=select_tips(avg_steps, avg_sleep, avg_water, avg_stress, avg_energy, rng),
        predicted_outcome=outcome,
    )

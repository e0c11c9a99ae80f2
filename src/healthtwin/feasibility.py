"""
Scenario Feasibility and Forecast Confidence.

Heuristic qualifiers attached to what-if forecasts: how realistic the
proposed habits are, how much logged history backs the baseline, and
which avatar state the scenario maps to.
"""

import logging
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List

logger = logging.getLogger(__name__)


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AvatarState(str, Enum):
    HAPPY = "happy"
    SAD = "sad"
    SLEEPY = "sleepy"


_CONFIDENCE_RANK = {
    ConfidenceLevel.LOW: 1,
    ConfidenceLevel.MEDIUM: 2,
    ConfidenceLevel.HIGH: 3,
}

# Risk totals at or above these mark a scenario as medium / low confidence.
MEDIUM_RISK = 3
LOW_RISK = 6


@dataclass
class FeasibilityAssessment:
    confidence: ConfidenceLevel
    warnings: List[str] = field(default_factory=list)
    is_unrealistic: bool = False
    risk: int = 0

    def to_dict(self) -> dict:
        return {
            "confidence": self.confidence.value,
            "warnings": list(self.warnings),
            "is_unrealistic": self.is_unrealistic,
            "risk": self.risk,
        }


@dataclass(frozen=True)
class DataConfidenceAssessment:
    confidence: ConfidenceLevel
    logged_days: int
    total_days: int
    note: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["confidence"] = self.confidence.value
        return data


@dataclass(frozen=True)
class ScenarioStateDecision:
    state: AvatarState
    rule_name: str
    rule_expression: str
    matched_because: str

    def to_dict(self) -> dict:
        data = asdict(self)
        data["state"] = self.state.value
        return data


def _fmt_steps(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def assess_feasibility(
    sim_sleep: float,
    sim_steps: float,
    baseline_sleep: float,
    baseline_steps: float,
) -> FeasibilityAssessment:
    """
    Score how realistic a simulated routine is.

    Every rule that fires adds to the risk total and appends a warning.
    A total of 6 or more is low confidence and flagged unrealistic; 3 or
    more is medium confidence.
    """
    risk = 0
    warnings: List[str] = []

    if sim_sleep < 4:
        risk += 3
        warnings.append(f"Sleep at {sim_sleep:.1f}h is likely unsustainable for daily planning.")
    elif sim_sleep < 5:
        risk += 1
        warnings.append(f"Very low sleep ({sim_sleep:.1f}h) may reduce forecast reliability.")

    if sim_sleep > 10:
        risk += 3
        warnings.append(f"Sleep at {sim_sleep:.1f}h is unusually high for a long-term routine.")
    elif sim_sleep > 9:
        risk += 1
        warnings.append(f"High sleep ({sim_sleep:.1f}h) is less common in day-to-day patterns.")

    if sim_steps < 1000:
        risk += 1
        warnings.append(f"Very low steps ({_fmt_steps(sim_steps)}) may represent an outlier day.")

    if sim_steps > 18000:
        risk += 2
        warnings.append(f"Very high steps ({_fmt_steps(sim_steps)}) can be hard to maintain daily.")

    if abs(sim_sleep - baseline_sleep) >= 3:
        risk += 2
        warnings.append(f"Sleep change is large vs baseline ({sim_sleep - baseline_sleep:.1f}h).")

    if abs(sim_steps - baseline_steps) >= 9000:
        risk += 1
        warnings.append(f"Step change is large vs baseline ({_fmt_steps(sim_steps - baseline_steps)}).")

    if sim_sleep >= 10 and sim_steps >= 16000:
        risk += 2
        warnings.append("Combining very high sleep with very high steps is likely unrealistic.")

    if sim_sleep <= 4.5 and sim_steps >= 16000:
        risk += 2
        warnings.append("Low sleep with very high activity is an extreme combination.")

    if risk >= LOW_RISK:
        confidence = ConfidenceLevel.LOW
    elif risk >= MEDIUM_RISK:
        confidence = ConfidenceLevel.MEDIUM
    else:
        confidence = ConfidenceLevel.HIGH

    if warnings:
        logger.debug(f"[FEASIBILITY] risk={risk} ({confidence.value}): {warnings}")

    return FeasibilityAssessment(
        confidence=confidence,
        warnings=warnings,
        is_unrealistic=confidence == ConfidenceLevel.LOW,
        risk=risk,
    )


def assess_data_confidence(logged_days: int, total_days: int = 7) -> DataConfidenceAssessment:
    """Confidence in a baseline given how many of the recent days were logged."""
    logged = max(0, min(total_days, logged_days))

    if logged <= 2:
        return DataConfidenceAssessment(
            ConfidenceLevel.LOW, logged, total_days,
            f"Only {logged}/{total_days} recent logs found. Forecast is tentative.",
        )
    if logged <= 4:
        return DataConfidenceAssessment(
            ConfidenceLevel.MEDIUM, logged, total_days,
            f"Partial history ({logged}/{total_days} logs). Use forecast directionally.",
        )
    return DataConfidenceAssessment(
        ConfidenceLevel.HIGH, logged, total_days,
        f"Good recent coverage ({logged}/{total_days} logs).",
    )


def lower_confidence(a: ConfidenceLevel, b: ConfidenceLevel) -> ConfidenceLevel:
    """The less confident of two levels."""
    return a if _CONFIDENCE_RANK[ConfidenceLevel(a)] <= _CONFIDENCE_RANK[ConfidenceLevel(b)] else b


def infer_avatar_decision(sim_sleep: float, predicted_energy: float) -> ScenarioStateDecision:
    """
    Map a scenario to an avatar state, recording which rule matched.

    Rules are checked in order A, B, C, D.
    """
    sleep = f"sleep={sim_sleep:.1f}h"
    both = f"{sleep} and energy={predicted_energy:g}"

    if sim_sleep <= 4.5:
        return ScenarioStateDecision(
            AvatarState.SLEEPY, "Rule A", "if sleep <= 4.5h -> sleepy", sleep,
        )
    if sim_sleep <= 5.5 and predicted_energy < 55:
        return ScenarioStateDecision(
            AvatarState.SLEEPY, "Rule B",
            "if sleep <= 5.5h and predictedEnergy < 55 -> sleepy", both,
        )
    if sim_sleep >= 7 and predicted_energy >= 70:
        return ScenarioStateDecision(
            AvatarState.HAPPY, "Rule C",
            "if sleep >= 7h and predictedEnergy >= 70 -> happy", both,
        )
    return ScenarioStateDecision(AvatarState.SAD, "Rule D", "otherwise -> sad", both)


DATA_CONFIDENCE_PREFIX = {
    ConfidenceLevel.LOW: "Limited data",
    ConfidenceLevel.MEDIUM: "Partial data",
}


def qualify_insight(insight: str, data_confidence: DataConfidenceAssessment) -> str:
    """Prefix a forecast insight with a data-coverage caveat unless confidence is high."""
    prefix = DATA_CONFIDENCE_PREFIX.get(data_confidence.confidence)
    if prefix is None:
        return insight
    return (
        f"{prefix} ({data_confidence.logged_days}/{data_confidence.total_days} logs). "
        f"{insight}"
    )

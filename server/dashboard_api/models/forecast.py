"""What-if forecast response models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal

ConfidenceLabel = Literal["high", "medium", "low"]


class ForecastPointModel(BaseModel):
    """One simulated day."""

    model_config = ConfigDict(populate_by_name=True)

    day: int
    date: str
    predicted_energy: int = Field(ge=0, le=100, serialization_alias="predictedEnergy")
    predicted_mood: str = Field(serialization_alias="predictedMood")


class FeasibilityModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    confidence: ConfidenceLabel
    warnings: list[str]
    is_unrealistic: bool = Field(serialization_alias="isUnrealistic")


class DataConfidenceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    confidence: ConfidenceLabel
    logged_days: int = Field(serialization_alias="loggedDays")
    total_days: int = Field(serialization_alias="totalDays")
    note: str


class AvatarDecisionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    state: Literal["happy", "sad", "sleepy"]
    rule_name: str = Field(serialization_alias="ruleName")
    rule_expression: str = Field(serialization_alias="ruleExpression")
    matched_because: str = Field(serialization_alias="matchedBecause")


class ForecastResponse(BaseModel):
    """30-day what-if forecast with its qualifiers."""

    model_config = ConfigDict(populate_by_name=True)

    baseline_energy: int = Field(serialization_alias="baselineEnergy")
    predicted_energy: int = Field(serialization_alias="predictedEnergy")
    predicted_mood: str = Field(serialization_alias="predictedMood")
    predicted_mood_emoji: str = Field(default="", serialization_alias="predictedMoodEmoji")
    energy_impact: int = Field(serialization_alias="energyImpact")
    insight: str
    forecast: list[ForecastPointModel]
    feasibility: FeasibilityModel
    data_confidence: DataConfidenceModel = Field(serialization_alias="dataConfidence")
    confidence: ConfidenceLabel
    avatar: AvatarDecisionModel

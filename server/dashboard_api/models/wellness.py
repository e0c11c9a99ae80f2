"""Wellness advice response model."""
from pydantic import BaseModel, Field, ConfigDict


class WellnessAdviceModel(BaseModel):
    """Rule-based wellness advice for a recent period."""

    model_config = ConfigDict(populate_by_name=True)

    narrative: str
    tips: list[str]
    predicted_outcome: str = Field(serialization_alias="predictedOutcome")
    disclaimer: str
    from_fallback: bool = Field(serialization_alias="fromFallback")

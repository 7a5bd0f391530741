from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from core.models.profile import ActivityLevel, HealthGoal, Profile


class ProfileIn(BaseModel):
    name: str
    age: int = Field(..., gt=0, le=130, description="years")
    height_cm: float = Field(..., gt=0, le=300, allow_inf_nan=False)
    weight_kg: float = Field(..., gt=0, le=700, allow_inf_nan=False)
    activity_level: ActivityLevel = ActivityLevel.sedentary
    dietary_preference: str = Field(..., examples=["vegetarian", "vegan", "none"])
    allergies: str | None = None
    cultural_preference: str | None = None
    health_goal: HealthGoal = HealthGoal.maintain

    model_config = ConfigDict(from_attributes=True)

    def to_profile(self) -> Profile:
        return Profile(
            name=self.name,
            age=self.age,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_level=self.activity_level.value,
            dietary_preference=self.dietary_preference,
            health_goal=self.health_goal.value,
            allergies=self.allergies,
            cultural_preference=self.cultural_preference,
        )


class ProfileOut(ProfileIn):
    """Same fields as input, read back from the session."""
    pass


class MetricsOut(BaseModel):
    bmi: float
    calories: int

    model_config = ConfigDict(from_attributes=True)

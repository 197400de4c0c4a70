"""
Calorie recommendation schemas.

Inputs and outputs of the BMR / TDEE / target-calorie engine in
:mod:`app.nutrition.calories`.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Gender(str, Enum):
    """Sexes supported by the Mifflin-St Jeor formula."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Self-reported weekly activity, mapped to a TDEE multiplier."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class WeightGoal(str, Enum):
    """Direction of the daily calorie adjustment."""
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class CalorieRecommendationRequest(BaseModel):
    """Body metrics submitted by the onboarding form."""

    weight: float = Field(..., gt=0, le=500, description="Body weight (kg)")
    height: float = Field(..., gt=0, le=300, description="Height (cm)")
    age: int = Field(..., gt=0, le=120, description="Age (years)")
    gender: Gender
    target_body_fat: float = Field(..., ge=0, le=100, description="Target body fat (%)")
    activity_level: ActivityLevel = ActivityLevel.MODERATE


class CalorieRecommendation(BaseModel):
    """Derived daily energy guidance.  Not persisted."""

    bmr: int = Field(..., description="Basal metabolic rate (kcal/day), rounded")
    tdee: int = Field(..., description="Total daily energy expenditure (kcal/day)")
    target_calories: int = Field(..., description="Recommended daily intake (kcal)")
    goal: WeightGoal
    message: str


class ActivityLevelInfo(BaseModel):
    """Activity level with its multiplier and display label."""

    level: ActivityLevel
    multiplier: float
    label: str

"""
BMR, TDEE and daily calorie targets.

Pure, deterministic functions: no I/O, no hidden state.  The onboarding
form is responsible for handing in positive weight / height / age.

Model
-----
Basal metabolic rate follows the Mifflin-St Jeor equation:

    base = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y)
    male:   BMR = base + 5
    female: BMR = base − 161

TDEE scales BMR by a fixed activity multiplier (1.2 … 1.9).  The daily
target then moves TDEE by a fixed offset depending on the goal:

    lose:     max(1200, TDEE − 500)
    maintain: TDEE
    gain:     TDEE + 300

The 1200 kcal floor is a safety clamp and applies even when TDEE itself
is very low.

Limitations
-----------
The equation only has male and female branches.  Accounts may store
other gender values; those are rejected here instead of guessing a
third formula.
"""

from __future__ import annotations

import math
from typing import Union

from app.schemas.nutrition import (
    ActivityLevel,
    ActivityLevelInfo,
    CalorieRecommendation,
    Gender,
    WeightGoal,
)

# ======================================================================
# Tables
# ======================================================================

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

ACTIVITY_LEVEL_LABELS: dict[ActivityLevel, str] = {
    ActivityLevel.SEDENTARY: "앉아서 생활 (운동 거의 안함)",
    ActivityLevel.LIGHT: "가벼운 활동 (주 1-3회 운동)",
    ActivityLevel.MODERATE: "보통 활동 (주 3-5회 운동)",
    ActivityLevel.ACTIVE: "활발한 활동 (주 6-7회 운동)",
    ActivityLevel.VERY_ACTIVE: "매우 활발 (하루 2회 이상 운동)",
}

MIN_DAILY_CALORIES = 1200
DEFICIT_KCAL = 500
SURPLUS_KCAL = 300

# Target body fat (%) thresholds: (lose at or below, gain at or above)
_GOAL_THRESHOLDS: dict[Gender, tuple[float, float]] = {
    Gender.MALE: (10.0, 20.0),
    Gender.FEMALE: (18.0, 28.0),
}

_MESSAGES: dict[WeightGoal, str] = {
    WeightGoal.LOSE: "목표 체지방 {fat}% 달성을 위해 하루 {kcal}kcal를 섭취하세요.",
    WeightGoal.GAIN: "근육량 증가와 함께 {fat}% 체지방 유지를 위해 하루 {kcal}kcal를 섭취하세요.",
    WeightGoal.MAINTAIN: "현재 체형을 유지하면서 {fat}% 체지방을 위해 하루 {kcal}kcal를 섭취하세요.",
}


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def _format_percent(value: float) -> str:
    """Render 10.0 as '10' and 10.5 as '10.5'."""
    return f"{value:g}"


# ======================================================================
# Core computation
# ======================================================================


def calculate_bmr(
    weight: float,
    height: float,
    age: float,
    gender: Union[Gender, str],
) -> float:
    """Basal metabolic rate (kcal/day), Mifflin-St Jeor, unrounded.

    Args:
        weight: Body weight in kg.
        height: Height in cm.
        age: Age in years.
        gender: ``"male"`` or ``"female"``.

    Raises:
        ValueError: For any gender other than male / female.
    """
    sex = Gender(gender)
    base = 10 * weight + 6.25 * height - 5 * age
    return base + 5 if sex is Gender.MALE else base - 161


def calculate_tdee(bmr: float, activity_level: Union[ActivityLevel, str]) -> int:
    """Total daily energy expenditure, rounded to the nearest kcal.

    Raises:
        ValueError: If ``activity_level`` is not a known level.
    """
    level = ActivityLevel(activity_level)
    return _round_half_up(bmr * ACTIVITY_MULTIPLIERS[level])


def calculate_target_calories(tdee: int, goal: Union[WeightGoal, str]) -> int:
    """Daily intake target for a goal; weight loss never goes below 1200 kcal."""
    goal = WeightGoal(goal)
    if goal is WeightGoal.LOSE:
        return max(MIN_DAILY_CALORIES, tdee - DEFICIT_KCAL)
    if goal is WeightGoal.GAIN:
        return tdee + SURPLUS_KCAL
    return tdee


def derive_goal(gender: Union[Gender, str], target_body_fat: float) -> WeightGoal:
    """Map a target body-fat percentage onto lose / maintain / gain."""
    lose_at, gain_at = _GOAL_THRESHOLDS[Gender(gender)]
    if target_body_fat <= lose_at:
        return WeightGoal.LOSE
    if target_body_fat >= gain_at:
        return WeightGoal.GAIN
    return WeightGoal.MAINTAIN


def build_message(goal: WeightGoal, target_body_fat: float, target_calories: int) -> str:
    return _MESSAGES[goal].format(fat=_format_percent(target_body_fat), kcal=target_calories)


# ======================================================================
# Main entry point
# ======================================================================


def get_calorie_recommendation(
    weight: float,
    height: float,
    age: float,
    gender: Union[Gender, str],
    target_body_fat: float,
    activity_level: Union[ActivityLevel, str] = ActivityLevel.MODERATE,
) -> CalorieRecommendation:
    """Full daily calorie guidance for a target body-fat percentage.

    Args:
        weight: Body weight in kg.
        height: Height in cm.
        age: Age in years.
        gender: ``"male"`` or ``"female"``.
        target_body_fat: Target body fat (%).
        activity_level: Activity level; defaults to ``moderate``.

    Returns:
        :class:`CalorieRecommendation` with rounded BMR, TDEE, the
        target intake, the derived goal, and a summary message.
    """
    bmr = calculate_bmr(weight, height, age, gender)
    tdee = calculate_tdee(bmr, activity_level)
    goal = derive_goal(gender, target_body_fat)
    target_calories = calculate_target_calories(tdee, goal)

    return CalorieRecommendation(
        bmr=_round_half_up(bmr),
        tdee=tdee,
        target_calories=target_calories,
        goal=goal,
        message=build_message(goal, target_body_fat, target_calories),
    )


def list_activity_levels() -> list[ActivityLevelInfo]:
    """All activity levels in ascending order with multiplier and label."""
    return [
        ActivityLevelInfo(level=level, multiplier=ACTIVITY_MULTIPLIERS[level], label=ACTIVITY_LEVEL_LABELS[level])
        for level in ActivityLevel
    ]

"""Nutrition engine: BMR, TDEE and daily calorie targets."""

from app.nutrition.calories import (
    calculate_bmr,
    calculate_target_calories,
    calculate_tdee,
    get_calorie_recommendation,
)

__all__ = [
    "calculate_bmr",
    "calculate_tdee",
    "calculate_target_calories",
    "get_calorie_recommendation",
]

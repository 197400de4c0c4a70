"""
Nutrition endpoints: BMR, TDEE and daily calorie recommendation.
"""

from fastapi import APIRouter

from app.nutrition.calories import get_calorie_recommendation, list_activity_levels
from app.schemas.nutrition import ActivityLevelInfo, CalorieRecommendation, CalorieRecommendationRequest

router = APIRouter()


@router.post(
    "/recommendation",
    summary="Compute BMR, TDEE and a daily calorie target.",
    response_model=CalorieRecommendation,
)
def calorie_recommendation(data: CalorieRecommendationRequest):
    return get_calorie_recommendation(
        weight=data.weight,
        height=data.height,
        age=data.age,
        gender=data.gender,
        target_body_fat=data.target_body_fat,
        activity_level=data.activity_level,
    )


@router.get(
    "/activity-levels",
    summary="List activity levels with their TDEE multipliers.",
    response_model=list[ActivityLevelInfo],
)
def activity_levels():
    return list_activity_levels()

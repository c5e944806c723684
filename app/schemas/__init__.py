"""Pydantic schemas for request/response validation."""

from app.schemas.daily_record import DailyLogCreate, DailyMeasurement, DailyRecordResponse
from app.schemas.weekly_summary import TrendComparison, TrendDirection, TrendVector, WeeklySummary
from app.schemas.coach_plan import CoachPlanAthlete, CoachPlanCreate, CoachPlanResponse
from app.schemas.recommendation import DayRow, MissingData, RecommendationResponse, ValidatedRecommendation

__all__ = [
    "DailyLogCreate",
    "DailyMeasurement",
    "DailyRecordResponse",
    "TrendComparison",
    "TrendDirection",
    "TrendVector",
    "WeeklySummary",
    "CoachPlanAthlete",
    "CoachPlanCreate",
    "CoachPlanResponse",
    "DayRow",
    "MissingData",
    "RecommendationResponse",
    "ValidatedRecommendation",
]

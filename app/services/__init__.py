"""Business logic services."""

from app.services.daily_record_service import DailyRecordService
from app.services.coach_plan_service import CoachPlanService
from app.services.summary_service import SummaryService
from app.services.recommendation_service import RecommendationService

__all__ = [
    "DailyRecordService",
    "CoachPlanService",
    "SummaryService",
    "RecommendationService",
]

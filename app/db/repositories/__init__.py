"""Database repositories."""

from app.db.repositories.daily_record import DailyRecordRepository
from app.db.repositories.weekly_summary import WeeklySummaryRepository
from app.db.repositories.coach_plan import CoachPlanRepository

__all__ = [
    "DailyRecordRepository",
    "WeeklySummaryRepository",
    "CoachPlanRepository",
]

"""SQLModel database models."""

from app.models.daily_record import DailyRecord
from app.models.weekly_summary import WeeklySummaryRecord
from app.models.coach_plan import CoachPlan

__all__ = [
    "DailyRecord",
    "WeeklySummaryRecord",
    "CoachPlan",
]

"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.daily_record import DailyRecord  # noqa: F401
from app.models.weekly_summary import WeeklySummaryRecord  # noqa: F401
from app.models.coach_plan import CoachPlan  # noqa: F401

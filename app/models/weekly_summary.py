"""
Weekly summary database model.

Flat storage of :class:`app.schemas.weekly_summary.WeeklySummary`;
the week's day snapshot is kept as JSON.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.daily_record import utcnow


class WeeklySummaryRecord(SQLModel, table=True):
    """One row per athlete per week start (idempotent upsert target)."""
    __tablename__ = "weekly_summaries"
    __table_args__ = (
        UniqueConstraint("athlete_id", "week_start", name="uq_weekly_summary_athlete_week"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: str = Field(nullable=False, index=True, max_length=64)
    week_start: datetime.date = Field(nullable=False, index=True)
    week_end: datetime.date = Field(nullable=False)

    mileage_so_far: float = Field(default=0.0, nullable=False)

    average_stress: Optional[float] = Field(default=None)
    stress_trend: str = Field(default="unchanged", max_length=16)
    average_sleep: Optional[float] = Field(default=None)
    sleep_trend: str = Field(default="unchanged", max_length=16)
    average_resting_heart_rate: Optional[float] = Field(default=None)
    resting_heart_rate_trend: str = Field(default="unchanged", max_length=16)
    average_exercise_heart_rate: Optional[float] = Field(default=None)
    exercise_heart_rate_trend: str = Field(default="unchanged", max_length=16)
    average_perceived_exertion: Optional[float] = Field(default=None)
    perceived_exertion_trend: str = Field(default="unchanged", max_length=16)

    daily_records: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)

"""
Daily record database model.

Defines the daily_records table: one row per athlete per calendar day.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel


def utcnow() -> datetime.datetime:
    """Timezone-aware UTC timestamp for the timestamp columns."""
    return datetime.datetime.now(datetime.timezone.utc)


class DailyRecord(SQLModel, table=True):
    """
    Daily athlete measurement entry.

    Later writes for the same (athlete, day) merge into the existing row.
    ``recommendation`` holds the validated weekly note once published.
    """
    __tablename__ = "daily_records"
    __table_args__ = (
        UniqueConstraint("athlete_id", "day", name="uq_daily_record_athlete_day"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: str = Field(nullable=False, index=True, max_length=64)
    day: datetime.date = Field(nullable=False, index=True)

    # Volume
    mileage: Optional[float] = Field(default=None)

    # Tracked metrics
    stress: Optional[float] = Field(default=None)
    sleep: Optional[float] = Field(default=None)
    resting_heart_rate: Optional[float] = Field(default=None)
    exercise_heart_rate: Optional[float] = Field(default=None)
    perceived_exertion: Optional[float] = Field(default=None)

    notes: Optional[str] = Field(default=None)
    recommendation: Optional[str] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)

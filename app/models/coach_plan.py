"""
Coach plan database model.

One plan per athlete per day; the missing-data scan only checks
presence.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.models.daily_record import utcnow


class CoachPlan(SQLModel, table=True):
    __tablename__ = "coach_plans"
    __table_args__ = (
        UniqueConstraint("athlete_id", "day", name="uq_coach_plan_athlete_day"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    athlete_id: str = Field(nullable=False, index=True, max_length=64)
    coach_id: str = Field(nullable=False, max_length=64)
    day: datetime.date = Field(nullable=False, index=True)

    percentage: float = Field(nullable=False)
    note: str = Field(default="")
    mileage_recommendation: int = Field(default=0, nullable=False)

    created_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)
    updated_at: datetime.datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False)

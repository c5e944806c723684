"""
Weekly summary schemas.

A :class:`WeeklySummary` is a derived cache of one athlete's daily
records for one calendar week, keyed by ``(athlete_id, week_start)``.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.daily_record import DailyMeasurement


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    UNCHANGED = "unchanged"


class TrendComparison(BaseModel):
    """This week's average for one metric and its direction versus last week."""

    value: Optional[float] = Field(
        None,
        description="Current week average; None when no reading was logged",
    )
    direction: TrendDirection


class TrendVector(BaseModel):
    """One trend comparison per tracked metric."""

    stress: TrendComparison
    sleep: TrendComparison
    resting_heart_rate: TrendComparison
    exercise_heart_rate: TrendComparison
    perceived_exertion: TrendComparison


class WeeklySummary(BaseModel):
    athlete_id: str
    week_start: datetime.date
    week_end: datetime.date = Field(..., description="Exclusive end of the week window")
    mileage_so_far: float = Field(..., ge=0.0, description="Total of the volume metric")
    trends: TrendVector
    days: list[DailyMeasurement] = Field(
        default_factory=list,
        description="The week's daily records, ascending by day",
    )

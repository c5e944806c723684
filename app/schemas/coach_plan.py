"""
Coach plan schemas.

A coach plan assigns, for one date, a percentage of each athlete's
baseline weekly mileage plus an optional note.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CoachPlanAthlete(BaseModel):
    """Athlete targeted by a plan, as resolved by the identity layer."""

    athlete_id: str = Field(..., min_length=1)
    baseline_weekly_mileage: Optional[float] = Field(
        None, ge=0.0,
        description="Athlete's usual weekly mileage (treated as 0 when unknown)",
    )


class CoachPlanCreate(BaseModel):
    coach_id: str = Field(..., min_length=1)
    percentage: float = Field(..., ge=0.0, le=200.0, description="Share of baseline weekly mileage")
    note: str = Field("", max_length=2000)
    athletes: list[CoachPlanAthlete] = Field(..., min_length=1)


class CoachPlanResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    athlete_id: str
    coach_id: str
    day: datetime.date
    percentage: float
    note: str
    mileage_recommendation: int

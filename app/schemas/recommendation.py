"""
Recommendation pipeline schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MissingData(BaseModel):
    """Dates of the week lacking athlete input or coach input."""

    missing_athlete_input: list[datetime.date] = Field(default_factory=list)
    missing_coach_input: list[datetime.date] = Field(default_factory=list)


class DayRow(BaseModel):
    """One line of the per-day table shown to the text generator."""

    day: datetime.date
    values: dict[str, Optional[float]]
    notes: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True when no measured metric, mileage included, was logged for the day."""
        return all(v is None for v in self.values.values())


class ValidatedRecommendation(BaseModel):
    text: str
    overridden: bool = Field(
        False,
        description="True when the canonical insufficient-data sentence replaced the generator output",
    )


class RecommendationResponse(BaseModel):
    athlete_id: str
    week_start: datetime.date
    recommendation: str
    overridden: bool
    records_updated: int
    missing_data: MissingData

"""
Daily athlete measurement schemas.

One record per athlete per calendar day.  The metric set is closed: the
volume metric (``mileage``) is totalled over a week, every other metric
in :data:`TRACKED_METRICS` is averaged and trended.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

VOLUME_METRIC = "mileage"

TRACKED_METRICS = ["stress", "sleep", "resting_heart_rate", "exercise_heart_rate", "perceived_exertion", ]

# Every numeric field a day can carry.
MEASURED_METRICS = [VOLUME_METRIC] + TRACKED_METRICS

# Keys accepted by a daily log write.
LOG_KEYS = MEASURED_METRICS + ["notes"]

METRIC_LABELS: dict[str, str] = {
    "mileage": "Mileage",
    "stress": "Stress (1-10)",
    "sleep": "Sleep (hours)",
    "resting_heart_rate": "Resting heart rate (bpm)",
    "exercise_heart_rate": "Exercise heart rate (bpm)",
    "perceived_exertion": "Perceived exertion (1-10)",
}


class DailyLogCreate(BaseModel):
    """Partial daily log.  Omitted fields keep their stored value."""

    model_config = ConfigDict(extra="forbid")

    mileage: Optional[float] = Field(None, ge=0.0, le=500.0, description="Distance covered (miles)")
    stress: Optional[float] = Field(None, ge=1.0, le=10.0, description="Subjective stress, 1-10")
    sleep: Optional[float] = Field(None, ge=0.0, le=24.0, description="Sleep duration (hours)")
    resting_heart_rate: Optional[float] = Field(None, ge=20.0, le=250.0, description="Resting heart rate (bpm)")
    exercise_heart_rate: Optional[float] = Field(None, ge=20.0, le=250.0, description="Exercise heart rate (bpm)")
    perceived_exertion: Optional[float] = Field(None, ge=1.0, le=10.0, description="Perceived exertion, 1-10")
    notes: Optional[str] = Field(None, max_length=2000, description="Free-text athlete note")


class DailyMeasurement(BaseModel):
    """A day's measurements as carried inside a weekly summary."""

    model_config = ConfigDict(from_attributes=True)

    day: datetime.date
    mileage: Optional[float] = None
    stress: Optional[float] = None
    sleep: Optional[float] = None
    resting_heart_rate: Optional[float] = None
    exercise_heart_rate: Optional[float] = None
    perceived_exertion: Optional[float] = None
    notes: Optional[str] = None
    recommendation: Optional[str] = None


class DailyRecordResponse(DailyMeasurement):
    """Stored daily record in API responses."""

    id: int
    athlete_id: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

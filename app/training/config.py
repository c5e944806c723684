"""
Pipeline configuration.

Every tunable of the weekly summary and recommendation pipeline lives
here so that nothing is hard-coded in the computations and tests can
inject their own values.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.core.config import Settings

SUNDAY = 6

INSUFFICIENT_DATA_SENTENCE = "Insufficient data to generate a recommendation for this week."


class PipelineConfig(BaseModel):
    """Configuration shared by bucketing, trends and validation."""

    reference_timezone: str = Field("UTC", description="Zone in which datetimes collapse to calendar days")
    week_start_weekday: int = Field(SUNDAY, ge=0, le=6, description="datetime.weekday() of the week anchor")
    trend_tolerance: float = Field(0.01, ge=0.0)
    max_recommendation_words: int = Field(200, ge=1)
    insufficient_days_threshold: int = Field(3, ge=1, le=7)
    insufficient_data_sentence: str = INSUFFICIENT_DATA_SENTENCE

    @classmethod
    def from_settings(cls, settings: Settings) -> PipelineConfig:
        return cls(
            reference_timezone=settings.REFERENCE_TIMEZONE,
            week_start_weekday=settings.WEEK_START_WEEKDAY,
            trend_tolerance=settings.TREND_TOLERANCE,
            max_recommendation_words=settings.MAX_RECOMMENDATION_WORDS,
            insufficient_days_threshold=settings.INSUFFICIENT_DAYS_THRESHOLD,
        )


# Singleton default config
DEFAULT_CONFIG = PipelineConfig()

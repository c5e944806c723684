"""
Weekly summary assembly.

Buckets the athlete's daily records into the week owning ``as_of`` and
the week before it, aggregates both, classifies the trends and upserts
the result.  The summary is computed entirely in memory before the
single write, so a failure never leaves a half-built summary stored.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.core.exceptions import NoDataError
from app.schemas.daily_record import DailyMeasurement
from app.schemas.weekly_summary import WeeklySummary
from app.training.calendar import DateLike, week_window
from app.training.config import DEFAULT_CONFIG, PipelineConfig
from app.training.metrics import aggregate
from app.training.stores import DailyRecordStore, WeeklySummaryStore
from app.training.trends import compare_all

logger = logging.getLogger(__name__)


def compute_summary(athlete_id: str, as_of: DateLike, records: DailyRecordStore,
                    config: Optional[PipelineConfig] = None) -> WeeklySummary:
    """Compute the summary for the week owning ``as_of`` without storing it.

    Raises:
        InvalidDateError: ``as_of`` is not a calendar date.
        NoDataError: the athlete has no record in that week.
    """
    cfg = config or DEFAULT_CONFIG
    window = week_window(as_of, cfg.week_start_weekday, cfg.reference_timezone)
    prev_window = window.previous()

    current = sorted(records.get_by_athlete_window(athlete_id, window.start, window.end), key=lambda r: r.day)
    if not current:
        raise NoDataError(f"No athlete data found for the week starting {window.start.isoformat()}.")
    previous = records.get_by_athlete_window(athlete_id, prev_window.start, prev_window.end)

    current_metrics = aggregate(current)
    previous_metrics = aggregate(previous)

    return WeeklySummary(
        athlete_id=athlete_id,
        week_start=window.start,
        week_end=window.end,
        mileage_so_far=current_metrics.total_volume,
        trends=compare_all(current_metrics.averages, previous_metrics.averages, cfg.trend_tolerance),
        days=[DailyMeasurement.model_validate(record) for record in current],
    )


def build_summary(athlete_id: str, as_of: DateLike, records: DailyRecordStore, summaries: WeeklySummaryStore,
                  config: Optional[PipelineConfig] = None) -> WeeklySummary:
    """Compute and upsert the weekly summary keyed by (athlete, week start).

    Safe to call repeatedly: the same inputs yield an equal summary and
    a single stored row.
    """
    summary = compute_summary(athlete_id, as_of, records, config)
    summaries.upsert(summary)
    logger.info("Weekly summary stored for athlete=%s week_start=%s (%d days, mileage=%.2f)",
                athlete_id, summary.week_start, len(summary.days), summary.mileage_so_far)
    return summary

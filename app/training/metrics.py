"""
Weekly metrics aggregation.

Averages count only the readings that are present: a missing stress
value must not pull the week's stress average toward zero, and a week
with no reading at all has no average (``None``), not 0.  The volume
metric is different: a day without distance is a genuine zero
contribution to the week's total.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from app.schemas.daily_record import TRACKED_METRICS, VOLUME_METRIC


class WeekMetrics(BaseModel):
    """Totals and null-aware averages for one athlete-week."""

    total_volume: float = 0.0
    averages: dict[str, Optional[float]] = Field(default_factory=dict)
    present_counts: dict[str, int] = Field(default_factory=dict)


def _reading(record: Any, metric: str) -> Optional[float]:
    """A metric value, or ``None`` when absent (NaN counts as absent)."""
    value = getattr(record, metric, None)
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return value


def average_of(values: Iterable[Optional[float]]) -> Optional[float]:
    """Mean of the present values; ``None`` if there are none."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


def aggregate(records: Sequence[Any], metrics: Sequence[str] = TRACKED_METRICS,
              volume_metric: str = VOLUME_METRIC) -> WeekMetrics:
    """Aggregate one week of daily records.

    Args:
        records: Daily records (any objects exposing the metric attributes).
        metrics: Metrics to average.
        volume_metric: Metric to total, absent readings contributing 0.
    """
    total = 0.0
    for record in records:
        reading = _reading(record, volume_metric)
        if reading is not None:
            total += reading

    averages: dict[str, Optional[float]] = {}
    counts: dict[str, int] = {}
    for metric in metrics:
        readings = [_reading(record, metric) for record in records]
        averages[metric] = average_of(readings)
        counts[metric] = sum(1 for r in readings if r is not None)

    return WeekMetrics(total_volume=total, averages=averages, present_counts=counts)

"""
Week-over-week trend classification.

Policy for missing averages:

- nothing either week              -> unchanged, no value
- data this week, none last week   -> increasing
- none this week, data last week   -> decreasing

The last rule reads "stopped logging" as a decline.  That conflates
data availability with the metric itself and is kept on purpose; the
summary always carries ``value=None`` in that case so consumers can
tell the two apart.

When both weeks have an average, differences smaller than the
tolerance are reported as unchanged so that rounding noise does not
flip the displayed arrow.
"""

from __future__ import annotations

from typing import Mapping, Optional

from app.schemas.daily_record import TRACKED_METRICS
from app.schemas.weekly_summary import TrendComparison, TrendDirection, TrendVector


def compare(current: Optional[float], previous: Optional[float], tolerance: float) -> TrendComparison:
    """Classify ``current`` against ``previous``."""
    if current is None and previous is None:
        return TrendComparison(value=None, direction=TrendDirection.UNCHANGED)
    if previous is None:
        return TrendComparison(value=current, direction=TrendDirection.INCREASING)
    if current is None:
        return TrendComparison(value=None, direction=TrendDirection.DECREASING)

    diff = current - previous
    if abs(diff) < tolerance:
        direction = TrendDirection.UNCHANGED
    elif diff > 0:
        direction = TrendDirection.INCREASING
    else:
        direction = TrendDirection.DECREASING
    return TrendComparison(value=current, direction=direction)


def compare_all(current: Mapping[str, Optional[float]], previous: Mapping[str, Optional[float]],
                tolerance: float) -> TrendVector:
    """One comparison per tracked metric, same tolerance for all."""
    return TrendVector(**{
        metric: compare(current.get(metric), previous.get(metric), tolerance)
        for metric in TRACKED_METRICS
    })

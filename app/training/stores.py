"""
Store interfaces used by the pipeline.

The SQL repositories in :mod:`app.db.repositories` satisfy these; the
pipeline only ever receives them as arguments.
"""

from __future__ import annotations

import datetime
from typing import Any, Protocol, Sequence

from app.schemas.weekly_summary import WeeklySummary


class DailyRecordStore(Protocol):
    def get_by_athlete_window(
        self, athlete_id: str, start: datetime.date, end: datetime.date,
    ) -> Sequence[Any]: ...

    def set_recommendation(
        self, athlete_id: str, start: datetime.date, end: datetime.date, note: str,
    ) -> int: ...


class WeeklySummaryStore(Protocol):
    def upsert(self, summary: WeeklySummary) -> Any: ...


class CoachPlanStore(Protocol):
    def has_plan(self, athlete_id: str, day: datetime.date) -> bool: ...

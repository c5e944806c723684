"""
Missing-data detection for a week window.
"""

from __future__ import annotations

from app.schemas.recommendation import MissingData
from app.training.calendar import WeekWindow
from app.training.stores import CoachPlanStore, DailyRecordStore


def detect_missing_data(athlete_id: str, window: WeekWindow, records: DailyRecordStore,
                        coach_plans: CoachPlanStore) -> MissingData:
    """List the window's dates without an athlete record and without a coach plan.

    Read-only.  Both lists are in calendar order.
    """
    logged = {record.day for record in records.get_by_athlete_window(athlete_id, window.start, window.end)}
    days = window.days()
    return MissingData(
        missing_athlete_input=[day for day in days if day not in logged],
        missing_coach_input=[day for day in days if not coach_plans.has_plan(athlete_id, day)],
    )

"""
Weekly summary repository.

Stores :class:`WeeklySummary` values flat, keyed by
``(athlete_id, week_start)``.  Recomputing a week overwrites its row.
"""

import datetime
from typing import Any, Optional

from sqlmodel import Session, select

from app.db.repositories.base import dialect_insert, store_errors
from app.models.daily_record import utcnow
from app.models.weekly_summary import WeeklySummaryRecord
from app.schemas.daily_record import DailyMeasurement, TRACKED_METRICS
from app.schemas.weekly_summary import TrendComparison, TrendVector, WeeklySummary


def summary_to_flat(summary: WeeklySummary) -> dict[str, Any]:
    """Flatten a summary into ``weekly_summaries`` column values."""
    flat: dict[str, Any] = {
        "athlete_id": summary.athlete_id,
        "week_start": summary.week_start,
        "week_end": summary.week_end,
        "mileage_so_far": summary.mileage_so_far,
        "daily_records": [day.model_dump(mode="json") for day in summary.days],
    }
    for metric in TRACKED_METRICS:
        trend: TrendComparison = getattr(summary.trends, metric)
        flat[f"average_{metric}"] = trend.value
        flat[f"{metric}_trend"] = trend.direction.value
    return flat


def row_to_summary(row: WeeklySummaryRecord) -> WeeklySummary:
    """Rebuild the summary schema from a stored row."""
    trends = TrendVector(**{
        metric: TrendComparison(
            value=getattr(row, f"average_{metric}"),
            direction=getattr(row, f"{metric}_trend"),
        )
        for metric in TRACKED_METRICS
    })
    return WeeklySummary(
        athlete_id=row.athlete_id,
        week_start=row.week_start,
        week_end=row.week_end,
        mileage_so_far=row.mileage_so_far,
        trends=trends,
        days=[DailyMeasurement.model_validate(day) for day in row.daily_records],
    )


class WeeklySummaryRepository:
    """Repository for WeeklySummaryRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete_and_week(
        self, athlete_id: str, week_start: datetime.date,
    ) -> Optional[WeeklySummaryRecord]:
        with store_errors(self.session, "weekly summary lookup"):
            statement = select(WeeklySummaryRecord).where(
                WeeklySummaryRecord.athlete_id == athlete_id,
                WeeklySummaryRecord.week_start == week_start,
            )
            return self.session.exec(statement).first()

    def get_all_by_athlete(self, athlete_id: str, limit: int = 12) -> list[WeeklySummaryRecord]:
        """Most recent summaries first."""
        with store_errors(self.session, "weekly summary listing"):
            statement = (
                select(WeeklySummaryRecord)
                .where(WeeklySummaryRecord.athlete_id == athlete_id)
                .order_by(WeeklySummaryRecord.week_start.desc())
                .limit(limit)
            )
            return list(self.session.exec(statement).all())

    def upsert(self, summary: WeeklySummary) -> WeeklySummaryRecord:
        """Insert or overwrite the summary for its (athlete, week_start)."""
        flat = summary_to_flat(summary)
        now = utcnow()

        with store_errors(self.session, "weekly summary upsert"):
            insert = dialect_insert(self.session)
            if insert is not None:
                statement = insert(WeeklySummaryRecord.__table__).values(created_at=now, updated_at=now, **flat)
                overwrite = {key: statement.excluded[key] for key in flat
                             if key not in ("athlete_id", "week_start")}
                overwrite["updated_at"] = now
                statement = statement.on_conflict_do_update(
                    index_elements=["athlete_id", "week_start"], set_=overwrite,
                )
                self.session.execute(statement)
            else:
                row = self.session.exec(select(WeeklySummaryRecord).where(
                    WeeklySummaryRecord.athlete_id == summary.athlete_id,
                    WeeklySummaryRecord.week_start == summary.week_start,
                )).first()
                if row is None:
                    row = WeeklySummaryRecord(created_at=now, **flat)
                else:
                    for key, value in flat.items():
                        setattr(row, key, value)
                row.updated_at = now
                self.session.add(row)
            self.session.commit()

        return self.get_by_athlete_and_week(summary.athlete_id, summary.week_start)

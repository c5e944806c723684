"""
Daily record repository.

Handles database operations for :class:`DailyRecord`.  Writes for an
existing (athlete, day) merge the provided fields into the stored row.
"""

import datetime
from typing import Any, Optional

from sqlalchemy import update
from sqlmodel import Session, select

from app.db.repositories.base import dialect_insert, store_errors
from app.models.daily_record import DailyRecord, utcnow


class DailyRecordRepository:
    """Repository for DailyRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete_and_day(self, athlete_id: str, day: datetime.date) -> Optional[DailyRecord]:
        """Get the single record of an athlete for a day."""
        with store_errors(self.session, "daily record lookup"):
            statement = select(DailyRecord).where(
                DailyRecord.athlete_id == athlete_id,
                DailyRecord.day == day,
            )
            return self.session.exec(statement).first()

    def get_by_athlete_window(
        self, athlete_id: str, start: datetime.date, end: datetime.date,
    ) -> list[DailyRecord]:
        """Get records with ``start <= day < end``, ascending by day."""
        with store_errors(self.session, "daily record range query"):
            statement = (
                select(DailyRecord)
                .where(
                    DailyRecord.athlete_id == athlete_id,
                    DailyRecord.day >= start,
                    DailyRecord.day < end,
                )
                .order_by(DailyRecord.day)
            )
            return list(self.session.exec(statement).all())

    def upsert_values(
        self, athlete_id: str, day: datetime.date, values: dict[str, Any],
    ) -> tuple[DailyRecord, bool]:
        """Insert the day's record or merge ``values`` into the existing one.

        Only keys present in ``values`` are written on conflict.

        Returns:
            Tuple of (record, created).
        """
        created = self.get_by_athlete_and_day(athlete_id, day) is None
        now = utcnow()

        with store_errors(self.session, "daily record upsert"):
            insert = dialect_insert(self.session)
            if insert is not None:
                statement = insert(DailyRecord.__table__).values(
                    athlete_id=athlete_id, day=day, created_at=now, updated_at=now, **values,
                )
                merged = {key: statement.excluded[key] for key in values}
                merged["updated_at"] = now
                statement = statement.on_conflict_do_update(
                    index_elements=["athlete_id", "day"], set_=merged,
                )
                self.session.execute(statement)
            else:
                existing = self.session.exec(select(DailyRecord).where(
                    DailyRecord.athlete_id == athlete_id,
                    DailyRecord.day == day,
                )).first()
                if existing is None:
                    existing = DailyRecord(athlete_id=athlete_id, day=day, created_at=now)
                for key, value in values.items():
                    setattr(existing, key, value)
                existing.updated_at = now
                self.session.add(existing)
            self.session.commit()

        record = self.get_by_athlete_and_day(athlete_id, day)
        return record, created

    def set_recommendation(
        self, athlete_id: str, start: datetime.date, end: datetime.date, note: str,
    ) -> int:
        """Write ``note`` on every record with ``start <= day < end``.

        Single statement, single commit: either every record of the
        window is updated or none is.

        Returns:
            Number of records updated.
        """
        with store_errors(self.session, "recommendation publish"):
            statement = (
                update(DailyRecord)
                .where(
                    DailyRecord.athlete_id == athlete_id,
                    DailyRecord.day >= start,
                    DailyRecord.day < end,
                )
                .values(recommendation=note, updated_at=utcnow())
            )
            result = self.session.execute(statement)
            self.session.commit()
            return result.rowcount

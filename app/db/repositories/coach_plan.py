"""
Coach plan repository.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.db.repositories.base import dialect_insert, store_errors
from app.models.coach_plan import CoachPlan
from app.models.daily_record import utcnow


class CoachPlanRepository:
    """Repository for CoachPlan database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_athlete_and_day(self, athlete_id: str, day: datetime.date) -> Optional[CoachPlan]:
        with store_errors(self.session, "coach plan lookup"):
            statement = select(CoachPlan).where(
                CoachPlan.athlete_id == athlete_id,
                CoachPlan.day == day,
            )
            return self.session.exec(statement).first()

    def has_plan(self, athlete_id: str, day: datetime.date) -> bool:
        """Presence check used by the missing-data scan."""
        return self.get_by_athlete_and_day(athlete_id, day) is not None

    def upsert_many(self, plans: list[CoachPlan]) -> list[CoachPlan]:
        """Insert or overwrite plans keyed by (athlete, day) in one commit."""
        now = utcnow()
        with store_errors(self.session, "coach plan upsert"):
            insert = dialect_insert(self.session)
            for plan in plans:
                values = {
                    "athlete_id": plan.athlete_id,
                    "day": plan.day,
                    "coach_id": plan.coach_id,
                    "percentage": plan.percentage,
                    "note": plan.note,
                    "mileage_recommendation": plan.mileage_recommendation,
                }
                if insert is not None:
                    statement = insert(CoachPlan.__table__).values(created_at=now, updated_at=now, **values)
                    statement = statement.on_conflict_do_update(
                        index_elements=["athlete_id", "day"],
                        set_={
                            "coach_id": statement.excluded.coach_id,
                            "percentage": statement.excluded.percentage,
                            "note": statement.excluded.note,
                            "mileage_recommendation": statement.excluded.mileage_recommendation,
                            "updated_at": now,
                        },
                    )
                    self.session.execute(statement)
                else:
                    existing = self.session.exec(select(CoachPlan).where(
                        CoachPlan.athlete_id == plan.athlete_id,
                        CoachPlan.day == plan.day,
                    )).first()
                    target = existing or CoachPlan(created_at=now, **values)
                    for key, value in values.items():
                        setattr(target, key, value)
                    target.updated_at = now
                    self.session.add(target)
            self.session.commit()

        return [self.get_by_athlete_and_day(plan.athlete_id, plan.day) for plan in plans]

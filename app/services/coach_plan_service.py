"""
Coach plan service.

A coach publishes one plan for a date to several athletes at once; each
athlete gets ``round(percentage / 100 * baseline_weekly_mileage)`` as
the day's mileage recommendation.
"""

import logging

from sqlmodel import Session

from app.db.repositories.coach_plan import CoachPlanRepository
from app.models.coach_plan import CoachPlan
from app.schemas.coach_plan import CoachPlanCreate, CoachPlanResponse
from app.training.calendar import DateLike, to_day
from app.training.config import DEFAULT_CONFIG, PipelineConfig

logger = logging.getLogger(__name__)


def mileage_recommendation(percentage: float, baseline_weekly_mileage: float | None) -> int:
    return round((percentage / 100) * (baseline_weekly_mileage or 0))


class CoachPlanService:
    """Service for coach plan business logic."""

    def __init__(self, session: Session, config: PipelineConfig = DEFAULT_CONFIG):
        self.repository = CoachPlanRepository(session)
        self.config = config

    def publish(self, day: DateLike, data: CoachPlanCreate) -> list[CoachPlanResponse]:
        """Create or overwrite the plan of every listed athlete for ``day``."""
        plan_day = to_day(day, self.config.reference_timezone)
        plans = [
            CoachPlan(
                athlete_id=athlete.athlete_id,
                coach_id=data.coach_id,
                day=plan_day,
                percentage=data.percentage,
                note=data.note,
                mileage_recommendation=mileage_recommendation(data.percentage, athlete.baseline_weekly_mileage),
            )
            for athlete in data.athletes
        ]
        stored = self.repository.upsert_many(plans)
        logger.info("Coach %s published plan for %s to %d athlete(s)", data.coach_id, plan_day, len(stored))
        return [CoachPlanResponse.model_validate(plan) for plan in stored]

    def get_by_day(self, athlete_id: str, day: DateLike) -> CoachPlanResponse | None:
        plan = self.repository.get_by_athlete_and_day(athlete_id, to_day(day, self.config.reference_timezone))
        return CoachPlanResponse.model_validate(plan) if plan else None

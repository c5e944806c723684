"""
Weekly summary service.

Wires the SQL repositories into the summary pipeline.
"""

from sqlmodel import Session

from app.core.exceptions import NoDataError
from app.db.repositories.coach_plan import CoachPlanRepository
from app.db.repositories.daily_record import DailyRecordRepository
from app.db.repositories.weekly_summary import WeeklySummaryRepository, row_to_summary
from app.schemas.recommendation import MissingData
from app.schemas.weekly_summary import WeeklySummary
from app.training.calendar import DateLike, week_window
from app.training.config import DEFAULT_CONFIG, PipelineConfig
from app.training.missing_data import detect_missing_data
from app.training.summary import build_summary


class SummaryService:
    """Service for weekly summary business logic."""

    def __init__(self, session: Session, config: PipelineConfig = DEFAULT_CONFIG):
        self.records = DailyRecordRepository(session)
        self.summaries = WeeklySummaryRepository(session)
        self.coach_plans = CoachPlanRepository(session)
        self.config = config

    def build(self, athlete_id: str, as_of: DateLike) -> WeeklySummary:
        """Compute and store the summary of the week owning ``as_of``."""
        return build_summary(athlete_id, as_of, self.records, self.summaries, self.config)

    def get(self, athlete_id: str, as_of: DateLike) -> WeeklySummary:
        """Stored summary of the week owning ``as_of``.

        Raises:
            NoDataError: the week has not been summarized.
        """
        window = week_window(as_of, self.config.week_start_weekday, self.config.reference_timezone)
        row = self.summaries.get_by_athlete_and_week(athlete_id, window.start)
        if row is None:
            raise NoDataError(f"No weekly summary stored for the week starting {window.start.isoformat()}.")
        return row_to_summary(row)

    def list_recent(self, athlete_id: str, limit: int = 12) -> list[WeeklySummary]:
        return [row_to_summary(row) for row in self.summaries.get_all_by_athlete(athlete_id, limit)]

    def missing_data(self, athlete_id: str, as_of: DateLike) -> MissingData:
        window = week_window(as_of, self.config.week_start_weekday, self.config.reference_timezone)
        return detect_missing_data(athlete_id, window, self.records, self.coach_plans)

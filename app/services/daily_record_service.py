"""
Daily record service.

Business logic for athlete daily logs: key validation, range checks and
merge-upsert by (athlete, day).
"""

import datetime
from typing import Any, Mapping

from pydantic import ValidationError
from sqlmodel import Session

from app.core.exceptions import InvalidDateError, InvalidLogError
from app.db.repositories.daily_record import DailyRecordRepository
from app.schemas.daily_record import LOG_KEYS, DailyLogCreate, DailyRecordResponse
from app.training.calendar import DateLike, to_day
from app.training.config import DEFAULT_CONFIG, PipelineConfig


class DailyRecordService:
    """Service for daily record business logic."""

    def __init__(self, session: Session, config: PipelineConfig = DEFAULT_CONFIG):
        self.repository = DailyRecordRepository(session)
        self.config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def log_data(
        self, athlete_id: str, day: DateLike, values: Mapping[str, Any],
    ) -> tuple[DailyRecordResponse, bool]:
        """Create or merge the athlete's record for ``day``.

        Keys absent from ``values`` (or set to ``None``) keep their stored
        value.

        Returns:
            Tuple of (response, created) where created is True if new entry.

        Raises:
            InvalidLogError: unknown key or out-of-range value.
            InvalidDateError: ``day`` is not a calendar date.
        """
        for key in values:
            if key not in LOG_KEYS:
                raise InvalidLogError(f"Invalid log key: {key}")

        try:
            data = DailyLogCreate(**values)
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise InvalidLogError(f"Invalid value for {field}: {first['msg']}") from exc

        normalized_day = to_day(day, self.config.reference_timezone)
        flat = data.model_dump(exclude_none=True)
        record, created = self.repository.upsert_values(athlete_id, normalized_day, flat)
        return DailyRecordResponse.model_validate(record), created

    def get_by_day(self, athlete_id: str, day: DateLike) -> DailyRecordResponse | None:
        record = self.repository.get_by_athlete_and_day(athlete_id, to_day(day, self.config.reference_timezone))
        return DailyRecordResponse.model_validate(record) if record else None

    def get_range(
        self, athlete_id: str, start: DateLike, end: DateLike,
    ) -> list[DailyRecordResponse]:
        """Records with ``start <= day <= end``."""
        first = to_day(start, self.config.reference_timezone)
        last = to_day(end, self.config.reference_timezone)
        if last < first:
            raise InvalidDateError(f"Range end {last} is before start {first}")
        records = self.repository.get_by_athlete_window(athlete_id, first, last + datetime.timedelta(days=1))
        return [DailyRecordResponse.model_validate(r) for r in records]

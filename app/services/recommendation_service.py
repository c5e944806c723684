"""
Recommendation service.

Runs the whole weekly recommendation pipeline:

    summary -> missing data -> prompt -> generator -> validator -> publish

The generator is skipped when the week is too sparse: the canonical
insufficient-data sentence would replace its output anyway.
"""

import logging

from sqlmodel import Session

from app.schemas.recommendation import RecommendationResponse
from app.services.summary_service import SummaryService
from app.training.calendar import DateLike, WeekWindow
from app.training.config import DEFAULT_CONFIG, PipelineConfig
from app.training.generator import TextGenerator, generate_with_retry
from app.training.prompt import build_day_table, build_prompt
from app.training.publisher import publish_recommendation
from app.training.validator import requires_insufficient_data_override, validate_recommendation

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service for weekly recommendation generation."""

    def __init__(self, session: Session, generator: TextGenerator, config: PipelineConfig = DEFAULT_CONFIG,
                 max_attempts: int = 2):
        self.summaries = SummaryService(session, config)
        self.generator = generator
        self.config = config
        self.max_attempts = max_attempts

    def generate(self, athlete_id: str, as_of: DateLike) -> RecommendationResponse:
        """Generate, validate and publish the note for the week owning ``as_of``.

        Raises:
            InvalidDateError, NoDataError: caller-correctable preconditions.
            GeneratorError: the text service failed on every attempt.
            RecommendationValidationError: the candidate was rejected.
            StoreError: persistence failure.
        """
        summary = self.summaries.build(athlete_id, as_of)
        window = WeekWindow(summary.week_start, summary.week_end)
        missing = self.summaries.missing_data(athlete_id, summary.week_start)
        day_table = build_day_table(summary)

        candidate = None
        if not requires_insufficient_data_override(day_table, self.config):
            prompt = build_prompt(summary, day_table, missing, self.config)
            candidate = generate_with_retry(self.generator, prompt, self.max_attempts)

        accepted = validate_recommendation(summary, day_table, candidate, self.config)
        updated = publish_recommendation(athlete_id, window, accepted.text, self.summaries.records)

        return RecommendationResponse(
            athlete_id=athlete_id,
            week_start=summary.week_start,
            recommendation=accepted.text,
            overridden=accepted.overridden,
            records_updated=updated,
            missing_data=missing,
        )

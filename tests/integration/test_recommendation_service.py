"""Tests for the end-to-end weekly recommendation pipeline."""

import datetime

import pytest

from app.core.exceptions import GeneratorError, NoDataError, RecommendationValidationError
from app.services.daily_record_service import DailyRecordService
from app.services.recommendation_service import RecommendationService
from app.training.config import INSUFFICIENT_DATA_SENTENCE

WEEK_START = datetime.date(2023, 1, 29)
AS_OF = datetime.date(2023, 2, 1)


def _log_days(session, offsets, athlete_id="athlete1"):
    records = DailyRecordService(session)
    for offset in offsets:
        records.log_data(athlete_id, WEEK_START + datetime.timedelta(days=offset),
                         {"mileage": 4 + offset, "stress": 3, "sleep": 7.5})


def _recommendations(session, athlete_id="athlete1"):
    records = DailyRecordService(session).get_range(athlete_id, WEEK_START, WEEK_START + datetime.timedelta(days=6))
    return [record.recommendation for record in records]


class TestRecommendationPipeline:
    def test_publishes_note_to_every_record_of_the_week(self, session, generator, good_note):
        _log_days(session, range(5))

        result = RecommendationService(session, generator).generate("athlete1", AS_OF)

        assert result.recommendation == good_note
        assert result.overridden is False
        assert result.records_updated == 5
        assert result.week_start == WEEK_START
        assert _recommendations(session) == [good_note] * 5
        assert len(generator.prompts) == 1
        assert "TOTAL MILEAGE:" in generator.prompts[0]

    def test_prompt_lists_missing_days(self, session, generator):
        _log_days(session, range(5))
        RecommendationService(session, generator).generate("athlete1", AS_OF)
        assert "DAYS WITHOUT ATHLETE INPUT: 2023-02-03, 2023-02-04" in generator.prompts[0]
        assert "DAYS WITHOUT COACH INPUT: 2023-01-29," in generator.prompts[0]

    def test_sparse_week_uses_canonical_sentence_without_generating(self, session, generator):
        _log_days(session, (0, 2, 4))

        result = RecommendationService(session, generator).generate("athlete1", AS_OF)

        assert result.recommendation == INSUFFICIENT_DATA_SENTENCE
        assert result.overridden is True
        assert result.records_updated == 3
        assert generator.prompts == []
        assert _recommendations(session) == [INSUFFICIENT_DATA_SENTENCE] * 3

    def test_unwarranted_insufficiency_claim_is_rejected(self, session, make_generator):
        _log_days(session, range(6))
        generator = make_generator(INSUFFICIENT_DATA_SENTENCE)

        with pytest.raises(RecommendationValidationError) as excinfo:
            RecommendationService(session, generator).generate("athlete1", AS_OF)

        assert excinfo.value.rule == "contradicted_insufficiency"
        assert _recommendations(session) == [None] * 6

    def test_policy_violation_publishes_nothing(self, session, make_generator):
        _log_days(session, range(5))
        generator = make_generator("Your sleep dipped midweek; consider seeing a doctor.")

        with pytest.raises(RecommendationValidationError) as excinfo:
            RecommendationService(session, generator).generate("athlete1", AS_OF)

        assert excinfo.value.rule == "policy"
        assert _recommendations(session) == [None] * 5

    def test_retry_recovers_from_one_failure(self, session, make_generator, good_note):
        _log_days(session, range(5))
        generator = make_generator(GeneratorError("timeout"), good_note)

        result = RecommendationService(session, generator).generate("athlete1", AS_OF)

        assert result.recommendation == good_note
        assert len(generator.prompts) == 2

    def test_two_failures_surface_generator_error(self, session, make_generator):
        _log_days(session, range(5))
        generator = make_generator(GeneratorError("timeout"), RuntimeError("connection reset"))

        with pytest.raises(GeneratorError):
            RecommendationService(session, generator).generate("athlete1", AS_OF)

        assert len(generator.prompts) == 2
        assert _recommendations(session) == [None] * 5

    def test_no_data(self, session, generator):
        with pytest.raises(NoDataError):
            RecommendationService(session, generator).generate("athlete1", AS_OF)
        assert generator.prompts == []

    def test_other_athletes_untouched(self, session, generator):
        _log_days(session, range(5))
        _log_days(session, range(5), athlete_id="athlete2")
        RecommendationService(session, generator).generate("athlete1", AS_OF)
        assert _recommendations(session, "athlete2") == [None] * 5

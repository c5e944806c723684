"""Tests for the recommendation prompt builder."""

import datetime

from app.schemas.daily_record import DailyMeasurement
from app.schemas.recommendation import MissingData
from app.schemas.weekly_summary import TrendComparison, TrendDirection, TrendVector, WeeklySummary
from app.training.prompt import NOT_AVAILABLE, build_day_table, build_prompt, format_value

START = datetime.date(2023, 1, 29)


def _summary() -> WeeklySummary:
    flat = TrendComparison(value=None, direction=TrendDirection.UNCHANGED)
    return WeeklySummary(
        athlete_id="athlete1",
        week_start=START,
        week_end=START + datetime.timedelta(days=7),
        mileage_so_far=15.0,
        trends=TrendVector(
            stress=TrendComparison(value=4.5, direction=TrendDirection.INCREASING),
            sleep=TrendComparison(value=7.25, direction=TrendDirection.DECREASING),
            resting_heart_rate=flat,
            exercise_heart_rate=flat,
            perceived_exertion=flat,
        ),
        days=[
            DailyMeasurement(day=START, mileage=5, stress=4, sleep=7.5),
            DailyMeasurement(day=START + datetime.timedelta(days=2), mileage=7, stress=5, sleep=7,
                             notes="Felt  flat\non the hills"),
            DailyMeasurement(day=START + datetime.timedelta(days=4), mileage=3),
        ],
    )


def _missing() -> MissingData:
    return MissingData(
        missing_athlete_input=[START + datetime.timedelta(days=d) for d in (1, 3, 5, 6)],
        missing_coach_input=[],
    )


class TestFormatValue:
    def test_values(self):
        assert format_value(None) == NOT_AVAILABLE
        assert format_value(5.0) == "5"
        assert format_value(64.3333) == "64.33"
        assert format_value(7.25) == "7.25"


class TestDayTable:
    def test_one_row_per_day_of_the_window(self):
        rows = build_day_table(_summary())
        assert [row.day for row in rows] == [START + datetime.timedelta(days=d) for d in range(7)]

    def test_unlogged_days_are_empty_rows(self):
        rows = build_day_table(_summary())
        assert [row.is_empty for row in rows] == [False, True, False, True, False, True, True]
        assert rows[4].values["mileage"] == 3
        assert rows[4].values["stress"] is None


class TestBuildPrompt:
    def test_is_deterministic(self):
        summary = _summary()
        first = build_prompt(summary, build_day_table(summary), _missing())
        second = build_prompt(_summary(), build_day_table(_summary()), _missing())
        assert first == second
        assert first.encode() == second.encode()

    def test_every_day_and_metric_is_rendered(self):
        summary = _summary()
        prompt = build_prompt(summary, build_day_table(summary), _missing())
        for offset in range(7):
            assert (START + datetime.timedelta(days=offset)).isoformat() in prompt
        # 4 unlogged days x 6 metrics + 1 logged day missing 5 metrics + 2 days missing 3 metrics
        # + 3 trend lines without a value.
        assert prompt.count(NOT_AVAILABLE) >= 4 * 6 + 5 + 2 * 3 + 3

    def test_renders_totals_trends_and_missing_lists(self):
        summary = _summary()
        prompt = build_prompt(summary, build_day_table(summary), _missing())
        assert "WEEK: 2023-01-29 to 2023-02-04" in prompt
        assert "TOTAL MILEAGE: 15" in prompt
        assert "Stress (1-10): 4.5 (increasing)" in prompt
        assert "Sleep (hours): 7.25 (decreasing)" in prompt
        assert "DAYS WITHOUT ATHLETE INPUT: 2023-01-30, 2023-02-01, 2023-02-03, 2023-02-04" in prompt
        assert "DAYS WITHOUT COACH INPUT: none" in prompt

    def test_notes_are_collapsed_to_one_line(self):
        summary = _summary()
        prompt = build_prompt(summary, build_day_table(summary), _missing())
        assert 'Athlete note: "Felt flat on the hills"' in prompt

    def test_rules_mention_the_canonical_sentence(self):
        summary = _summary()
        prompt = build_prompt(summary, build_day_table(summary), _missing())
        assert "Insufficient data to generate a recommendation for this week." in prompt
        assert "at most 200 words" in prompt

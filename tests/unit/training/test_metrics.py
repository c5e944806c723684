"""Tests for null-aware weekly aggregation."""

import datetime
import math

from app.schemas.daily_record import DailyMeasurement, TRACKED_METRICS
from app.training.metrics import aggregate, average_of

START = datetime.date(2023, 1, 29)


def _day(offset: int, **values) -> DailyMeasurement:
    return DailyMeasurement(day=START + datetime.timedelta(days=offset), **values)


class TestAverageOf:
    def test_ignores_missing_values(self):
        assert average_of([4.0, None, 6.0]) == 5.0

    def test_no_values_is_none(self):
        assert average_of([]) is None
        assert average_of([None, None]) is None


class TestAggregate:
    def test_mileage_total(self):
        records = [_day(0, mileage=5), _day(2, mileage=7), _day(4, mileage=3)]
        assert aggregate(records).total_volume == 15

    def test_missing_mileage_counts_as_zero(self):
        records = [_day(0, mileage=5), _day(1, stress=4), _day(2, mileage=2.5)]
        assert aggregate(records).total_volume == 7.5

    def test_average_divides_by_present_readings_only(self):
        records = [_day(0, stress=4), _day(1, mileage=10), _day(2, stress=6)]
        metrics = aggregate(records)
        assert metrics.averages["stress"] == 5.0
        assert metrics.present_counts["stress"] == 2

    def test_metric_without_readings_is_none_not_zero(self):
        records = [_day(0, mileage=5), _day(1, mileage=7)]
        metrics = aggregate(records)
        for metric in TRACKED_METRICS:
            assert metrics.averages[metric] is None
            assert metrics.present_counts[metric] == 0

    def test_nan_is_treated_as_absent(self):
        records = [_day(0, sleep=7.0), _day(1, sleep=float("nan"))]
        metrics = aggregate(records)
        assert metrics.averages["sleep"] == 7.0
        assert not math.isnan(metrics.averages["sleep"])

    def test_empty_week(self):
        metrics = aggregate([])
        assert metrics.total_volume == 0.0
        assert all(value is None for value in metrics.averages.values())

    def test_accepts_any_object_with_metric_attributes(self):
        class Row:
            mileage = 4
            stress = 3

        metrics = aggregate([Row()])
        assert metrics.total_volume == 4
        assert metrics.averages["stress"] == 3
        assert metrics.averages["sleep"] is None

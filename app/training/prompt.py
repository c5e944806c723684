"""
Recommendation prompt rendering.

The prompt is a pure function of the summary and the missing-data lists:
identical inputs always render byte-identical text.  Every metric of
every day is printed, with an explicit ``not available`` marker where
nothing was logged, so the generator never has to guess whether a value
was omitted.
"""

from __future__ import annotations

import datetime
from typing import Optional

from app.schemas.daily_record import MEASURED_METRICS, METRIC_LABELS, TRACKED_METRICS
from app.schemas.recommendation import DayRow, MissingData
from app.schemas.weekly_summary import WeeklySummary
from app.training.config import DEFAULT_CONFIG, PipelineConfig

NOT_AVAILABLE = "not available"

_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_NOTE_PREVIEW_CHARS = 160


def format_value(value: Optional[float]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{round(value, 2):g}"


def _format_dates(days: list[datetime.date]) -> str:
    if not days:
        return "none"
    return ", ".join(day.isoformat() for day in days)


def build_day_table(summary: WeeklySummary) -> list[DayRow]:
    """One row per day of the summary's window, logged or not."""
    by_day = {measurement.day: measurement for measurement in summary.days}
    rows = []
    day = summary.week_start
    while day < summary.week_end:
        measurement = by_day.get(day)
        rows.append(DayRow(
            day=day,
            values={metric: getattr(measurement, metric) if measurement else None for metric in MEASURED_METRICS},
            notes=measurement.notes if measurement else None,
        ))
        day += datetime.timedelta(days=1)
    return rows


def render_day_row(row: DayRow) -> str:
    cells = [f"{METRIC_LABELS[metric]}: {format_value(row.values.get(metric))}" for metric in MEASURED_METRICS]
    line = f"  {row.day.isoformat()} ({_WEEKDAY_NAMES[row.day.weekday()]}): " + " | ".join(cells)
    if row.notes:
        note = " ".join(row.notes.split())[:_NOTE_PREVIEW_CHARS]
        line += f' | Athlete note: "{note}"'
    return line


def build_prompt(summary: WeeklySummary, day_table: list[DayRow], missing: MissingData,
                 config: Optional[PipelineConfig] = None) -> str:
    """Render the instruction set sent to the text generator."""
    cfg = config or DEFAULT_CONFIG
    last_day = summary.week_end - datetime.timedelta(days=1)

    lines = [
        "You are assisting an endurance running coach. Write a short weekly note for the athlete "
        "based only on the data below.",
        "",
        f"WEEK: {summary.week_start.isoformat()} to {last_day.isoformat()}",
        f"TOTAL MILEAGE: {format_value(summary.mileage_so_far)}",
        "",
        "AVERAGES AND TRENDS (this week compared with the previous week):",
    ]
    for metric in TRACKED_METRICS:
        trend = getattr(summary.trends, metric)
        lines.append(f"  - {METRIC_LABELS[metric]}: {format_value(trend.value)} ({trend.direction.value})")

    lines.append("")
    lines.append("DAILY LOG:")
    lines.extend(render_day_row(row) for row in day_table)

    lines.append("")
    lines.append(f"DAYS WITHOUT ATHLETE INPUT: {_format_dates(missing.missing_athlete_input)}")
    lines.append(f"DAYS WITHOUT COACH INPUT: {_format_dates(missing.missing_coach_input)}")

    lines.append("")
    lines.append("RULES:")
    lines.append(f"1. Use at most {cfg.max_recommendation_words} words of plain text. No markdown, no lists.")
    lines.append("2. Refer only to the data listed above. Never mention a metric that is "
                 f"'{NOT_AVAILABLE}' on every day.")
    lines.append("3. Do not diagnose, name medical conditions, or recommend medication, "
                 "supplements or treatment.")
    lines.append(f"4. If {cfg.insufficient_days_threshold} or more days have every metric "
                 f"'{NOT_AVAILABLE}', reply with exactly: {cfg.insufficient_data_sentence}")
    lines.append("5. Otherwise never use that sentence.")
    return "\n".join(lines)

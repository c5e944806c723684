"""What would the weekly note look like for a sample athlete?

Logs two weeks of sample data into an in-memory SQLite database, builds
the weekly summary and prints the prompt the text generator would see.
No generator call is made.

Usage:
    python scripts/simulate_week.py
"""

import datetime
import os
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

os.environ.setdefault("DATABASE_URL", "sqlite://")

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.db.init_db import init_db
from app.services.coach_plan_service import CoachPlanService
from app.services.daily_record_service import DailyRecordService
from app.services.summary_service import SummaryService
from app.schemas.coach_plan import CoachPlanAthlete, CoachPlanCreate
from app.training.prompt import build_day_table, build_prompt
from app.training.validator import count_empty_days

ATHLETE = "athlete-demo"
TODAY = datetime.date(2026, 10, 16)  # Friday

# (day, values)
RAW_DATA = [
    ("2026-10-04", {"mileage": 6, "stress": 4, "sleep": 7.0, "resting_heart_rate": 52}),
    ("2026-10-06", {"mileage": 8, "stress": 5, "sleep": 6.5, "resting_heart_rate": 54}),
    ("2026-10-08", {"mileage": 5, "stress": 4, "sleep": 7.5, "perceived_exertion": 6}),
    ("2026-10-11", {"mileage": 7, "stress": 6, "sleep": 6.0, "resting_heart_rate": 56}),
    ("2026-10-12", {"mileage": 10, "stress": 6, "sleep": 6.5, "perceived_exertion": 8,
                    "notes": "Legs heavy on the tempo."}),
    ("2026-10-13", {"stress": 5, "sleep": 8.0}),
    ("2026-10-14", {"mileage": 4, "stress": 7, "sleep": 5.5, "resting_heart_rate": 58}),
    ("2026-10-15", {"mileage": 6, "stress": 6, "exercise_heart_rate": 151}),
]


def main() -> None:
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    init_db(engine)

    with Session(engine) as session:
        records = DailyRecordService(session)
        for day, values in RAW_DATA:
            records.log_data(ATHLETE, day, values)

        CoachPlanService(session).publish("2026-10-12", CoachPlanCreate(
            coach_id="coach-demo", percentage=20, note="Tempo 3x2 miles",
            athletes=[CoachPlanAthlete(athlete_id=ATHLETE, baseline_weekly_mileage=35)],
        ))

        service = SummaryService(session)
        summary = service.build(ATHLETE, TODAY)
        missing = service.missing_data(ATHLETE, TODAY)
        day_table = build_day_table(summary)

        print("=" * 60)
        print(f"Week {summary.week_start} - {summary.week_end} (exclusive)")
        print(f"Mileage so far: {summary.mileage_so_far}")
        print(f"Days without any data: {count_empty_days(day_table)}")
        print("=" * 60)
        print(build_prompt(summary, day_table, missing))


if __name__ == "__main__":
    main()

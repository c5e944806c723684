"""
Weekly summary endpoints.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_pipeline_config
from app.db.session import get_db
from app.schemas.recommendation import MissingData
from app.schemas.weekly_summary import WeeklySummary
from app.services.summary_service import SummaryService
from app.training.calendar import today
from app.training.config import PipelineConfig

router = APIRouter()


@router.post("/summaries", summary="Build (or rebuild) the weekly summary.", response_model=WeeklySummary, )
def build_weekly_summary(athlete_id: str,
                         as_of: Optional[datetime.date] = Query(None, description="Any date of the week "
                                                                                  "(defaults to today)"),
                         db: Session = Depends(get_db), config: PipelineConfig = Depends(get_pipeline_config), ):
    ref_date = as_of or today(config.reference_timezone)
    return SummaryService(db, config).build(athlete_id, ref_date)


@router.get("/summaries", summary="List the most recent weekly summaries.", response_model=list[WeeklySummary], )
def list_weekly_summaries(athlete_id: str, limit: int = Query(12, ge=1, le=104),
                          db: Session = Depends(get_db), config: PipelineConfig = Depends(get_pipeline_config), ):
    return SummaryService(db, config).list_recent(athlete_id, limit)


@router.get("/summaries/{as_of}", summary="Get the stored summary of the week owning a date.",
            response_model=WeeklySummary, )
def get_weekly_summary(athlete_id: str, as_of: datetime.date, db: Session = Depends(get_db),
                       config: PipelineConfig = Depends(get_pipeline_config), ):
    return SummaryService(db, config).get(athlete_id, as_of)


@router.get("/missing-data", summary="Dates of the week lacking athlete or coach input.",
            response_model=MissingData, )
def get_missing_data(athlete_id: str,
                     as_of: Optional[datetime.date] = Query(None, description="Any date of the week "
                                                                              "(defaults to today)"),
                     db: Session = Depends(get_db), config: PipelineConfig = Depends(get_pipeline_config), ):
    ref_date = as_of or today(config.reference_timezone)
    return SummaryService(db, config).missing_data(athlete_id, ref_date)

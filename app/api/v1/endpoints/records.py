"""
Daily record endpoints.

Date-based merge-upsert of an athlete's daily log.
"""

import datetime
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_pipeline_config
from app.db.session import get_db
from app.schemas.daily_record import DailyRecordResponse
from app.services.daily_record_service import DailyRecordService
from app.training.config import PipelineConfig

router = APIRouter()


@router.put("/{day}", summary="Log or merge athlete data for a day.", response_model=DailyRecordResponse, )
def log_data(athlete_id: str, day: datetime.date, response: Response,
             values: dict[str, Any] = Body(..., examples=[{"mileage": 5, "stress": 3, "sleep": 7.5}]),
             db: Session = Depends(get_db), config: PipelineConfig = Depends(get_pipeline_config), ):
    """Creates the day's record if missing, otherwise merges the given fields into it."""
    service = DailyRecordService(db, config)
    record, created = service.log_data(athlete_id, day, values)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return record


@router.get("", summary="List daily records in a date range.", response_model=list[DailyRecordResponse], )
def list_records(athlete_id: str,
                 start: datetime.date = Query(..., description="Range start (inclusive)"),
                 end: datetime.date = Query(..., description="Range end (inclusive)"),
                 db: Session = Depends(get_db), config: PipelineConfig = Depends(get_pipeline_config), ):
    service = DailyRecordService(db, config)
    return service.get_range(athlete_id, start, end)

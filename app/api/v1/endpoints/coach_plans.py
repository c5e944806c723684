"""
Coach plan endpoints.
"""

import datetime

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_pipeline_config
from app.db.session import get_db
from app.schemas.coach_plan import CoachPlanCreate, CoachPlanResponse
from app.services.coach_plan_service import CoachPlanService
from app.training.config import PipelineConfig

router = APIRouter()


@router.post("/{day}", summary="Publish a coach plan for a day to several athletes.",
             response_model=list[CoachPlanResponse], status_code=status.HTTP_201_CREATED, )
def publish_coach_plan(day: datetime.date, data: CoachPlanCreate, db: Session = Depends(get_db),
                       config: PipelineConfig = Depends(get_pipeline_config), ):
    return CoachPlanService(db, config).publish(day, data)

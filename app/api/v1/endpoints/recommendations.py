"""
Weekly recommendation endpoint.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_generator, get_pipeline_config
from app.core.config import settings
from app.db.session import get_db
from app.schemas.recommendation import RecommendationResponse
from app.services.recommendation_service import RecommendationService
from app.training.calendar import today
from app.training.config import PipelineConfig
from app.training.generator import TextGenerator

router = APIRouter()


@router.post("", summary="Generate, validate and publish the weekly recommendation.",
             response_model=RecommendationResponse, )
def generate_recommendation(athlete_id: str,
                            as_of: Optional[datetime.date] = Query(None, description="Any date of the week "
                                                                                     "(defaults to today)"),
                            db: Session = Depends(get_db), generator: TextGenerator = Depends(get_generator),
                            config: PipelineConfig = Depends(get_pipeline_config), ):
    ref_date = as_of or today(config.reference_timezone)
    service = RecommendationService(db, generator, config, max_attempts=settings.GENERATOR_MAX_ATTEMPTS)
    return service.generate(athlete_id, ref_date)

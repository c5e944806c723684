"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import coach_plans, recommendations, records, summaries

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    records.router, prefix="/athletes/{athlete_id}/records", tags=["Daily records"]
)
api_router.include_router(
    summaries.router, prefix="/athletes/{athlete_id}", tags=["Weekly summaries"]
)
api_router.include_router(
    recommendations.router,
    prefix="/athletes/{athlete_id}/recommendations",
    tags=["Recommendations"],
)
api_router.include_router(
    coach_plans.router, prefix="/coach-plans", tags=["Coach plans"]
)

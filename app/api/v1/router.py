"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import competition, partners, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    partners.router, prefix="/partners", tags=["Partners"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workout logs"]
)
api_router.include_router(
    competition.router, prefix="/competition", tags=["Weekly competition"]
)

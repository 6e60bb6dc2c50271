"""
Main API router for InterviewAce

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from interviewace.api.endpoints import analytics, evaluation, metadata, recommendation

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    evaluation.router,
    prefix="/evaluation",
    tags=["Evaluation"]
)

api_router.include_router(
    recommendation.router,
    prefix="/recommendations",
    tags=["Recommendations"]
)

api_router.include_router(
    analytics.router,
    prefix="/analytics",
    tags=["Analytics"]
)

api_router.include_router(
    metadata.router,
    prefix="/metadata",
    tags=["Metadata"]
)

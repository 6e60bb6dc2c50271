"""
API layer for InterviewAce

FastAPI routers exposing evaluation, recommendations, analytics and
reference metadata.
"""

from interviewace.api.router import api_router

__all__ = ["api_router"]

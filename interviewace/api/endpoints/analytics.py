"""
Analytics API endpoints

Builds analytics snapshots from stored session records.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from interviewace.core.analytics import build_analytics_snapshot
from interviewace.models.analytics import SessionRecord
from interviewace.models.profile import AnalyticsSnapshot

router = APIRouter()


class SnapshotRequest(BaseModel):
    """Request model for snapshot building."""
    sessions: list[SessionRecord] = []


@router.post("/snapshot", response_model=AnalyticsSnapshot)
async def build_snapshot(request: SnapshotRequest) -> AnalyticsSnapshot:
    """Aggregate sessions into an AnalyticsSnapshot."""
    return build_analytics_snapshot(request.sessions)

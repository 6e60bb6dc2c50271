"""
Stored session records for InterviewAce

Shapes of persisted interview history that the analytics builder
aggregates into an AnalyticsSnapshot. Storage itself lives with the caller.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


ScoreScale = Literal["0-10", "0-100"]


class StoredAnswerEvaluation(BaseModel):
    """
    Per-answer scores as persisted.

    Older records may hold raw 0-100 values; `scale` says which scale was
    used. When it is missing the values are migrated heuristically.
    """

    technical: float = Field(default=0, ge=0, le=100)
    clarity: float = Field(default=0, ge=0, le=100)
    confidence: float = Field(default=0, ge=0, le=100)
    score: float = Field(default=0, ge=0, le=100, description="Communication score")
    scale: ScoreScale | None = None


class SessionRecord(BaseModel):
    """One completed interview session."""

    session_id: str
    started_at: datetime | None = None
    overall_score: float = Field(..., ge=0, le=100)
    evaluations: list[StoredAnswerEvaluation] = Field(default_factory=list)

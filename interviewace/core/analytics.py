"""
Analytics snapshot builder for InterviewAce

Aggregates stored session records into the AnalyticsSnapshot consumed by
the recommendation engine.
"""

import logging
from datetime import datetime, timezone

from interviewace.core.normalize import migrate_subscore, normalize_subscore
from interviewace.core.text import clamp, round_half_up
from interviewace.models.analytics import SessionRecord, StoredAnswerEvaluation
from interviewace.models.profile import AnalyticsSnapshot, ScoreTrend, SkillBreakdown

logger = logging.getLogger(__name__)


RECENT_SESSION_COUNT = 5
TREND_THRESHOLD = 5


def to_subscore(value: float, scale: str | None) -> float:
    """Bring a stored value onto the 0-10 scale."""
    if scale == "0-10":
        return clamp(value, 0, 10)
    if scale == "0-100":
        return normalize_subscore(value)
    return migrate_subscore(value)


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _skill_breakdown(evaluations: list[StoredAnswerEvaluation]) -> SkillBreakdown:
    if not evaluations:
        return SkillBreakdown()

    def average(field: str) -> int:
        return round_half_up(_mean([to_subscore(getattr(e, field), e.scale) for e in evaluations]))

    return SkillBreakdown(
        technical=average("technical"),
        communication=average("score"),
        confidence=average("confidence"),
        clarity=average("clarity"),
    )


def _sort_key(record: SessionRecord) -> datetime:
    """Naive start times are read as UTC so they order against aware ones."""
    started_at = record.started_at
    if started_at.tzinfo is None:
        return started_at.replace(tzinfo=timezone.utc)
    return started_at


def detect_trend(recent: list[float]) -> ScoreTrend:
    """Compare the last and first of the recent scores."""
    if len(recent) < 2:
        return ScoreTrend.STABLE
    delta = recent[-1] - recent[0]
    if delta > TREND_THRESHOLD:
        return ScoreTrend.IMPROVING
    if delta < -TREND_THRESHOLD:
        return ScoreTrend.DECLINING
    return ScoreTrend.STABLE


def build_analytics_snapshot(records: list[SessionRecord]) -> AnalyticsSnapshot:
    """
    Aggregate session records.

    Records with a start time are ordered chronologically; those without
    keep their given order after the timed ones.

    Args:
        records: Stored sessions, any order

    Returns:
        AnalyticsSnapshot for the recommendation engine
    """
    timed = sorted((r for r in records if r.started_at is not None), key=_sort_key)
    untimed = [r for r in records if r.started_at is None]
    ordered = timed + untimed

    if not ordered:
        return AnalyticsSnapshot()

    scores = [record.overall_score for record in ordered]
    recent = scores[-RECENT_SESSION_COUNT:]
    evaluations = [evaluation for record in ordered for evaluation in record.evaluations]

    snapshot = AnalyticsSnapshot(
        total_sessions=len(ordered),
        average_score=round_half_up(_mean(scores)),
        skill_breakdown=_skill_breakdown(evaluations),
        score_trend=detect_trend(recent),
        recent_performance=recent,
    )

    logger.debug(
        f"Built analytics snapshot: {snapshot.total_sessions} sessions, "
        f"average {snapshot.average_score}, trend {snapshot.score_trend.value}"
    )
    return snapshot

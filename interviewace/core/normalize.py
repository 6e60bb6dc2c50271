"""
Score normalization for InterviewAce

Converts raw 0-100 dimension scores into 0-10 subscores and the 0-100
overall score. This is the only place scale conversion happens.
"""

from interviewace.core.text import clamp, round_half_up
from interviewace.models.evaluation import (
    DEFAULT_WEIGHTS,
    Dimension,
    EvaluationWeights,
    RawScores,
    ScoreBreakdown,
)


SUBSCORE_MAX = 10
OVERALL_MAX = 100


def normalize_subscore(raw: float) -> int:
    """Map a raw 0-100 score to a 0-10 subscore."""
    return int(clamp(round_half_up(raw / 10), 0, SUBSCORE_MAX))


def normalize_breakdown(raw: RawScores) -> ScoreBreakdown:
    return ScoreBreakdown(**{
        dimension.value: normalize_subscore(score) for dimension, score in raw.items()
    })


def normalize_overall(
    breakdown: ScoreBreakdown,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
) -> int:
    """Weighted 0-10 subscores scaled to 0-100."""
    weighted = sum(
        getattr(breakdown, dimension.value) * weights.weight_for(dimension)
        for dimension in Dimension
    )
    return int(clamp(round_half_up(weighted * 10), 0, OVERALL_MAX))


def migrate_subscore(value: float) -> int:
    """
    Legacy ingestion: treat values above 10 as raw 0-100 scores.

    Only for stored records whose scale is unknown. Ambiguous for raw
    scores of 10 or less, which are kept as-is.
    """
    if value <= SUBSCORE_MAX:
        return int(clamp(round_half_up(value), 0, SUBSCORE_MAX))
    return normalize_subscore(value)

"""
Adaptive difficulty for InterviewAce

Blends experience, recent performance, self-reported confidence and
session history into a composite score, then applies override rules.
"""

import logging

from interviewace.core.text import round_half_up
from interviewace.models.profile import ExperienceLevel, ScoreTrend
from interviewace.models.question import Difficulty
from interviewace.models.recommendation import (
    DEFAULT_DIFFICULTY_WEIGHTS,
    DifficultyInput,
    DifficultyRecommendation,
    DifficultyWeights,
)

logger = logging.getLogger(__name__)


EXPERIENCE_BASE_SCORES: dict[ExperienceLevel, float] = {
    ExperienceLevel.STUDENT: 10,
    ExperienceLevel.FRESHER: 25,
    ExperienceLevel.JUNIOR: 50,
    ExperienceLevel.SENIOR: 75,
}

MAX_SESSION_SCORE = 20
SESSION_SCORE_PER_SESSION = 2

EASY_CEILING = 35
MEDIUM_CEILING = 65
STUDENT_CAP = 50

PROMOTE_SUCCESS_RATE = 0.75
DEMOTE_SUCCESS_RATE = 0.4

DIFFICULTY_ORDER: tuple[Difficulty, ...] = (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)


def composite_difficulty_score(
    data: DifficultyInput,
    weights: DifficultyWeights = DEFAULT_DIFFICULTY_WEIGHTS,
) -> float:
    """Weighted 0-100 composite plus the trend adjustment."""
    experience_score = EXPERIENCE_BASE_SCORES[data.experience_level]
    confidence_score = (data.confidence_level - 1) * 25
    session_score = min(data.sessions_completed * SESSION_SCORE_PER_SESSION, MAX_SESSION_SCORE)

    composite = (
        experience_score * weights.experience
        + data.average_score * weights.performance
        + confidence_score * weights.confidence
        + session_score * weights.sessions
    )

    if data.recent_performance_trend == ScoreTrend.IMPROVING:
        composite += weights.improving_bonus
    elif data.recent_performance_trend == ScoreTrend.DECLINING:
        composite -= weights.declining_penalty

    return composite


def calculate_adaptive_difficulty(
    data: DifficultyInput,
    weights: DifficultyWeights = DEFAULT_DIFFICULTY_WEIGHTS,
) -> DifficultyRecommendation:
    """
    Recommend a difficulty level.

    Overrides apply in order: confidence boost, student cap, challenge
    mode. Otherwise the composite score picks the level.

    Args:
        data: Confidence, average score, experience, sessions and trend
        weights: Composite weights

    Returns:
        DifficultyRecommendation with flags and an explanation
    """
    composite = composite_difficulty_score(data, weights)
    is_student = data.experience_level == ExperienceLevel.STUDENT

    needs_confidence_boost = data.confidence_level <= 2 or data.average_score < 30
    ready_for_challenge = (
        data.confidence_level >= 4
        and data.average_score > 70
        and data.recent_performance_trend == ScoreTrend.IMPROVING
    )
    student_capped = is_student and composite > STUDENT_CAP

    stats = f"confidence: {data.confidence_level}/5, score: {round_half_up(data.average_score)}%"
    rounded_composite = round_half_up(composite)

    if needs_confidence_boost:
        difficulty = Difficulty.EASY
        explanation = f"Starting with easier questions to build confidence ({stats})"
    elif student_capped:
        difficulty = Difficulty.MEDIUM
        explanation = "Medium level recommended for student experience (capped for appropriate learning curve)"
    elif ready_for_challenge and not is_student:
        difficulty = Difficulty.HARD
        explanation = f"Challenging you with harder questions for growth ({stats}, trending up)"
    elif composite < EASY_CEILING:
        difficulty = Difficulty.EASY
        explanation = f"Recommended easy level for skill building (composite score: {rounded_composite})"
    elif composite < MEDIUM_CEILING:
        difficulty = Difficulty.MEDIUM
        explanation = f"Recommended medium level for balanced practice (composite score: {rounded_composite})"
    elif is_student:
        difficulty = Difficulty.MEDIUM
        explanation = f"Medium level recommended for student progression (composite score: {rounded_composite})"
    else:
        difficulty = Difficulty.HARD
        explanation = f"Recommended hard level for advanced challenge (composite score: {rounded_composite})"

    logger.debug(f"Adaptive difficulty: {difficulty.value} (composite {composite:.1f})")

    return DifficultyRecommendation(
        suggested_difficulty=difficulty,
        confidence_boost=needs_confidence_boost,
        challenge_mode=ready_for_challenge,
        explanation=explanation,
        composite_score=round(composite, 2),
    )


def get_next_difficulty(current: Difficulty, success_rate: float) -> Difficulty:
    """
    Step difficulty up or down based on a 0-1 success rate.

    Clamped at both ends of the easy -> medium -> hard ladder.
    """
    index = DIFFICULTY_ORDER.index(Difficulty(current))

    if success_rate >= PROMOTE_SUCCESS_RATE:
        index = min(index + 1, len(DIFFICULTY_ORDER) - 1)
    elif success_rate < DEMOTE_SUCCESS_RATE:
        index = max(index - 1, 0)

    return DIFFICULTY_ORDER[index]

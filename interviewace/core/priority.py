"""
Priority scoring for InterviewAce

Turns a profile and its analytics into skill deficits, a target
difficulty, ranked resource categories and an urgency score.

New users (no analytics, or zero sessions) are scored from their
onboarding answers; existing users from measured performance.
"""

import logging

from interviewace.core.text import clamp
from interviewace.models.profile import (
    AnalyticsSnapshot,
    ExperienceLevel,
    InterviewGoal,
    ScoreTrend,
    Skill,
    UserProfile,
    WeakArea,
)
from interviewace.models.question import Difficulty
from interviewace.models.recommendation import (
    DEFAULT_RESOURCE_SCORE_WEIGHTS,
    DEFAULT_SKILL_URGENCY_WEIGHTS,
    DEFAULT_URGENCY_WEIGHTS,
    PersonalizedRecommendations,
    ResourceScoreWeights,
    ScoredCategory,
    SkillDeficits,
    SkillUrgencyWeights,
    UrgencyLevel,
    UrgencyWeights,
)
from interviewace.models.resources import (
    DEFAULT_RESOURCE_CATALOG,
    ResourceCatalog,
    ResourceCategory,
    ResourceDifficulty,
)

logger = logging.getLogger(__name__)


PERSONALIZED_CATEGORY_COUNT = 4

# Skill scores below this are considered a concern in urgency scoring
URGENCY_SKILL_FLOOR = 6

SKILL_CATEGORY_KEYWORDS: dict[Skill, tuple[str, ...]] = {
    Skill.TECHNICAL: ("algorithm", "coding", "system-design", "data-structures"),
    Skill.COMMUNICATION: ("behavioral", "soft-skills", "presentation"),
    Skill.CONFIDENCE: ("fundamentals", "practice", "mock-interview"),
    Skill.CLARITY: ("communication", "behavioral", "presentation"),
}

DIFFICULTY_TO_RESOURCE: dict[Difficulty, ResourceDifficulty] = {
    Difficulty.EASY: ResourceDifficulty.BEGINNER,
    Difficulty.MEDIUM: ResourceDifficulty.INTERMEDIATE,
    Difficulty.HARD: ResourceDifficulty.ADVANCED,
}

FOUNDATIONAL_MARKERS = ("fundamentals", "basic")

CRITICAL_WEAK_AREAS = frozenset({WeakArea.ALGORITHM_DESIGN, WeakArea.SYSTEM_ARCHITECTURE})

WEAK_AREA_BOOST_CRITICAL = 25
WEAK_AREA_BOOST_COMMUNICATION = 20
WEAK_AREA_BOOST_OTHER = 15
INTERVIEW_PREP_GOAL_BOOST = 15

EXPERIENCE_URGENCY_BIAS: dict[ExperienceLevel, float] = {
    ExperienceLevel.STUDENT: 20,
    ExperienceLevel.FRESHER: 15,
    ExperienceLevel.JUNIOR: 10,
    ExperienceLevel.SENIOR: 5,
}

URGENCY_BUCKETS: tuple[tuple[float, UrgencyLevel], ...] = (
    (70, UrgencyLevel.CRITICAL),
    (50, UrgencyLevel.HIGH),
    (25, UrgencyLevel.MEDIUM),
)


def is_new_user(analytics: AnalyticsSnapshot | None) -> bool:
    return analytics is None or analytics.total_sessions == 0


# ============================================================================
# DEFICITS AND TARGET DIFFICULTY
# ============================================================================

def calculate_skill_deficits(
    profile: UserProfile,
    analytics: AnalyticsSnapshot | None = None,
) -> SkillDeficits:
    """
    Deficit per skill; higher means more work needed.

    Existing users: 10 minus the measured 0-10 score. New users: a baseline
    from self-reported confidence, raised for communication and clarity
    when the user wants to improve communication.
    """
    if is_new_user(analytics):
        base = max(0, 6 - profile.confidence_level)
        wants_communication = InterviewGoal.IMPROVE_COMMUNICATION in profile.interview_goals
        return SkillDeficits(
            technical=base + 2,
            communication=base + (3 if wants_communication else 1),
            confidence=max(0.0, 8 - profile.confidence_level * 1.6),
            clarity=base + (2 if wants_communication else 1),
        )

    return SkillDeficits(**{
        skill.value: max(0.0, 10 - score)
        for skill, score in analytics.skill_breakdown.items()
    })


def calculate_target_difficulty(
    profile: UserProfile,
    analytics: AnalyticsSnapshot | None = None,
) -> Difficulty:
    """Target difficulty for resource matching."""
    if is_new_user(analytics):
        if profile.experience_level == ExperienceLevel.STUDENT or profile.confidence_level <= 2:
            return Difficulty.EASY
        if profile.experience_level == ExperienceLevel.SENIOR and profile.confidence_level >= 4:
            return Difficulty.HARD
        return Difficulty.MEDIUM

    skill_mean = analytics.skill_breakdown.mean
    if analytics.average_score < 40 or skill_mean < 4:
        return Difficulty.EASY
    if analytics.average_score > 70 and skill_mean > 7:
        return Difficulty.HARD
    return Difficulty.MEDIUM


# ============================================================================
# RESOURCE CATEGORY SCORING
# ============================================================================

def category_targets_skill(category: ResourceCategory, skill: Skill) -> bool:
    name = category.name.lower()
    return any(
        keyword in category.id or keyword in name
        for keyword in SKILL_CATEGORY_KEYWORDS[skill]
    )


def _matches_domain(category: ResourceCategory, domains: list[str]) -> bool:
    name = category.name.lower()
    return any(
        domain.replace("-", "", 1) in category.id
        or domain in name
        or domain in category.tags
        for domain in domains
    )


def _matches_weak_area(category: ResourceCategory, weak_areas: list[str]) -> bool:
    name = category.name.lower()
    return any(
        weak.replace("-", "", 1) in category.id
        or weak.replace("-", " ", 1) in name
        for weak in weak_areas
    )


def _match_reason(primary_skill: Skill, targets_primary: bool, domain_match: bool, weak_match: bool) -> str:
    reasons = []
    if targets_primary:
        reasons.append(f"Targets your weakest skill: {primary_skill.value}")
    if domain_match:
        reasons.append("Matches your domain interests")
    if weak_match:
        reasons.append("Addresses identified weak areas")
    return " • ".join(reasons) or "General skill building"


def score_resource_categories(
    profile: UserProfile,
    analytics: AnalyticsSnapshot | None = None,
    catalog: ResourceCatalog = DEFAULT_RESOURCE_CATALOG,
    weights: ResourceScoreWeights = DEFAULT_RESOURCE_SCORE_WEIGHTS,
) -> list[ScoredCategory]:
    """
    Rank every catalog category for this user, best first.

    Scores are rounded to one decimal; equal scores keep catalog order.
    """
    deficits = calculate_skill_deficits(profile, analytics)
    target_difficulty = calculate_target_difficulty(profile, analytics)
    primary = deficits.primary()

    domains = [domain.value for domain in profile.domains]
    weak_areas = [area.value for area in profile.weak_areas]
    wanted_difficulty = DIFFICULTY_TO_RESOURCE[target_difficulty]
    declining = analytics is not None and analytics.score_trend == ScoreTrend.DECLINING

    logger.debug(
        f"Scoring resources: primary={primary.skill.value} "
        f"target={target_difficulty.value} domains={domains}"
    )

    scored = []
    for category in catalog.categories:
        score = 0.0

        targets_primary = category_targets_skill(category, primary.skill)
        if targets_primary:
            score += weights.primary_deficit * weights.scale

        domain_match = _matches_domain(category, domains)
        if domain_match:
            score += weights.domain * weights.scale

        if category.resources:
            aligned = sum(1 for resource in category.resources if resource.difficulty == wanted_difficulty)
            score += aligned / len(category.resources) * weights.difficulty * weights.scale

        weak_match = _matches_weak_area(category, weak_areas)
        if weak_match:
            score += weights.weak_area * weights.scale

        if declining and any(marker in category.id for marker in FOUNDATIONAL_MARKERS):
            score += weights.declining_foundation_bonus

        scored.append(ScoredCategory(
            category=category,
            score=round(score, 1),
            primary_match=targets_primary,
            difficulty_alignment=target_difficulty,
            match_reason=_match_reason(primary.skill, targets_primary, domain_match, weak_match),
        ))

    return sorted(scored, key=lambda item: item.score, reverse=True)


def get_personalized_recommendations(
    profile: UserProfile,
    analytics: AnalyticsSnapshot | None = None,
    catalog: ResourceCatalog = DEFAULT_RESOURCE_CATALOG,
    limit: int = PERSONALIZED_CATEGORY_COUNT,
) -> PersonalizedRecommendations:
    """Top resource categories plus the signals that ranked them."""
    deficits = calculate_skill_deficits(profile, analytics)
    return PersonalizedRecommendations(
        recommendations=score_resource_categories(profile, analytics, catalog)[:limit],
        deficits=deficits,
        target_difficulty=calculate_target_difficulty(profile, analytics),
        primary_focus=deficits.primary(),
        is_new_user=is_new_user(analytics),
    )


# ============================================================================
# URGENCY
# ============================================================================

def calculate_urgency_score(
    profile: UserProfile,
    analytics: AnalyticsSnapshot,
    weights: UrgencyWeights = DEFAULT_URGENCY_WEIGHTS,
    skill_weights: SkillUrgencyWeights = DEFAULT_SKILL_URGENCY_WEIGHTS,
) -> float:
    """
    Urgency in [0, 100] from skill deficits, profile signals and experience.

    Args:
        profile: Onboarding profile
        analytics: Performance snapshot (zeros for new users)
        weights: Top-level term weights and confidence multipliers
        skill_weights: Per-skill weights inside the deficit term

    Returns:
        Urgency score, capped at 100
    """
    skill_term = sum(
        max(0, URGENCY_SKILL_FLOOR - score) * skill_weights.weight_for(skill) * 10
        for skill, score in analytics.skill_breakdown.items()
    )

    profile_term = 0.0
    for area in profile.weak_areas:
        if area in CRITICAL_WEAK_AREAS:
            profile_term += WEAK_AREA_BOOST_CRITICAL
        elif area == WeakArea.COMMUNICATION_CLARITY:
            profile_term += WEAK_AREA_BOOST_COMMUNICATION
        else:
            profile_term += WEAK_AREA_BOOST_OTHER

    if InterviewGoal.PREPARE_FOR_JOB_INTERVIEWS in profile.interview_goals:
        profile_term += INTERVIEW_PREP_GOAL_BOOST

    experience_term = EXPERIENCE_URGENCY_BIAS[profile.experience_level]

    score = (
        skill_term * weights.skill_deficit
        + profile_term * weights.profile
        + experience_term * weights.experience
    )

    if profile.confidence_level <= 2:
        score *= weights.low_confidence_multiplier
    elif profile.confidence_level >= 4:
        score *= weights.high_confidence_multiplier

    return clamp(score, 0, 100)


def map_urgency_score(score: float) -> UrgencyLevel:
    for threshold, level in URGENCY_BUCKETS:
        if score >= threshold:
            return level
    return UrgencyLevel.LOW

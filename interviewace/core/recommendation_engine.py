"""
Recommendation Engine for InterviewAce

Combines adaptive difficulty, domain mapping, urgency scoring and
learning paths into a single personalized recommendation.

Fully deterministic: the same profile and analytics always produce an
equal RecommendationOutput.
"""

import logging

from interviewace.core.difficulty import calculate_adaptive_difficulty
from interviewace.core.domain_mapper import recommend_session_config
from interviewace.core.learning_path import generate_learning_path
from interviewace.core.priority import calculate_urgency_score, map_urgency_score
from interviewace.core.text import round_half_up
from interviewace.models.profile import AnalyticsSnapshot, ScoreTrend, Skill, UserProfile, WeakArea
from interviewace.models.question import Difficulty
from interviewace.models.recommendation import (
    DEFAULT_SKILL_URGENCY_WEIGHTS,
    DEFAULT_URGENCY_WEIGHTS,
    DifficultyInput,
    NextAction,
    PrimaryFocus,
    ProgressInsights,
    RecommendationOutput,
    SessionConfig,
    SkillUrgencyWeights,
    UrgencyLevel,
    UrgencyWeights,
)
from interviewace.models.resources import DEFAULT_RESOURCE_CATALOG, ResourceCatalog

logger = logging.getLogger(__name__)


RECOMMENDED_RESOURCE_COUNT = 3

FOCUS_LABELS: dict[Skill, tuple[str, str]] = {
    # skill: (measured label, self-identified label)
    Skill.TECHNICAL: ("Technical Depth", "Technical Skills (Self-Identified)"),
    Skill.COMMUNICATION: ("Communication Skills", "Communication (Self-Identified)"),
    Skill.CLARITY: ("Response Clarity", "Clarity (Self-Identified)"),
    Skill.CONFIDENCE: ("Interview Confidence", "Confidence Building (Self-Identified)"),
}

SKILL_RESOURCE_CATEGORY: dict[Skill, str] = {
    Skill.TECHNICAL: WeakArea.ALGORITHM_DESIGN.value,
    Skill.COMMUNICATION: WeakArea.COMMUNICATION_CLARITY.value,
    Skill.CLARITY: WeakArea.COMMUNICATION_CLARITY.value,
    Skill.CONFIDENCE: WeakArea.CONFIDENCE_BUILDING.value,
}

URGENCY_PREFIXES: dict[UrgencyLevel, str] = {
    UrgencyLevel.CRITICAL: "Urgent:",
    UrgencyLevel.HIGH: "Priority:",
}
DEFAULT_URGENCY_PREFIX = "Recommended:"


def _format_score(value: float) -> str:
    """Render 7.0 as "7" and 6.5 as "6.5"."""
    return f"{value:g}"


class RecommendationEngine:
    """
    Produces recommendations from a profile and an analytics snapshot.

    Responsibilities:
    - Pick the weakest skill and describe it
    - Score urgency
    - Suggest a session configuration and difficulty
    - Attach resources, a learning path and progress insights
    """

    def __init__(
        self,
        catalog: ResourceCatalog = DEFAULT_RESOURCE_CATALOG,
        urgency_weights: UrgencyWeights = DEFAULT_URGENCY_WEIGHTS,
        skill_weights: SkillUrgencyWeights = DEFAULT_SKILL_URGENCY_WEIGHTS,
        resource_count: int = RECOMMENDED_RESOURCE_COUNT,
    ):
        """
        Initialize recommendation engine.

        Args:
            catalog: Resource catalog used for resources and learning paths
            urgency_weights: Top-level urgency weights
            skill_weights: Per-skill urgency weights
            resource_count: Number of resources to recommend
        """
        self.catalog = catalog
        self.urgency_weights = urgency_weights
        self.skill_weights = skill_weights
        self.resource_count = resource_count

    def generate(self, profile: UserProfile, analytics: AnalyticsSnapshot) -> RecommendationOutput:
        """
        Generate a personalized recommendation.

        Args:
            profile: Validated onboarding profile
            analytics: Performance snapshot (all zeros for a new user)

        Returns:
            Complete RecommendationOutput
        """
        difficulty = calculate_adaptive_difficulty(DifficultyInput(
            confidence_level=profile.confidence_level,
            average_score=analytics.average_score,
            experience_level=profile.experience_level,
            sessions_completed=analytics.total_sessions,
            recent_performance_trend=analytics.score_trend,
        ))

        weakest_skill, weakest_score = min(analytics.skill_breakdown.items(), key=lambda item: item[1])

        urgency_score = calculate_urgency_score(profile, analytics, self.urgency_weights, self.skill_weights)
        urgency_level = map_urgency_score(urgency_score)
        primary_focus = self._primary_focus(weakest_skill, weakest_score, profile)

        session = recommend_session_config(profile.domains, weakest_skill.value)

        weak_areas = [area.value for area in profile.weak_areas]
        resource_categories = weak_areas or [SKILL_RESOURCE_CATEGORY[weakest_skill]]
        resources = self.catalog.get_resources_for_weak_areas(resource_categories)[:self.resource_count]

        learning_path = generate_learning_path(
            weak_areas,
            analytics.skill_breakdown,
            profile.experience_level,
            self.catalog,
        )

        logger.info(
            f"Recommendation: focus={weakest_skill.value} urgency={urgency_level.value} "
            f"difficulty={difficulty.suggested_difficulty.value} type={session.type}"
        )

        return RecommendationOutput(
            primary_focus=primary_focus,
            suggested_role=session.role,
            suggested_difficulty=difficulty.suggested_difficulty,
            suggested_type=session.type,
            urgency_level=urgency_level,
            urgency_score=round(urgency_score, 2),
            explanation=self._explanation(
                weakest_skill, weakest_score, analytics.average_score,
                profile.confidence_level, analytics.score_trend,
            ),
            next_action=self._next_action(
                primary_focus, session.type, difficulty.suggested_difficulty, urgency_level,
            ),
            recommended_resources=resources,
            learning_path=learning_path,
            session_config=SessionConfig(
                role=session.role,
                type=session.type,
                difficulty=difficulty.suggested_difficulty,
                categories=session.categories,
                skill_focus=session.skill_focus,
            ),
            progress_insights=self._progress_insights(analytics),
        )

    # =========================================================================
    # TEXT BUILDERS
    # =========================================================================

    @staticmethod
    def _primary_focus(skill: Skill, score: float, profile: UserProfile) -> PrimaryFocus:
        self_identified = any(
            skill.value in area.value or area.value in skill.value
            for area in profile.weak_areas
        )
        measured_label, self_label = FOCUS_LABELS[skill]

        if self_identified and score < 6:
            severity = "Priority Area"
        elif score < 4:
            severity = "Critical"
        elif score < 6:
            severity = "Developing"
        else:
            severity = "Maintaining"

        return PrimaryFocus(
            skill=skill,
            label=self_label if self_identified else measured_label,
            severity=severity,
            self_identified=self_identified,
        )

    @staticmethod
    def _explanation(
        skill: Skill,
        score: float,
        average_score: float,
        confidence_level: int,
        trend: ScoreTrend,
    ) -> str:
        explanation = (
            f"Your {skill.value} score is {_format_score(score)}/10, "
            f"which is your primary area for improvement. "
        )

        if average_score < 40:
            explanation += "Focus on fundamentals to build a strong foundation. "
        elif average_score < 70:
            explanation += "You're progressing well - time to tackle intermediate challenges. "
        else:
            explanation += "Strong performance overall - ready for advanced practice. "

        if confidence_level <= 2:
            explanation += "Building confidence through easier questions will help your overall performance."
        elif confidence_level >= 4:
            explanation += "Your confidence is good - push yourself with more challenging material."

        if trend == ScoreTrend.IMPROVING:
            explanation += " Great progress momentum!"
        elif trend == ScoreTrend.DECLINING:
            explanation += " Let's reverse the recent decline with targeted practice."

        return explanation.strip()

    @staticmethod
    def _next_action(
        focus: PrimaryFocus,
        session_type: str,
        difficulty: Difficulty,
        urgency: UrgencyLevel,
    ) -> NextAction:
        prefix = URGENCY_PREFIXES.get(urgency, DEFAULT_URGENCY_PREFIX)
        return NextAction(
            title=f"{prefix} {focus.display} Practice",
            description=(
                f"Start a {difficulty.value} {session_type} session to improve your weakest skill area. "
                f"This targeted practice will have the biggest impact on your interview performance."
            ),
        )

    @staticmethod
    def _progress_insights(analytics: AnalyticsSnapshot) -> ProgressInsights:
        average = round_half_up(analytics.average_score)

        if analytics.score_trend == ScoreTrend.IMPROVING:
            trend, momentum = f"Performance improving steadily ({average}% average)", "positive"
        elif analytics.score_trend == ScoreTrend.DECLINING:
            trend, momentum = f"Performance declined in recent sessions ({average}% average)", "concerning"
        else:
            trend, momentum = f"Performance stable at {average}%", "steady"

        if analytics.average_score < 50:
            milestone = "Reach 50% average score"
        elif analytics.average_score < 70:
            milestone = "Achieve 70% consistency"
        else:
            milestone = "Master advanced scenarios"

        return ProgressInsights(trend=trend, momentum=momentum, next_milestone=milestone)


DEFAULT_RECOMMENDATION_ENGINE = RecommendationEngine()


def generate_recommendations(
    profile: UserProfile,
    analytics: AnalyticsSnapshot | None = None,
) -> RecommendationOutput:
    """Generate a recommendation with the default catalog and weights."""
    return DEFAULT_RECOMMENDATION_ENGINE.generate(profile, analytics or AnalyticsSnapshot())

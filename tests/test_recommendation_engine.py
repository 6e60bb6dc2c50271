"""
Tests for interviewace.core.recommendation_engine

Covers:
- New-user recommendation end to end
- Primary focus labels and severity
- Explanation, next action and progress insights text
- Determinism and injected configuration
"""

import pytest

from interviewace.core.recommendation_engine import RecommendationEngine, generate_recommendations
from interviewace.models.profile import (
    AnalyticsSnapshot,
    ExperienceLevel,
    ScoreTrend,
    Skill,
    SkillBreakdown,
    UserDomain,
    UserProfile,
    WeakArea,
)
from interviewace.models.question import Difficulty, QuestionRole
from interviewace.models.recommendation import UrgencyLevel


@pytest.fixture
def new_profile() -> UserProfile:
    return UserProfile(
        experience_level=ExperienceLevel.JUNIOR,
        domains=[UserDomain.BACKEND],
        confidence_level=3,
    )


@pytest.fixture
def communication_profile() -> UserProfile:
    return UserProfile(
        experience_level=ExperienceLevel.JUNIOR,
        domains=[UserDomain.FRONTEND],
        confidence_level=4,
        weak_areas=[WeakArea.COMMUNICATION_CLARITY],
    )


@pytest.fixture
def improving_analytics() -> AnalyticsSnapshot:
    return AnalyticsSnapshot(
        total_sessions=4,
        average_score=65,
        skill_breakdown=SkillBreakdown(technical=7, communication=4.5, confidence=8, clarity=6),
        score_trend=ScoreTrend.IMPROVING,
        recent_performance=[55, 60, 70, 75],
    )


class TestNewUser:
    def test_recommendation(self, new_profile):
        output = generate_recommendations(new_profile)

        assert output.primary_focus.skill == Skill.TECHNICAL
        assert output.primary_focus.label == "Technical Depth"
        assert output.primary_focus.severity == "Critical"
        assert output.suggested_role == QuestionRole.BACKEND
        assert output.suggested_type == "technical"
        assert output.suggested_difficulty == Difficulty.EASY
        assert output.session_config.difficulty == Difficulty.EASY
        assert output.urgency_level == UrgencyLevel.MEDIUM
        assert output.urgency_score == pytest.approx(37)

    def test_text(self, new_profile):
        output = generate_recommendations(new_profile)

        assert output.explanation == (
            "Your technical score is 0/10, which is your primary area for improvement. "
            "Focus on fundamentals to build a strong foundation."
        )
        assert output.next_action.title == "Recommended: Technical Depth (Critical) Practice"
        assert output.next_action.description.startswith("Start a easy technical session")
        assert output.progress_insights.trend == "Performance stable at 0%"
        assert output.progress_insights.momentum == "steady"
        assert output.progress_insights.next_milestone == "Reach 50% average score"

    def test_resources_and_path(self, new_profile):
        output = generate_recommendations(new_profile)

        assert [r.id for r in output.recommended_resources] == ["algo-1", "algo-2", "algo-3"]
        assert output.learning_path.path_id == "algorithm-design-junior"

    def test_missing_analytics_matches_empty_snapshot(self, new_profile):
        assert generate_recommendations(new_profile) == generate_recommendations(new_profile, AnalyticsSnapshot())


class TestExistingUser:
    def test_self_identified_focus(self, communication_profile, improving_analytics):
        output = generate_recommendations(communication_profile, improving_analytics)

        assert output.primary_focus.skill == Skill.COMMUNICATION
        assert output.primary_focus.self_identified is True
        assert output.primary_focus.display == "Communication (Self-Identified) (Priority Area)"
        assert output.suggested_role == QuestionRole.GENERAL
        assert output.suggested_type == "behavioral"
        assert output.urgency_level == UrgencyLevel.LOW
        assert output.next_action.title == (
            "Recommended: Communication (Self-Identified) (Priority Area) Practice"
        )
        assert [r.id for r in output.recommended_resources] == ["comm-1", "comm-2"]

    def test_explanation_and_insights(self, communication_profile, improving_analytics):
        output = generate_recommendations(communication_profile, improving_analytics)

        assert output.explanation == (
            "Your communication score is 4.5/10, which is your primary area for improvement. "
            "You're progressing well - time to tackle intermediate challenges. "
            "Your confidence is good - push yourself with more challenging material. "
            "Great progress momentum!"
        )
        assert output.progress_insights.trend == "Performance improving steadily (65% average)"
        assert output.progress_insights.momentum == "positive"
        assert output.progress_insights.next_milestone == "Achieve 70% consistency"

    def test_technical_weak_area_is_not_self_identified(self):
        profile = UserProfile(
            experience_level=ExperienceLevel.SENIOR,
            domains=[UserDomain.BACKEND],
            confidence_level=3,
            weak_areas=[WeakArea.ALGORITHM_DESIGN],
        )
        analytics = AnalyticsSnapshot(
            total_sessions=2,
            average_score=55,
            skill_breakdown=SkillBreakdown(technical=3, communication=7, confidence=7, clarity=7),
        )
        focus = generate_recommendations(profile, analytics).primary_focus

        assert focus.self_identified is False
        assert focus.label == "Technical Depth"
        assert focus.severity == "Critical"

    def test_strong_user(self):
        profile = UserProfile(
            experience_level=ExperienceLevel.SENIOR,
            domains=[UserDomain.CLOUD],
            confidence_level=3,
        )
        analytics = AnalyticsSnapshot(
            total_sessions=10,
            average_score=82,
            skill_breakdown=SkillBreakdown(technical=8, communication=8.5, confidence=9, clarity=8),
            score_trend=ScoreTrend.DECLINING,
        )
        output = generate_recommendations(profile, analytics)

        assert output.primary_focus.severity == "Maintaining"
        assert "Strong performance overall" in output.explanation
        assert output.explanation.endswith("Let's reverse the recent decline with targeted practice.")
        assert output.progress_insights.momentum == "concerning"
        assert output.progress_insights.next_milestone == "Master advanced scenarios"


class TestEngine:
    def test_deterministic(self, communication_profile, improving_analytics):
        engine = RecommendationEngine()
        first = engine.generate(communication_profile, improving_analytics)
        second = engine.generate(communication_profile, improving_analytics)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_resource_count(self, new_profile):
        engine = RecommendationEngine(resource_count=1)
        output = engine.generate(new_profile, AnalyticsSnapshot())
        assert [r.id for r in output.recommended_resources] == ["algo-1"]

"""
Data models and schemas for InterviewAce

Contains Pydantic models for:
- Answer evaluation results
- User profiles and analytics snapshots
- Keyword library and resource catalog
- Question bank
- Recommendations and learning paths
"""

from interviewace.models.evaluation import (
    Dimension,
    EvaluationContext,
    EvaluationResult,
    EvaluationWeights,
    InterviewType,
    QuestionAnswer,
    RawScores,
    ScoreBreakdown,
)
from interviewace.models.profile import (
    AnalyticsSnapshot,
    ExperienceLevel,
    InterviewGoal,
    ScoreTrend,
    Skill,
    SkillBreakdown,
    UserDomain,
    UserProfile,
    WeakArea,
)
from interviewace.models.keywords import KeywordLibrary
from interviewace.models.resources import Resource, ResourceCatalog, ResourceCategory
from interviewace.models.question import Difficulty, Question, QuestionRole
from interviewace.models.analytics import SessionRecord, StoredAnswerEvaluation
from interviewace.models.recommendation import (
    DifficultyInput,
    DifficultyRecommendation,
    DomainMapping,
    LearningPath,
    RecommendationOutput,
    SessionConfig,
    UrgencyLevel,
)

__all__ = [
    # Evaluation
    "Dimension",
    "EvaluationContext",
    "EvaluationResult",
    "EvaluationWeights",
    "InterviewType",
    "QuestionAnswer",
    "RawScores",
    "ScoreBreakdown",
    # Profile
    "AnalyticsSnapshot",
    "ExperienceLevel",
    "InterviewGoal",
    "ScoreTrend",
    "Skill",
    "SkillBreakdown",
    "UserDomain",
    "UserProfile",
    "WeakArea",
    # Reference data
    "KeywordLibrary",
    "Resource",
    "ResourceCatalog",
    "ResourceCategory",
    "Difficulty",
    "Question",
    "QuestionRole",
    # Analytics records
    "SessionRecord",
    "StoredAnswerEvaluation",
    # Recommendation
    "DifficultyInput",
    "DifficultyRecommendation",
    "DomainMapping",
    "LearningPath",
    "RecommendationOutput",
    "SessionConfig",
    "UrgencyLevel",
]

"""
Core business logic modules for InterviewAce

Contains:
- Evaluation Engine: Deterministic answer scoring and feedback
- Adaptive Difficulty: Composite difficulty recommendation
- Domain Mapper: Domains to question roles and categories
- Priority: Skill deficits, resource ranking and urgency
- Learning Path: Step-by-step improvement plans
- Recommendation Engine: Personalized recommendations
- Analytics: Snapshot building from stored sessions
- AI Feedback: Optional conversational feedback rewrite
"""

from interviewace.core.evaluation_engine import (
    EvaluationEngine,
    evaluate_answer,
    evaluate_multiple_answers,
    with_feedback,
)
from interviewace.core.difficulty import calculate_adaptive_difficulty, get_next_difficulty
from interviewace.core.domain_mapper import (
    get_domain_resource_categories,
    map_domains_to_questions,
    recommend_session_config,
)
from interviewace.core.priority import (
    calculate_skill_deficits,
    calculate_target_difficulty,
    calculate_urgency_score,
    get_personalized_recommendations,
    score_resource_categories,
)
from interviewace.core.learning_path import generate_learning_path
from interviewace.core.recommendation_engine import RecommendationEngine, generate_recommendations
from interviewace.core.analytics import build_analytics_snapshot
from interviewace.core.ai_feedback import AIFeedbackError, AIFeedbackLayer

__all__ = [
    "EvaluationEngine",
    "evaluate_answer",
    "evaluate_multiple_answers",
    "with_feedback",
    "calculate_adaptive_difficulty",
    "get_next_difficulty",
    "get_domain_resource_categories",
    "map_domains_to_questions",
    "recommend_session_config",
    "calculate_skill_deficits",
    "calculate_target_difficulty",
    "calculate_urgency_score",
    "get_personalized_recommendations",
    "score_resource_categories",
    "generate_learning_path",
    "RecommendationEngine",
    "generate_recommendations",
    "build_analytics_snapshot",
    "AIFeedbackError",
    "AIFeedbackLayer",
]

"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components.
"""

import logging

from interviewace.config.settings import get_settings
from interviewace.core.ai_feedback import AIFeedbackLayer
from interviewace.core.evaluation_engine import EvaluationEngine
from interviewace.core.recommendation_engine import RecommendationEngine
from interviewace.models.resources import DEFAULT_RESOURCE_CATALOG

logger = logging.getLogger(__name__)


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_evaluation_engine: EvaluationEngine | None = None
_recommendation_engine: RecommendationEngine | None = None
_ai_feedback: AIFeedbackLayer | None = None


def get_evaluation_engine() -> EvaluationEngine:
    """Get the evaluation engine singleton."""
    global _evaluation_engine

    if _evaluation_engine is None:
        _evaluation_engine = EvaluationEngine()

    return _evaluation_engine


def get_recommendation_engine() -> RecommendationEngine:
    """Get the recommendation engine singleton, sized from settings."""
    global _recommendation_engine

    if _recommendation_engine is None:
        settings = get_settings()
        _recommendation_engine = RecommendationEngine(
            catalog=DEFAULT_RESOURCE_CATALOG,
            resource_count=settings.recommended_resource_count,
        )

    return _recommendation_engine


def get_ai_feedback() -> AIFeedbackLayer | None:
    """
    Get the AI feedback layer singleton.

    Returns None when AI feedback is not configured.
    """
    global _ai_feedback

    if _ai_feedback is None:
        settings = get_settings()
        if not settings.ai_feedback_configured:
            return None
        _ai_feedback = AIFeedbackLayer(settings)
        logger.info(f"AI feedback enabled with model {settings.ai_model}")

    return _ai_feedback


async def cleanup():
    """Cleanup resources on shutdown."""
    global _evaluation_engine, _recommendation_engine, _ai_feedback

    if _ai_feedback:
        await _ai_feedback.close()
        _ai_feedback = None

    _evaluation_engine = None
    _recommendation_engine = None

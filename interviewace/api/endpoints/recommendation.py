"""
Recommendation API endpoints

Handles:
- Full personalized recommendations
- Adaptive difficulty
- Domain mapping and session configuration
- Ranked resource categories and learning paths
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from interviewace.api.dependencies import get_recommendation_engine
from interviewace.config.settings import get_settings
from interviewace.core.difficulty import calculate_adaptive_difficulty, get_next_difficulty
from interviewace.core.domain_mapper import (
    get_domain_resource_categories,
    map_domains_to_questions,
    recommend_session_config,
)
from interviewace.core.learning_path import generate_learning_path
from interviewace.core.priority import get_personalized_recommendations
from interviewace.models.profile import (
    AnalyticsSnapshot,
    ExperienceLevel,
    SkillBreakdown,
    UserDomain,
    UserProfile,
    WeakArea,
)
from interviewace.models.question import Difficulty
from interviewace.models.recommendation import (
    DifficultyInput,
    DifficultyRecommendation,
    DomainMapping,
    LearningPath,
    PersonalizedRecommendations,
    RecommendationOutput,
    SessionConfig,
)

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class RecommendationRequest(BaseModel):
    """Profile plus optional analytics; omitted analytics means a new user."""
    profile: UserProfile
    analytics: AnalyticsSnapshot | None = None


class NextDifficultyRequest(BaseModel):
    """Request model for stepping difficulty."""
    current: Difficulty
    success_rate: float = Field(..., ge=0, le=1)


class NextDifficultyResponse(BaseModel):
    """Response with the next difficulty."""
    difficulty: Difficulty


class DomainMappingRequest(BaseModel):
    """Request model for domain mapping."""
    domains: list[UserDomain] = Field(..., min_length=1, max_length=5)
    weakness: str | None = None


class DomainMappingResponse(BaseModel):
    """Domain mapping, session configuration and resource categories."""
    mapping: DomainMapping
    session_config: SessionConfig
    resource_categories: list[str]


class LearningPathRequest(BaseModel):
    """Request model for a standalone learning path."""
    weak_areas: list[WeakArea] = []
    skill_breakdown: SkillBreakdown = SkillBreakdown()
    experience_level: ExperienceLevel


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("", response_model=RecommendationOutput)
async def recommend(request: RecommendationRequest) -> RecommendationOutput:
    """Generate the full personalized recommendation."""
    try:
        analytics = request.analytics or AnalyticsSnapshot()
        return get_recommendation_engine().generate(request.profile, analytics)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/difficulty", response_model=DifficultyRecommendation)
async def recommend_difficulty(request: DifficultyInput) -> DifficultyRecommendation:
    """Recommend a difficulty from confidence, performance and experience."""
    return calculate_adaptive_difficulty(request)


@router.post("/difficulty/next", response_model=NextDifficultyResponse)
async def next_difficulty(request: NextDifficultyRequest) -> NextDifficultyResponse:
    """Step difficulty up or down from a recent success rate."""
    return NextDifficultyResponse(
        difficulty=get_next_difficulty(request.current, request.success_rate)
    )


@router.post("/domains", response_model=DomainMappingResponse)
async def map_domains(request: DomainMappingRequest) -> DomainMappingResponse:
    """Map domains to question roles, categories and a session configuration."""
    return DomainMappingResponse(
        mapping=map_domains_to_questions(request.domains),
        session_config=recommend_session_config(request.domains, request.weakness),
        resource_categories=get_domain_resource_categories(request.domains),
    )


@router.post("/resources", response_model=PersonalizedRecommendations)
async def personalized_resources(request: RecommendationRequest) -> PersonalizedRecommendations:
    """Rank resource categories for this user."""
    settings = get_settings()
    try:
        return get_personalized_recommendations(
            request.profile,
            request.analytics,
            limit=settings.personalized_category_count,
        )
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/learning-path", response_model=LearningPath)
async def learning_path(request: LearningPathRequest) -> LearningPath:
    """Generate a learning path for the given weaknesses and skills."""
    return generate_learning_path(
        [area.value for area in request.weak_areas],
        request.skill_breakdown,
        request.experience_level,
    )

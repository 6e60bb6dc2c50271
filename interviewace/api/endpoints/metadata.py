"""
Metadata API endpoints

Provides reference data for:
- Domains, goals, weak areas and experience levels
- Role keywords
- Learning resources
- Question bank
"""

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from interviewace.models.keywords import DEFAULT_KEYWORD_LIBRARY
from interviewace.models.profile import ExperienceLevel, InterviewGoal, UserDomain, WeakArea
from interviewace.models.question import QUESTION_BANK, Question, select_question
from interviewace.models.resources import DEFAULT_RESOURCE_CATALOG, Resource, ResourceCategory

router = APIRouter()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class OptionInfo(BaseModel):
    """A selectable onboarding option."""
    id: str
    name: str


class KeywordInfo(BaseModel):
    """Keywords used for technical scoring of a role."""
    role: str
    version: str
    keywords: list[str]


def _options(enum_cls) -> list[OptionInfo]:
    return [
        OptionInfo(id=member.value, name=member.value.replace("-", " ").title())
        for member in enum_cls
    ]


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/domains")
async def get_domains() -> list[OptionInfo]:
    """Get all selectable domains."""
    return _options(UserDomain)


@router.get("/goals")
async def get_goals() -> list[OptionInfo]:
    """Get all interview goals."""
    return _options(InterviewGoal)


@router.get("/weak-areas")
async def get_weak_areas() -> list[OptionInfo]:
    """Get all selectable weak areas."""
    return _options(WeakArea)


@router.get("/experience-levels")
async def get_experience_levels() -> list[OptionInfo]:
    """Get all experience levels."""
    return [OptionInfo(id=level.value, name=level.display_name) for level in ExperienceLevel]


@router.get("/keywords")
async def get_keyword_roles() -> list[str]:
    """Get the roles that have technical keywords."""
    return DEFAULT_KEYWORD_LIBRARY.roles


@router.get("/keywords/{role}")
async def get_keywords(role: str) -> KeywordInfo:
    """Get the technical keywords for a role."""
    keywords = DEFAULT_KEYWORD_LIBRARY.for_role(role)
    if not keywords:
        raise HTTPException(status_code=404, detail=f"Unknown role: {role}")

    return KeywordInfo(
        role=role.lower(),
        version=DEFAULT_KEYWORD_LIBRARY.version,
        keywords=list(keywords),
    )


@router.get("/resources")
async def get_resources() -> list[ResourceCategory]:
    """Get the learning resource catalog."""
    return list(DEFAULT_RESOURCE_CATALOG.categories)


@router.get("/resources/{experience_level}")
async def get_resources_for_level(experience_level: ExperienceLevel) -> list[Resource]:
    """Get learning resources pitched at an experience level."""
    return DEFAULT_RESOURCE_CATALOG.get_resources_for_experience_level(experience_level)


@router.get("/questions")
async def get_questions(
    role: str | None = None,
    type: str | None = None,
    difficulty: str | None = None,
) -> list[Question]:
    """Get bank questions, optionally filtered."""
    return [
        question for question in QUESTION_BANK
        if (role is None or question.role.value == role)
        and (type is None or question.category.value == type)
        and (difficulty is None or question.difficulty.value == difficulty)
    ]


@router.get("/questions/next")
async def get_next_question(
    role: str = "general",
    type: str = "technical",
    difficulty: str = "easy",
    used: list[str] = Query(default=[]),
) -> Question:
    """Pick the next unused question for a role, type and difficulty."""
    return select_question(role, type, difficulty, used)

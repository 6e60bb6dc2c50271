"""
Recommendation models for InterviewAce

Defines the inputs, weight configurations and outputs of the adaptive
recommendation engine. Every weighted formula has its own weights object
so tuning never touches the scoring logic.
"""

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from interviewace.models.evaluation import WEIGHT_TOLERANCE
from interviewace.models.profile import ExperienceLevel, ScoreTrend, Skill
from interviewace.models.question import Difficulty, QuestionRole
from interviewace.models.resources import Resource, ResourceCategory


class _Weights(BaseModel):
    """Base for weight sets that must sum to 1."""

    model_config = ConfigDict(frozen=True)

    weight_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _check_sum(self):
        if abs(self.total - 1.0) > WEIGHT_TOLERANCE:
            raise ValueError(f"{type(self).__name__} must sum to 1.0, got {self.total:.6f}")
        return self

    @property
    def total(self) -> float:
        return sum(getattr(self, name) for name in self.weight_fields)


# ============================================================================
# WEIGHT CONFIGURATIONS
# ============================================================================

class DifficultyWeights(_Weights):
    """Composite difficulty score weights."""

    weight_fields: ClassVar[tuple[str, ...]] = ("experience", "performance", "confidence", "sessions")

    experience: float = Field(default=0.4, ge=0)
    performance: float = Field(default=0.3, ge=0)
    confidence: float = Field(default=0.2, ge=0)
    sessions: float = Field(default=0.1, ge=0)

    # Trend adjustments, in composite points
    improving_bonus: float = 10.0
    declining_penalty: float = 15.0


class UrgencyWeights(_Weights):
    """Top-level urgency formula weights."""

    weight_fields: ClassVar[tuple[str, ...]] = ("skill_deficit", "profile", "experience")

    skill_deficit: float = Field(default=0.6, ge=0)
    profile: float = Field(default=0.3, ge=0)
    experience: float = Field(default=0.1, ge=0)

    low_confidence_multiplier: float = 1.3
    high_confidence_multiplier: float = 0.8


class SkillUrgencyWeights(_Weights):
    """Per-skill weights inside the urgency skill-deficit term."""

    weight_fields: ClassVar[tuple[str, ...]] = ("technical", "communication", "clarity", "confidence")

    technical: float = Field(default=0.4, ge=0)
    communication: float = Field(default=0.25, ge=0)
    clarity: float = Field(default=0.2, ge=0)
    confidence: float = Field(default=0.15, ge=0)

    def weight_for(self, skill: Skill) -> float:
        return getattr(self, skill.value)


class ResourceScoreWeights(_Weights):
    """Resource-category relevance weights, applied on a 0-100 scale."""

    weight_fields: ClassVar[tuple[str, ...]] = ("primary_deficit", "domain", "difficulty", "weak_area")

    primary_deficit: float = Field(default=0.40, ge=0)
    domain: float = Field(default=0.25, ge=0)
    difficulty: float = Field(default=0.20, ge=0)
    weak_area: float = Field(default=0.15, ge=0)

    scale: float = 100.0
    declining_foundation_bonus: float = 10.0


DEFAULT_DIFFICULTY_WEIGHTS = DifficultyWeights()
DEFAULT_URGENCY_WEIGHTS = UrgencyWeights()
DEFAULT_SKILL_URGENCY_WEIGHTS = SkillUrgencyWeights()
DEFAULT_RESOURCE_SCORE_WEIGHTS = ResourceScoreWeights()


# ============================================================================
# DIFFICULTY
# ============================================================================

class DifficultyInput(BaseModel):
    """Inputs for adaptive difficulty."""

    confidence_level: int = Field(..., ge=1, le=5)
    average_score: float = Field(..., ge=0, le=100)
    experience_level: ExperienceLevel
    sessions_completed: int = Field(default=0, ge=0)
    recent_performance_trend: ScoreTrend = ScoreTrend.STABLE


class DifficultyRecommendation(BaseModel):
    """Suggested difficulty with the reasoning behind it."""

    model_config = ConfigDict(frozen=True)

    suggested_difficulty: Difficulty
    confidence_boost: bool = Field(..., description="Start easier to build confidence")
    challenge_mode: bool = Field(..., description="Push harder for growth")
    explanation: str
    composite_score: float


# ============================================================================
# DOMAIN MAPPING
# ============================================================================

class DomainMapping(BaseModel):
    """Question-bank roles and categories derived from user domains."""

    model_config = ConfigDict(frozen=True)

    primary_role: QuestionRole
    secondary_role: QuestionRole
    preferred_categories: list[str]
    skill_focus: list[str]


class SessionConfig(BaseModel):
    """Suggested interview session configuration."""

    model_config = ConfigDict(frozen=True)

    role: QuestionRole
    type: str
    difficulty: Difficulty | None = None
    categories: list[str] = Field(default_factory=list)
    skill_focus: list[str] = Field(default_factory=list)


# ============================================================================
# PRIORITY / DEFICITS
# ============================================================================

class UrgencyLevel(str, Enum):
    """Coarse urgency buckets."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SkillDeficits(BaseModel):
    """Deficit per skill; higher means more improvement needed."""

    model_config = ConfigDict(frozen=True)

    technical: float = Field(..., ge=0)
    communication: float = Field(..., ge=0)
    confidence: float = Field(..., ge=0)
    clarity: float = Field(..., ge=0)

    def get(self, skill: Skill) -> float:
        return getattr(self, skill.value)

    def items(self) -> list[tuple[Skill, float]]:
        return [(skill, self.get(skill)) for skill in Skill]

    def primary(self) -> "PrimaryDeficit":
        """Highest deficit; the first skill in fixed order wins ties."""
        skill, deficit = max(self.items(), key=lambda item: item[1])
        return PrimaryDeficit(skill=skill, deficit=deficit)


class PrimaryDeficit(BaseModel):
    """The single skill with the highest deficit."""

    model_config = ConfigDict(frozen=True)

    skill: Skill
    deficit: float


class ScoredCategory(BaseModel):
    """A resource category ranked for one user."""

    model_config = ConfigDict(frozen=True)

    category: ResourceCategory
    score: float
    primary_match: bool
    difficulty_alignment: Difficulty
    match_reason: str


class PersonalizedRecommendations(BaseModel):
    """Ranked resource categories and the signals behind them."""

    model_config = ConfigDict(frozen=True)

    recommendations: list[ScoredCategory]
    deficits: SkillDeficits
    target_difficulty: Difficulty
    primary_focus: PrimaryDeficit
    is_new_user: bool


# ============================================================================
# LEARNING PATH
# ============================================================================

class LearningPriority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LearningTimeframe(str, Enum):
    IMMEDIATE = "immediate"
    SHORT_TERM = "short-term"
    LONG_TERM = "long-term"


class LearningStep(BaseModel):
    """One stage of a learning path."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    priority: LearningPriority
    timeframe: LearningTimeframe
    estimated_duration: str
    resources: list[Resource] = Field(default_factory=list, max_length=2)
    completion_criteria: str
    next_steps: list[str] = Field(default_factory=list)


class LearningPath(BaseModel):
    """Ordered foundation -> practice -> application -> mastery sequence."""

    model_config = ConfigDict(frozen=True)

    path_id: str
    title: str
    description: str
    total_duration: str
    primary_weakness: str
    steps: list[LearningStep]
    milestones: list[str] = Field(default_factory=list)
    success_metrics: list[str] = Field(default_factory=list)


# ============================================================================
# RECOMMENDATION OUTPUT
# ============================================================================

class PrimaryFocus(BaseModel):
    """The skill to work on next, with a severity label."""

    model_config = ConfigDict(frozen=True)

    skill: Skill
    label: str
    severity: str
    self_identified: bool = False

    @property
    def display(self) -> str:
        return f"{self.label} ({self.severity})"


class ProgressInsights(BaseModel):
    """Trend summary for the dashboard."""

    model_config = ConfigDict(frozen=True)

    trend: str
    momentum: str
    next_milestone: str


class NextAction(BaseModel):
    """Call to action shown with the recommendation."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str


class RecommendationOutput(BaseModel):
    """Complete recommendation for one profile/analytics snapshot."""

    model_config = ConfigDict(frozen=True)

    # Primary recommendation
    primary_focus: PrimaryFocus
    suggested_role: QuestionRole
    suggested_difficulty: Difficulty
    suggested_type: str

    # Urgency and explanation
    urgency_level: UrgencyLevel
    urgency_score: float
    explanation: str
    next_action: NextAction

    # Resources and learning
    recommended_resources: list[Resource]
    learning_path: LearningPath

    # Session configuration
    session_config: SessionConfig

    # Progress insights
    progress_insights: ProgressInsights

"""
User profile and performance models for InterviewAce

Defines the strict taxonomy collected during onboarding:
- Experience levels
- Domains of interest
- Interview goals
- Self-identified weak areas

Constraints are enforced when the models are built, at the collaborator
boundary. The recommendation algorithms assume already-validated values.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ExperienceLevel(str, Enum):
    """Professional experience categories."""

    STUDENT = "student"  # Currently studying or recent graduate
    FRESHER = "fresher"  # 0-1 years
    JUNIOR = "junior"    # 1-3 years
    SENIOR = "senior"    # 3+ years

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class UserDomain(str, Enum):
    """Technical domains a user can pick during onboarding."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    FULLSTACK = "fullstack"
    DATA_SCIENCE = "data-science"
    DEVOPS = "devops"
    MOBILE = "mobile"
    MACHINE_LEARNING = "machine-learning"
    SYSTEM_DESIGN = "system-design"
    CYBERSECURITY = "cybersecurity"
    CLOUD = "cloud"


class InterviewGoal(str, Enum):
    """Interview preparation objectives."""

    PRACTICE_TECHNICAL_SKILLS = "practice-technical-skills"
    IMPROVE_COMMUNICATION = "improve-communication"
    PREPARE_FOR_JOB_INTERVIEWS = "prepare-for-job-interviews"
    BUILD_CONFIDENCE = "build-confidence"
    LEARN_NEW_CONCEPTS = "learn-new-concepts"
    BENCHMARK_SKILLS = "benchmark-skills"
    GET_FEEDBACK = "get-feedback"
    MOCK_INTERVIEW_PRACTICE = "mock-interview-practice"


class WeakArea(str, Enum):
    """Self-identified areas for improvement. Values double as resource category ids."""

    ALGORITHM_DESIGN = "algorithm-design"
    SYSTEM_ARCHITECTURE = "system-architecture"
    CODE_OPTIMIZATION = "code-optimization"
    DATABASE_DESIGN = "database-design"
    API_DESIGN = "api-design"
    TESTING_STRATEGIES = "testing-strategies"
    DEBUGGING_SKILLS = "debugging-skills"
    COMMUNICATION_CLARITY = "communication-clarity"
    CONFIDENCE_BUILDING = "confidence-building"
    TIME_MANAGEMENT = "time-management"


class ScoreTrend(str, Enum):
    """Direction of recent session scores."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class Skill(str, Enum):
    """Tracked skills, in tie-break order."""

    TECHNICAL = "technical"
    COMMUNICATION = "communication"
    CONFIDENCE = "confidence"
    CLARITY = "clarity"


class UserProfile(BaseModel):
    """Onboarding profile supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    experience_level: ExperienceLevel = Field(..., description="Professional experience level")
    domains: list[UserDomain] = Field(
        ..., min_length=1, max_length=5,
        description="Technical domains of interest"
    )
    interview_goals: list[InterviewGoal] = Field(
        default_factory=list, max_length=5,
        description="Interview preparation objectives"
    )
    confidence_level: int = Field(
        ..., ge=1, le=5,
        description="Self-assessed confidence level (1-5)"
    )
    weak_areas: list[WeakArea] = Field(
        default_factory=list,
        description="Areas for improvement (optional)"
    )


class SkillBreakdown(BaseModel):
    """Average 0-10 score per tracked skill."""

    model_config = ConfigDict(frozen=True)

    technical: float = Field(default=0.0, ge=0, le=10)
    communication: float = Field(default=0.0, ge=0, le=10)
    confidence: float = Field(default=0.0, ge=0, le=10)
    clarity: float = Field(default=0.0, ge=0, le=10)

    def get(self, skill: Skill) -> float:
        return getattr(self, skill.value)

    def items(self) -> list[tuple[Skill, float]]:
        """Skill/score pairs in fixed skill order."""
        return [(skill, self.get(skill)) for skill in Skill]

    @property
    def mean(self) -> float:
        return sum(score for _, score in self.items()) / len(Skill)


class AnalyticsSnapshot(BaseModel):
    """Aggregated performance history supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    total_sessions: int = Field(default=0, ge=0)
    average_score: float = Field(default=0.0, ge=0, le=100)
    skill_breakdown: SkillBreakdown = Field(default_factory=SkillBreakdown)
    score_trend: ScoreTrend = ScoreTrend.STABLE
    recent_performance: list[float] = Field(
        default_factory=list,
        description="Most recent session scores, oldest first"
    )

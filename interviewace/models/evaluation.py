"""
Evaluation models for InterviewAce

Defines the scoring structures produced by the deterministic
answer-evaluation engine.

Two scales are in play:
- Raw scores (0-100): the only internal representation, produced by scorers
- Subscores (0-10): produced once, at the result boundary
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


WEIGHT_TOLERANCE = 1e-6


class Dimension(str, Enum):
    """Evaluation dimensions, in tie-break order."""

    RELEVANCE = "relevance"
    CLARITY = "clarity"
    TECHNICAL = "technical"
    CONFIDENCE = "confidence"
    STRUCTURE = "structure"


class InterviewType(str, Enum):
    """Interview/question categories."""

    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    HR = "hr"
    SYSTEM_DESIGN = "system-design"


class FeedbackSource(str, Enum):
    """Where the feedback text of a result came from."""

    TEMPLATE = "template"
    AI = "ai"


class EvaluationWeights(BaseModel):
    """Weights applied to the five dimensions when computing the overall score."""

    model_config = ConfigDict(frozen=True)

    relevance: float = Field(default=0.30, ge=0)
    clarity: float = Field(default=0.20, ge=0)
    technical: float = Field(default=0.25, ge=0)
    confidence: float = Field(default=0.15, ge=0)
    structure: float = Field(default=0.10, ge=0)

    @model_validator(mode="after")
    def _check_sum(self) -> "EvaluationWeights":
        if abs(self.total - 1.0) > WEIGHT_TOLERANCE:
            raise ValueError(f"Evaluation weights must sum to 1.0, got {self.total:.6f}")
        return self

    @property
    def total(self) -> float:
        return self.relevance + self.clarity + self.technical + self.confidence + self.structure

    def weight_for(self, dimension: Dimension) -> float:
        return getattr(self, dimension.value)


DEFAULT_WEIGHTS = EvaluationWeights()


class RawScores(BaseModel):
    """Raw 0-100 scores for one answer, one per dimension."""

    model_config = ConfigDict(frozen=True)

    relevance: int = Field(..., ge=0, le=100)
    clarity: int = Field(..., ge=0, le=100)
    technical: int = Field(..., ge=0, le=100)
    confidence: int = Field(..., ge=0, le=100)
    structure: int = Field(..., ge=0, le=100)

    def get(self, dimension: Dimension) -> int:
        return getattr(self, dimension.value)

    def items(self) -> list[tuple[Dimension, int]]:
        """Dimension/score pairs in fixed dimension order."""
        return [(dimension, self.get(dimension)) for dimension in Dimension]

    def weighted(self, weights: EvaluationWeights = DEFAULT_WEIGHTS) -> float:
        """Weighted raw overall on the 0-100 scale."""
        return sum(score * weights.weight_for(dimension) for dimension, score in self.items())


class ScoreBreakdown(BaseModel):
    """Normalized 0-10 subscores exposed to callers."""

    model_config = ConfigDict(frozen=True)

    relevance: int = Field(..., ge=0, le=10, description="How directly the answer addresses the question")
    clarity: int = Field(..., ge=0, le=10, description="Sentence length and answer length balance")
    technical: int = Field(..., ge=0, le=10, description="Use of domain terminology")
    confidence: int = Field(..., ge=0, le=10, description="Assertive versus hedging language")
    structure: int = Field(..., ge=0, le=10, description="Sequencing, STAR markers and logical flow")


class EvaluationContext(BaseModel):
    """Role and interview type the answer is evaluated against."""

    role: str = "general"
    type: str = InterviewType.TECHNICAL.value
    difficulty: str | None = None


class EvaluationMetadata(BaseModel):
    """Audit data attached to every evaluation."""

    model_config = ConfigDict(frozen=True)

    word_count: int = Field(..., ge=0)
    evaluation_method: str = "algorithmic"
    version: str


class EvaluationResult(BaseModel):
    """Complete evaluation of a single answer."""

    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown
    strengths: list[str] = Field(..., min_length=1)
    improvements: list[str] = Field(..., min_length=1, max_length=3)
    feedback: str
    feedback_source: FeedbackSource = FeedbackSource.TEMPLATE
    metadata: EvaluationMetadata


class QuestionAnswer(BaseModel):
    """A question/answer pair for batch evaluation."""

    question: str
    answer: str

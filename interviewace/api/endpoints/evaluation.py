"""
Evaluation API endpoints

Handles:
- Single answer evaluation
- Batch evaluation
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from interviewace.api.dependencies import get_ai_feedback, get_evaluation_engine
from interviewace.models.evaluation import (
    EvaluationContext,
    EvaluationResult,
    InterviewType,
    QuestionAnswer,
)

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class EvaluateAnswerRequest(BaseModel):
    """Request model for evaluating one answer."""
    question: str
    answer: str
    role: str = "general"
    type: InterviewType = InterviewType.TECHNICAL
    difficulty: str | None = None
    ai_feedback: bool = Field(default=False, description="Rewrite feedback with the AI layer if configured")


class BatchEvaluationRequest(BaseModel):
    """Request model for evaluating several answers."""
    pairs: list[QuestionAnswer] = Field(..., min_length=1)
    role: str = "general"
    type: InterviewType = InterviewType.TECHNICAL


class BatchEvaluationResponse(BaseModel):
    """Results in request order plus their mean overall score."""
    results: list[EvaluationResult]
    average_score: float


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/answer", response_model=EvaluationResult)
async def evaluate_answer(request: EvaluateAnswerRequest) -> EvaluationResult:
    """
    Evaluate a single answer.

    Scores are always deterministic. When `ai_feedback` is set and the AI
    layer is configured, only the feedback text is rewritten.
    """
    context = EvaluationContext(
        role=request.role,
        type=request.type.value,
        difficulty=request.difficulty,
    )

    try:
        result = get_evaluation_engine().evaluate(request.question, request.answer, context)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))

    if request.ai_feedback:
        ai_feedback = get_ai_feedback()
        if ai_feedback:
            result = await ai_feedback.enhance(request.question, request.answer, result, context)

    return result


@router.post("/batch", response_model=BatchEvaluationResponse)
async def evaluate_batch(request: BatchEvaluationRequest) -> BatchEvaluationResponse:
    """Evaluate several answers with a shared role and interview type."""
    context = EvaluationContext(role=request.role, type=request.type.value)

    try:
        results = get_evaluation_engine().evaluate_many(request.pairs, context)
    except Exception as e:
        raise HTTPException(status_code=400, detail=str(e))

    average = sum(result.overall_score for result in results) / len(results)

    return BatchEvaluationResponse(results=results, average_score=round(average, 1))

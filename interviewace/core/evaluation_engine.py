"""
Evaluation Engine for InterviewAce

Deterministic, rule-based scoring of a single interview answer.
Same inputs always produce the same EvaluationResult; no network,
randomness or clock is involved.
"""

import logging

from interviewace.core.normalize import normalize_breakdown, normalize_overall
from interviewace.core.scorers import (
    score_clarity,
    score_confidence,
    score_relevance,
    score_structure,
    score_technical,
)
from interviewace.core.text import word_count
from interviewace.models.evaluation import (
    DEFAULT_WEIGHTS,
    Dimension,
    EvaluationContext,
    EvaluationMetadata,
    EvaluationResult,
    EvaluationWeights,
    FeedbackSource,
    InterviewType,
    QuestionAnswer,
    RawScores,
)
from interviewace.models.keywords import DEFAULT_KEYWORD_LIBRARY, KeywordLibrary

logger = logging.getLogger(__name__)


ENGINE_VERSION = "1.0.0"
EVALUATION_METHOD = "algorithmic"

STRENGTH_THRESHOLD = 75
IMPROVEMENT_THRESHOLD = 60
MIN_IMPROVEMENTS = 2
MAX_IMPROVEMENTS = 3


# ============================================================================
# RULE TABLES
# ============================================================================

# Ordered by Dimension; the first entry wins ties.
STRENGTH_RULES: dict[Dimension, str] = {
    Dimension.RELEVANCE: "Directly addressed the question with relevant information",
    Dimension.CLARITY: "Clear and well-structured explanation",
    Dimension.TECHNICAL: "Strong technical knowledge and terminology usage",
    Dimension.CONFIDENCE: "Confident delivery with concrete examples",
    Dimension.STRUCTURE: "Logical flow and organized presentation",
}

STRENGTH_FALLBACKS: dict[Dimension, str] = {
    Dimension.RELEVANCE: "Answer shows understanding of the question topic",
    Dimension.CLARITY: "Response has good readability",
    Dimension.TECHNICAL: "Uses some relevant technical concepts",
    Dimension.CONFIDENCE: "Shows effort in structuring the response",
    Dimension.STRUCTURE: "Shows effort in structuring the response",
}

IMPROVEMENT_RULES: dict[Dimension, str] = {
    Dimension.RELEVANCE: "Address the question more directly with specific examples",
    Dimension.CLARITY: "Break down complex ideas into clearer sentences",
    Dimension.TECHNICAL: "Include more domain-specific terminology and concepts",
    Dimension.CONFIDENCE: "Use more assertive language with concrete action verbs",
    Dimension.STRUCTURE: "Organize your response with a clear beginning, middle, and end",
}

IMPROVEMENT_FALLBACKS: dict[Dimension, str] = {
    Dimension.RELEVANCE: "Ensure all points directly relate to the question",
    Dimension.CLARITY: "Tighten your explanations to keep them easy to follow",
    Dimension.TECHNICAL: "Incorporate more specific technical details",
    Dimension.CONFIDENCE: "Describe your own contributions with concrete outcomes",
    Dimension.STRUCTURE: "Signpost the steps of your answer more explicitly",
}

GENERIC_IMPROVEMENT = "Practice explaining concepts with real-world examples"

FEEDBACK_BANDS: tuple[tuple[float, str], ...] = (
    (80, "Excellent response! You demonstrated strong understanding and communication skills. "),
    (65, "Good answer with solid fundamentals. "),
    (50, "Decent response, but there's room for improvement. "),
)
FEEDBACK_FLOOR = "Your answer needs more development. "


class EvaluationEngine:
    """
    Scores answers against a keyword library and a set of weights.

    Responsibilities:
    - Compute raw dimension scores
    - Normalize to subscores and an overall score
    - Derive strengths, improvements and feedback from the raw scores
    """

    def __init__(
        self,
        keyword_library: KeywordLibrary = DEFAULT_KEYWORD_LIBRARY,
        weights: EvaluationWeights = DEFAULT_WEIGHTS,
    ):
        """
        Initialize evaluation engine.

        Args:
            keyword_library: Role keyword table used for technical depth
            weights: Dimension weights for the overall score
        """
        self.keyword_library = keyword_library
        self.weights = weights

    # =========================================================================
    # EVALUATION
    # =========================================================================

    def evaluate(
        self,
        question: str,
        answer: str,
        context: EvaluationContext | None = None,
    ) -> EvaluationResult:
        """
        Evaluate a single answer.

        Args:
            question: Question text
            answer: Candidate answer text
            context: Role and interview type; defaults to general/technical

        Returns:
            Complete EvaluationResult
        """
        context = context or EvaluationContext()
        raw = self.score(question, answer, context)

        breakdown = normalize_breakdown(raw)
        overall = normalize_overall(breakdown, self.weights)

        result = EvaluationResult(
            overall_score=overall,
            breakdown=breakdown,
            strengths=self._identify_strengths(raw),
            improvements=self._identify_improvements(raw),
            feedback=self._generate_feedback(raw, context),
            feedback_source=FeedbackSource.TEMPLATE,
            metadata=EvaluationMetadata(
                word_count=word_count(answer),
                evaluation_method=EVALUATION_METHOD,
                version=ENGINE_VERSION,
            ),
        )

        logger.debug(
            f"Evaluated answer ({result.metadata.word_count} words) "
            f"for {context.role}/{context.type}: overall={overall}"
        )
        return result

    def evaluate_many(
        self,
        pairs: list[QuestionAnswer],
        context: EvaluationContext | None = None,
    ) -> list[EvaluationResult]:
        """Evaluate several question/answer pairs with a shared context."""
        return [self.evaluate(pair.question, pair.answer, context) for pair in pairs]

    def score(self, question: str, answer: str, context: EvaluationContext) -> RawScores:
        """Raw 0-100 score per dimension."""
        keywords = self.keyword_library.get_relevant_keywords(context.role, context.type)
        return RawScores(
            relevance=score_relevance(question, answer),
            clarity=score_clarity(answer),
            technical=score_technical(answer, keywords),
            confidence=score_confidence(answer),
            structure=score_structure(answer),
        )

    # =========================================================================
    # STRENGTHS / IMPROVEMENTS
    # =========================================================================

    def _identify_strengths(self, raw: RawScores) -> list[str]:
        strengths = [
            STRENGTH_RULES[dimension]
            for dimension, score in raw.items()
            if score >= STRENGTH_THRESHOLD
        ]
        if strengths:
            return strengths

        # max() keeps the first of equal scores, so dimension order breaks ties
        best, _ = max(raw.items(), key=lambda item: item[1])
        return [STRENGTH_FALLBACKS[best]]

    def _identify_improvements(self, raw: RawScores) -> list[str]:
        improvements = [
            IMPROVEMENT_RULES[dimension]
            for dimension, score in raw.items()
            if score < IMPROVEMENT_THRESHOLD
        ]

        if not improvements:
            worst, _ = min(raw.items(), key=lambda item: item[1])
            improvements.append(IMPROVEMENT_FALLBACKS[worst])

        while len(improvements) < MIN_IMPROVEMENTS:
            improvements.append(GENERIC_IMPROVEMENT)

        return improvements[:MAX_IMPROVEMENTS]

    # =========================================================================
    # FEEDBACK
    # =========================================================================

    def _generate_feedback(self, raw: RawScores, context: EvaluationContext) -> str:
        weighted = raw.weighted(self.weights)

        feedback = next(
            (text for threshold, text in FEEDBACK_BANDS if weighted >= threshold),
            FEEDBACK_FLOOR,
        )

        if raw.technical < IMPROVEMENT_THRESHOLD and context.type == InterviewType.TECHNICAL.value:
            feedback += "Focus on including more technical details and specific technologies. "

        if raw.structure < IMPROVEMENT_THRESHOLD and context.type == InterviewType.BEHAVIORAL.value:
            feedback += "Try using the STAR format (Situation, Task, Action, Result) for behavioral questions. "

        if raw.relevance < IMPROVEMENT_THRESHOLD:
            feedback += "Make sure to directly address what the question is asking. "

        if raw.clarity < IMPROVEMENT_THRESHOLD:
            feedback += "Work on making your explanations clearer and more concise. "

        return feedback.strip()


DEFAULT_ENGINE = EvaluationEngine()


def evaluate_answer(
    question: str,
    answer: str,
    context: EvaluationContext | None = None,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
    keyword_library: KeywordLibrary = DEFAULT_KEYWORD_LIBRARY,
) -> EvaluationResult:
    """Evaluate one answer with the given weights and keyword library."""
    if weights is DEFAULT_WEIGHTS and keyword_library is DEFAULT_KEYWORD_LIBRARY:
        return DEFAULT_ENGINE.evaluate(question, answer, context)
    return EvaluationEngine(keyword_library, weights).evaluate(question, answer, context)


def evaluate_multiple_answers(
    pairs: list[QuestionAnswer],
    context: EvaluationContext | None = None,
    weights: EvaluationWeights = DEFAULT_WEIGHTS,
) -> list[EvaluationResult]:
    """Evaluate several answers in order."""
    return EvaluationEngine(weights=weights).evaluate_many(pairs, context)


def with_feedback(
    result: EvaluationResult,
    feedback: str,
    source: FeedbackSource = FeedbackSource.AI,
) -> EvaluationResult:
    """
    Replace the feedback text of a result.

    Scores, strengths and improvements are left untouched. Blank text
    keeps the original result.
    """
    text = feedback.strip()
    if not text:
        return result
    return result.model_copy(update={"feedback": text, "feedback_source": source})

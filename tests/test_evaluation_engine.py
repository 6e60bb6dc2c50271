"""
Tests for interviewace.core.evaluation_engine

Covers:
- End-to-end scenarios (strong technical, hedging, STAR behavioral)
- Empty answer boundary
- Idempotence and score ranges
- Strength / improvement rule tables and tie-breaks
- Feedback bands and clauses
- Batch evaluation and feedback substitution
"""

import pytest

from interviewace.core.evaluation_engine import (
    GENERIC_IMPROVEMENT,
    EvaluationEngine,
    evaluate_answer,
    evaluate_multiple_answers,
    with_feedback,
)
from interviewace.models.evaluation import (
    EvaluationContext,
    FeedbackSource,
    QuestionAnswer,
    RawScores,
)
from interviewace.models.keywords import KeywordLibrary


REACT_QUESTION = "Explain how React's useEffect hook works and when you would use it."
REACT_ANSWER = (
    "I implemented the useEffect hook in a React dashboard to fetch data after the component renders. "
    "First, the effect runs after every render unless you pass a dependency array, so I listed only "
    "the state and props it needs. Then I added a cleanup function that cancels subscriptions and "
    "timers, because stale listeners caused memory leaks. As a result, I optimized the lifecycle "
    "handling and improved performance by avoiding unnecessary network calls. The outcome was a "
    "faster page that successfully passed our code review."
)

SQL_QUESTION = "What is the difference between SQL and NoSQL databases? When would you use each?"
HEDGING_ANSWER = (
    "I think maybe it depends. I'm not sure, but probably one is kind of older. "
    "I guess I would try to pick whatever the team already knows."
)

BEHAVIORAL_QUESTION = "Tell me about a time you resolved a conflict within your team."
STAR_ANSWER = (
    "The situation was a missed release deadline on my team. My task was to get the launch back "
    "on track. First, I met each engineer to understand the blockers. Then I split the work into "
    "smaller milestones and reviewed progress daily. Finally, the result was that we shipped two "
    "days early, because everyone had clear ownership."
)

FRONTEND_TECHNICAL = EvaluationContext(role="frontend", type="technical")


@pytest.fixture
def engine() -> EvaluationEngine:
    return EvaluationEngine()


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_strong_technical_answer(self):
        result = evaluate_answer(REACT_QUESTION, REACT_ANSWER, FRONTEND_TECHNICAL)

        assert result.overall_score >= 65
        assert result.breakdown.technical >= 6
        assert result.breakdown.confidence >= 6
        assert result.feedback.startswith("Good answer") or result.feedback.startswith("Excellent")
        assert "Confident delivery with concrete examples" in result.strengths

    def test_hedging_answer(self):
        context = EvaluationContext(role="backend", type="technical")
        result = evaluate_answer(SQL_QUESTION, HEDGING_ANSWER, context)

        assert result.overall_score < 50
        assert len(result.improvements) >= 2
        assert "Include more domain-specific terminology and concepts" in result.improvements
        assert "Focus on including more technical details" in result.feedback

    def test_star_behavioral_answer(self):
        context = EvaluationContext(role="general", type="behavioral")
        result = evaluate_answer(BEHAVIORAL_QUESTION, STAR_ANSWER, context)

        assert result.breakdown.structure >= 7
        assert "Logical flow and organized presentation" in result.strengths
        assert "STAR format" not in result.feedback


# ---------------------------------------------------------------------------
# Boundaries and invariants
# ---------------------------------------------------------------------------


class TestInvariants:
    def test_empty_answer(self):
        result = evaluate_answer(REACT_QUESTION, "", FRONTEND_TECHNICAL)

        assert result.overall_score <= 30
        assert result.improvements
        assert result.strengths == ["Shows effort in structuring the response"]
        assert result.metadata.word_count == 0

    def test_empty_question_and_answer(self):
        result = evaluate_answer("", "")
        assert result.breakdown.relevance == 0
        assert 0 <= result.overall_score <= 100

    @pytest.mark.parametrize("answer", ["", "ok", HEDGING_ANSWER, REACT_ANSWER, STAR_ANSWER * 5])
    def test_ranges(self, answer):
        result = evaluate_answer(REACT_QUESTION, answer, FRONTEND_TECHNICAL)

        for value in result.breakdown.model_dump().values():
            assert 0 <= value <= 10
        assert 0 <= result.overall_score <= 100
        assert len(result.strengths) >= 1
        assert 2 <= len(result.improvements) <= 3

    def test_idempotent(self):
        first = evaluate_answer(REACT_QUESTION, REACT_ANSWER, FRONTEND_TECHNICAL)
        second = evaluate_answer(REACT_QUESTION, REACT_ANSWER, FRONTEND_TECHNICAL)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_metadata(self):
        result = evaluate_answer(REACT_QUESTION, REACT_ANSWER, FRONTEND_TECHNICAL)

        assert result.metadata.evaluation_method == "algorithmic"
        assert result.metadata.version == "1.0.0"
        assert result.metadata.word_count == 84
        assert result.feedback_source == FeedbackSource.TEMPLATE

    def test_injected_keyword_library(self):
        engine = EvaluationEngine(keyword_library=KeywordLibrary({"frontend": ("zebra",)}))
        result = engine.evaluate("Describe a zebra", "A zebra has stripes.", FRONTEND_TECHNICAL)

        assert result.breakdown.technical == 5


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------


class TestRules:
    def test_strength_fallback_prefers_first_dimension_on_ties(self, engine):
        raw = RawScores(relevance=50, clarity=50, technical=50, confidence=50, structure=50)
        assert engine._identify_strengths(raw) == ["Answer shows understanding of the question topic"]

    def test_strength_fallback_uses_highest(self, engine):
        raw = RawScores(relevance=10, clarity=20, technical=70, confidence=30, structure=40)
        assert engine._identify_strengths(raw) == ["Uses some relevant technical concepts"]

    def test_strengths_follow_dimension_order(self, engine):
        raw = RawScores(relevance=90, clarity=10, technical=80, confidence=10, structure=75)
        assert engine._identify_strengths(raw) == [
            "Directly addressed the question with relevant information",
            "Strong technical knowledge and terminology usage",
            "Logical flow and organized presentation",
        ]

    def test_improvement_fallback_when_everything_is_good(self, engine):
        raw = RawScores(relevance=80, clarity=90, technical=70, confidence=85, structure=95)
        assert engine._identify_improvements(raw) == [
            "Incorporate more specific technical details",
            GENERIC_IMPROVEMENT,
        ]

    def test_improvement_fallback_tie_break(self, engine):
        raw = RawScores(relevance=80, clarity=80, technical=80, confidence=80, structure=80)
        assert engine._identify_improvements(raw)[0] == "Ensure all points directly relate to the question"

    def test_single_improvement_is_padded(self, engine):
        raw = RawScores(relevance=80, clarity=40, technical=80, confidence=80, structure=80)
        assert engine._identify_improvements(raw) == [
            "Break down complex ideas into clearer sentences",
            GENERIC_IMPROVEMENT,
        ]

    def test_improvements_capped_at_three(self, engine):
        raw = RawScores(relevance=0, clarity=0, technical=0, confidence=0, structure=0)
        assert engine._identify_improvements(raw) == [
            "Address the question more directly with specific examples",
            "Break down complex ideas into clearer sentences",
            "Include more domain-specific terminology and concepts",
        ]


class TestFeedback:
    def test_excellent_band(self, engine):
        raw = RawScores(relevance=90, clarity=90, technical=90, confidence=90, structure=90)
        feedback = engine._generate_feedback(raw, EvaluationContext())
        assert feedback == "Excellent response! You demonstrated strong understanding and communication skills."

    def test_good_band(self, engine):
        raw = RawScores(relevance=70, clarity=70, technical=70, confidence=70, structure=70)
        assert engine._generate_feedback(raw, EvaluationContext()) == "Good answer with solid fundamentals."

    def test_behavioral_structure_clause(self, engine):
        raw = RawScores(relevance=70, clarity=70, technical=70, confidence=70, structure=30)
        feedback = engine._generate_feedback(raw, EvaluationContext(type="behavioral"))
        assert feedback.startswith("Good answer")
        assert "STAR format (Situation, Task, Action, Result)" in feedback

    def test_clauses_in_order(self, engine):
        raw = RawScores(relevance=10, clarity=10, technical=10, confidence=10, structure=10)
        feedback = engine._generate_feedback(raw, EvaluationContext(type="technical"))
        assert feedback == (
            "Your answer needs more development. "
            "Focus on including more technical details and specific technologies. "
            "Make sure to directly address what the question is asking. "
            "Work on making your explanations clearer and more concise."
        )


# ---------------------------------------------------------------------------
# Batch and feedback substitution
# ---------------------------------------------------------------------------


def test_evaluate_multiple_answers_matches_single_calls():
    pairs = [
        QuestionAnswer(question=REACT_QUESTION, answer=REACT_ANSWER),
        QuestionAnswer(question=SQL_QUESTION, answer=HEDGING_ANSWER),
    ]
    results = evaluate_multiple_answers(pairs, FRONTEND_TECHNICAL)

    assert results == [
        evaluate_answer(REACT_QUESTION, REACT_ANSWER, FRONTEND_TECHNICAL),
        evaluate_answer(SQL_QUESTION, HEDGING_ANSWER, FRONTEND_TECHNICAL),
    ]


def test_with_feedback_keeps_scores():
    result = evaluate_answer(REACT_QUESTION, REACT_ANSWER, FRONTEND_TECHNICAL)
    updated = with_feedback(result, "  Nice work on the cleanup function.  ")

    assert updated.feedback == "Nice work on the cleanup function."
    assert updated.feedback_source == FeedbackSource.AI
    assert updated.breakdown == result.breakdown
    assert updated.overall_score == result.overall_score
    assert updated.improvements == result.improvements


def test_with_feedback_ignores_blank_text():
    result = evaluate_answer(REACT_QUESTION, REACT_ANSWER, FRONTEND_TECHNICAL)
    assert with_feedback(result, "   ") is result

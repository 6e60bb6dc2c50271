"""
AI Feedback Prompt Templates

Prompts asking a language model to rephrase the deterministic evaluation
as conversational coaching. The model never changes scores; it only
writes the feedback paragraph.
"""

from interviewace.models.evaluation import EvaluationContext, EvaluationResult


class FeedbackPrompts:
    """
    Prompt templates for AI-written answer feedback.

    Key principles:
    - Scores are fixed and quoted, never re-derived
    - Feedback stays short and actionable
    - Output is a single JSON object
    """

    SYSTEM_CONTEXT = """You are a supportive interview coach reviewing a candidate's practice answer.

Your role:
- Explain the scores you are given in plain language
- Point out one or two concrete things the candidate did well
- Suggest the single most useful next improvement

Do not invent new scores and do not contradict the ones provided.
"""

    def generate_feedback_prompt(
        self,
        question: str,
        answer: str,
        result: EvaluationResult,
        context: EvaluationContext,
    ) -> str:
        """Generate prompt for rewriting evaluation feedback."""

        breakdown = result.breakdown
        strengths = "\n".join(f"- {item}" for item in result.strengths)
        improvements = "\n".join(f"- {item}" for item in result.improvements)

        prompt = f"""{self.SYSTEM_CONTEXT}

=== CONTEXT ===
Role: {context.role}
Interview Type: {context.type}

=== QUESTION ===
{question}

=== CANDIDATE'S ANSWER ===
"{answer}"

=== SCORES (fixed) ===
Overall: {result.overall_score}/100
Relevance: {breakdown.relevance}/10
Clarity: {breakdown.clarity}/10
Technical: {breakdown.technical}/10
Confidence: {breakdown.confidence}/10
Structure: {breakdown.structure}/10

=== STRENGTHS ===
{strengths}

=== IMPROVEMENTS ===
{improvements}

=== YOUR TASK ===
Write 2-4 sentences of feedback addressed to the candidate.

IMPORTANT: Output ONLY valid JSON, no preamble text. Start directly with {{

{{
    "feedback": "<your feedback>"
}}"""

        return prompt

"""
AI Feedback Layer for InterviewAce

Optional collaborator that asks an OpenAI-compatible chat endpoint
(OpenRouter by default) to rewrite the feedback paragraph of a
deterministic evaluation. Scores are never touched; on any failure the
templated feedback is kept.
"""

import json
import logging

import httpx

from interviewace.config.settings import Settings, get_settings
from interviewace.core.evaluation_engine import with_feedback
from interviewace.models.evaluation import EvaluationContext, EvaluationResult, FeedbackSource
from interviewace.prompts.feedback import FeedbackPrompts

logger = logging.getLogger(__name__)


class AIFeedbackError(Exception):
    """Raised when the AI endpoint fails or returns unusable content."""
    pass


class AIFeedbackLayer:
    """
    AI feedback component using an OpenAI-compatible chat completions API.

    The layer is inert unless AI feedback is enabled and an API key is
    configured; `enhance` then returns results unchanged.
    """

    def __init__(self, settings: Settings | None = None, client: httpx.AsyncClient | None = None):
        """
        Initialize AI feedback layer.

        Args:
            settings: Application settings (defaults to cached settings)
            client: Preconfigured HTTP client, mainly for tests
        """
        self.settings = settings or get_settings()
        self.headers = {
            "Authorization": f"Bearer {self.settings.openrouter_api_key}",
            "Content-Type": "application/json",
            "X-Title": self.settings.app_name,
        }

        self.client = client or httpx.AsyncClient(
            base_url=self.settings.openrouter_base_url.rstrip("/"),
            headers=self.headers,
            timeout=self.settings.ai_timeout_seconds,
        )

        self.prompts = FeedbackPrompts()

    @property
    def enabled(self) -> bool:
        return self.settings.ai_feedback_configured

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    # =========================================================================
    # CORE AI OPERATIONS
    # =========================================================================

    def _extract_content(self, result: dict) -> str:
        """Extract text content from API response, handling list/dict formats."""
        choices = result.get("choices") or [{}]
        content = choices[0].get("message", {}).get("content", "")

        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(part["text"])
            content = "".join(text_parts)

        return content if isinstance(content, str) else str(content)

    def _parse_feedback(self, content: str) -> str:
        """
        Pull the feedback string out of a model reply.

        Accepts clean JSON, JSON wrapped in prose or code fences, or plain
        text as a last resort.
        """
        first_brace = content.find("{")
        last_brace = content.rfind("}")

        if first_brace != -1 and last_brace > first_brace:
            try:
                parsed = json.loads(content[first_brace:last_brace + 1])
            except json.JSONDecodeError:
                logger.warning("AI feedback JSON could not be parsed, using raw text")
            else:
                feedback = parsed.get("feedback") if isinstance(parsed, dict) else None
                if isinstance(feedback, str) and feedback.strip():
                    return feedback.strip()

        text = content.replace("```json", "").replace("```", "").strip()
        if not text:
            raise AIFeedbackError("Empty response content")
        return text

    async def _call_model(self, prompt: str) -> str:
        """
        Send a single-turn chat completion.

        Args:
            prompt: The prompt to send

        Returns:
            Model response text
        """
        payload = {
            "model": self.settings.ai_model,
            "messages": [
                {"role": "user", "content": prompt}
            ],
            "max_tokens": self.settings.ai_max_tokens,
            "temperature": 0.4,
            "stream": False,
        }

        try:
            response = await self.client.post("/chat/completions", json=payload)
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPError as e:
            logger.error(f"AI feedback API error: {e}")
            raise AIFeedbackError(str(e)) from e
        except ValueError as e:
            raise AIFeedbackError(f"Invalid JSON from AI endpoint: {e}") from e

        content = self._extract_content(result)
        if not content.strip():
            raise AIFeedbackError("No response content returned")
        return content

    # =========================================================================
    # FEEDBACK
    # =========================================================================

    async def generate_feedback(
        self,
        question: str,
        answer: str,
        result: EvaluationResult,
        context: EvaluationContext | None = None,
    ) -> str:
        """Ask the model for a feedback paragraph; raises AIFeedbackError on failure."""
        context = context or EvaluationContext()
        prompt = self.prompts.generate_feedback_prompt(question, answer, result, context)
        content = await self._call_model(prompt)
        return self._parse_feedback(content)

    async def enhance(
        self,
        question: str,
        answer: str,
        result: EvaluationResult,
        context: EvaluationContext | None = None,
    ) -> EvaluationResult:
        """
        Return the result with AI-written feedback, or unchanged.

        Args:
            question: Question text
            answer: Candidate answer text
            result: Deterministic evaluation
            context: Evaluation context

        Returns:
            EvaluationResult with identical scores
        """
        if not self.enabled:
            return result

        try:
            feedback = await self.generate_feedback(question, answer, result, context)
        except AIFeedbackError as e:
            logger.warning(f"AI feedback unavailable, keeping template feedback: {e}")
            return result

        logger.info("Applied AI feedback to evaluation result")
        return with_feedback(result, feedback, FeedbackSource.AI)

"""
Tests for interviewace.core.ai_feedback

Covers:
- Disabled layer is a no-op
- Successful rewrite keeps scores and marks the source
- HTTP and content failures fall back to template feedback
- Reply parsing (JSON, fenced JSON, plain text, content parts)
"""

import json

import httpx
import pytest

from interviewace.config.settings import Settings
from interviewace.core.ai_feedback import AIFeedbackError, AIFeedbackLayer
from interviewace.core.evaluation_engine import evaluate_answer
from interviewace.models.evaluation import EvaluationContext, FeedbackSource


QUESTION = "What is database indexing?"
ANSWER = "An index is a data structure that speeds up lookups. First the query planner checks it."
CONTEXT = EvaluationContext(role="backend", type="technical")


def _enabled_settings() -> Settings:
    return Settings(ai_feedback_enabled=True, openrouter_api_key="test-key")


def _layer(handler, settings: Settings | None = None) -> AIFeedbackLayer:
    client = httpx.AsyncClient(
        base_url="https://ai.test/api/v1",
        transport=httpx.MockTransport(handler),
    )
    return AIFeedbackLayer(settings or _enabled_settings(), client=client)


def _reply(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def result():
    return evaluate_answer(QUESTION, ANSWER, CONTEXT)


# ---------------------------------------------------------------------------
# enhance
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_disabled_layer_returns_result_unchanged(result):
    def handler(request):
        raise AssertionError("no request expected")

    layer = _layer(handler, Settings(ai_feedback_enabled=True, openrouter_api_key=""))

    assert layer.enabled is False
    assert await layer.enhance(QUESTION, ANSWER, result, CONTEXT) is result
    await layer.close()


@pytest.mark.asyncio
async def test_enhance_rewrites_feedback_only(result):
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_reply('{"feedback": "Solid definition; add a trade-off."}'))

    layer = _layer(handler)
    enhanced = await layer.enhance(QUESTION, ANSWER, result, CONTEXT)
    await layer.close()

    assert seen["path"].endswith("/chat/completions")
    assert seen["body"]["stream"] is False
    assert QUESTION in seen["body"]["messages"][0]["content"]

    assert enhanced.feedback == "Solid definition; add a trade-off."
    assert enhanced.feedback_source == FeedbackSource.AI
    assert enhanced.breakdown == result.breakdown
    assert enhanced.overall_score == result.overall_score
    assert enhanced.strengths == result.strengths


@pytest.mark.asyncio
async def test_http_error_keeps_template(result):
    layer = _layer(lambda request: httpx.Response(500, json={"error": "boom"}))
    enhanced = await layer.enhance(QUESTION, ANSWER, result, CONTEXT)
    await layer.close()

    assert enhanced is result
    assert enhanced.feedback_source == FeedbackSource.TEMPLATE


@pytest.mark.asyncio
async def test_empty_content_keeps_template(result):
    layer = _layer(lambda request: httpx.Response(200, json=_reply("   ")))
    enhanced = await layer.enhance(QUESTION, ANSWER, result, CONTEXT)
    await layer.close()

    assert enhanced is result


@pytest.mark.asyncio
async def test_invalid_json_body_raises(result):
    layer = _layer(lambda request: httpx.Response(200, content=b"not json"))

    with pytest.raises(AIFeedbackError):
        await layer.generate_feedback(QUESTION, ANSWER, result, CONTEXT)
    await layer.close()


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParsing:
    @pytest.fixture
    def layer(self):
        return AIFeedbackLayer(_enabled_settings(), client=httpx.AsyncClient())

    def test_fenced_json(self, layer):
        content = 'Here you go:\n```json\n{"feedback": "Be more specific."}\n```'
        assert layer._parse_feedback(content) == "Be more specific."

    def test_plain_text(self, layer):
        assert layer._parse_feedback("  Good structure overall.  ") == "Good structure overall."

    def test_empty_raises(self, layer):
        with pytest.raises(AIFeedbackError):
            layer._parse_feedback("```json\n```")

    def test_content_parts(self, layer):
        result = _reply([{"type": "text", "text": "Nice "}, "answer."])
        assert layer._extract_content(result) == "Nice answer."

    def test_missing_choices(self, layer):
        assert layer._extract_content({}) == ""

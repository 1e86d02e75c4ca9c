# test/test_flow.py
import pytest
from typing import Any, Dict, List

from finsafe.runtime.flow import make_advisor_flow, make_scam_check_flow, make_scam_alert_flow
from finsafe.runtime.classify import DEFAULT_SAFETY_TIPS
from finsafe.services.gemini_client import GeminiError
from finsafe.services.openai_client import Completion, OpenAIError


# -----------------------------
# Fakes
# -----------------------------
class FakeOpenAIClient:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: List[Dict[str, Any]] = []

    async def chat(self, *, messages, temperature, extra=None) -> Completion:
        self.calls.append({"messages": messages, "temperature": temperature})
        if self.fail:
            raise OpenAIError("HTTP 401: invalid api key")
        return Completion(text="Track every rupee for a month.", model="gpt-3.5-turbo", total_tokens=88)


class FakeGeminiClient:
    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


# -----------------------------
# Advisor flow
# -----------------------------
@pytest.mark.asyncio
async def test_advisor_flow_ai_path():
    client = FakeOpenAIClient()
    shared: Dict[str, Any] = {"input_text": "How do I budget?", "openai_client": client}

    action = await make_advisor_flow().run_async(shared)

    assert action == "ok"
    assert len(client.calls) == 1
    assert shared["response"] == {
        "reply": "Track every rupee for a month.",
        "mode": "ai",
        "model": "gpt-3.5-turbo",
        "tokens": 88,
    }


@pytest.mark.asyncio
async def test_advisor_flow_mock_mode_uses_knowledge_base():
    shared: Dict[str, Any] = {"input_text": "How do I budget?", "openai_client": None}

    action = await make_advisor_flow().run_async(shared)

    assert action == "ok"
    response = shared["response"]
    assert response["mode"] == "enhanced_mock"
    assert "Simple Budgeting for Students" in response["reply"]
    assert response["note"] == "Providing detailed financial guidance from our knowledge base."
    assert "model" not in response


@pytest.mark.asyncio
async def test_advisor_flow_provider_failure_falls_back():
    client = FakeOpenAIClient(fail=True)
    shared: Dict[str, Any] = {"input_text": "what is an emergency fund", "openai_client": client}

    action = await make_advisor_flow().run_async(shared)

    assert action == "ok"
    assert len(client.calls) == 1  # single attempt, no retries
    assert shared["response"]["mode"] == "enhanced_mock"
    assert shared["response"]["reply"]
    assert "invalid api key" not in shared["response"]["reply"]


# -----------------------------
# Scam flows
# -----------------------------
@pytest.mark.asyncio
async def test_scam_check_flow_parses_alert_block():
    client = FakeGeminiClient(
        reply=(
            "⚠️ Scam Alert\n"
            "Explanation: Suspicious request for a registration fee.\n"
            "Safety Tips:\n"
            "• Never pay to get a job\n"
            "• Verify the company on its official site\n"
        )
    )
    shared: Dict[str, Any] = {"input_text": "Pay 2000 to confirm your internship", "gemini_client": client}

    action = await make_scam_check_flow().run_async(shared)

    assert action == "ok"
    assert '"Pay 2000 to confirm your internship"' in client.prompts[0]
    result = shared["result"]
    assert result["verdict"] == "Suspicious"
    assert result["badgeClass"] == "warning"
    assert result["explanation"] == "Suspicious request for a registration fee."
    assert result["safetyTips"] == ["Never pay to get a job", "Verify the company on its official site"]


@pytest.mark.asyncio
async def test_scam_check_flow_plain_answer_defaults():
    client = FakeGeminiClient(reply="Hi! How can I help you today?")
    shared: Dict[str, Any] = {"input_text": "hello", "gemini_client": client}

    await make_scam_check_flow().run_async(shared)

    result = shared["result"]
    assert result["verdict"] == "Possibly Safe"
    assert result["explanation"] == ""
    assert result["safetyTips"] == list(DEFAULT_SAFETY_TIPS)


@pytest.mark.asyncio
async def test_scam_alert_flow_uses_raw_text():
    client = FakeGeminiClient(
        reply="⚠️ Scam Alert\nThis message appears to be a financial scam.\nReason: probably phishing."
    )
    shared: Dict[str, Any] = {"input_text": "click this link to unblock", "gemini_client": client}

    await make_scam_alert_flow().run_async(shared)

    assert "Reason:" in client.prompts[0]
    assert shared["result"]["verdict"] == "Likely Scam"
    assert shared["result"]["badgeClass"] == "danger"
    assert shared["result"]["reply"].startswith("⚠️ Scam Alert")


@pytest.mark.asyncio
async def test_scam_check_flow_surfaces_provider_error():
    client = FakeGeminiClient(error=GeminiError("HTTP 500: upstream"))
    shared: Dict[str, Any] = {"input_text": "hello", "gemini_client": client}

    with pytest.raises(GeminiError):
        await make_scam_check_flow().run_async(shared)
    assert "result" not in shared

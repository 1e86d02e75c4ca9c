# test/test_nodes/test_reply_extract.py
import pytest
from typing import Dict, Any

from pocketflow import AsyncFlow as Flow

from finsafe.runtime.classify import DEFAULT_SAFETY_TIPS
from finsafe.runtime.nodes.reply_extract import ReplyExtractNode, RawVerdictNode


@pytest.mark.asyncio
async def test_reply_extract_sections_and_verdict():
    reply_text = """⚠️ Scam Alert
    Explanation: This is likely a scam.
    The sender asks for an upfront fee.
    Safety Tips:
    - Do not pay any fee
    2. Report the number to 1930
    """

    shared: Dict[str, Any] = {"model_reply": reply_text}

    node = ReplyExtractNode()
    node.successors = {}
    flow = Flow(start=node)

    action = await flow.run_async(shared)

    assert action == "ok"
    result = shared["result"]
    assert result["explanation"] == "This is likely a scam. The sender asks for an upfront fee."
    assert result["safetyTips"] == ["Do not pay any fee", "Report the number to 1930"]
    assert result["verdict"] == "Likely Scam"
    assert result["badgeClass"] == "danger"
    assert result["verdictText"].startswith("⚠️ DANGER!")


@pytest.mark.asyncio
async def test_reply_extract_handles_plain_answer_gracefully():
    shared: Dict[str, Any] = {"model_reply": "A SIP is a monthly investment into a mutual fund."}

    node = ReplyExtractNode()
    node.successors = {}
    flow = Flow(start=node)

    action = await flow.run_async(shared)
    assert action == "ok"
    result = shared["result"]
    assert result["explanation"] == ""
    assert result["safetyTips"] == list(DEFAULT_SAFETY_TIPS)
    assert result["verdict"] == "Possibly Safe"
    assert result["badgeClass"] == "safe"
    assert result["verdictText"] == "This message appears to be safe"


@pytest.mark.asyncio
async def test_raw_verdict_reads_whole_reply():
    reply_text = (
        "⚠️ Scam Alert\n"
        "This message appears to be a financial scam.\n"
        "Reason: It demands an OTP."
    )
    shared: Dict[str, Any] = {"model_reply": reply_text}

    node = RawVerdictNode()
    node.successors = {}
    flow = Flow(start=node)

    action = await flow.run_async(shared)
    assert action == "ok"
    assert shared["result"] == {
        "reply": reply_text,
        "verdict": "Suspicious",
        "verdictText": "⚠️ This message contains suspicious elements - proceed with caution",
        "badgeClass": "warning",
    }

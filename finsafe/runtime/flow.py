# finsafe/runtime/flow.py
from __future__ import annotations

from pocketflow import AsyncFlow
from finsafe.runtime.nodes.advisor import AdvisorChatNode
from finsafe.runtime.nodes.knowledge_base import KnowledgeBaseNode
from finsafe.runtime.nodes.chat_reply import ChatReplyNode
from finsafe.runtime.nodes.gemini import GeminiScanNode
from finsafe.runtime.nodes.reply_extract import ReplyExtractNode, RawVerdictNode
from finsafe.runtime.prompts import build_scam_check_prompt, build_scam_alert_prompt


def make_advisor_flow() -> AsyncFlow:
    """Financial advice chat flow:
    advisor → (ok → chat_reply)
            → (fallback → knowledge_base → chat_reply)
    """

    advisor = AdvisorChatNode()
    knowledge_base = KnowledgeBaseNode()
    chat_reply = ChatReplyNode()

    # model answered
    advisor.successors = {
        "ok": chat_reply,
        "fallback": knowledge_base,   # mock mode or provider failure
    }
    knowledge_base.successors = {"ok": chat_reply}

    return AsyncFlow(start=advisor)


def make_scam_check_flow() -> AsyncFlow:
    """Structured scam check:
    gemini (scam-check prompt) → reply_extract
    """

    gemini = GeminiScanNode(prompt_builder=build_scam_check_prompt)
    reply_extract = ReplyExtractNode()

    gemini.successors = {"ok": reply_extract}

    return AsyncFlow(start=gemini)


def make_scam_alert_flow() -> AsyncFlow:
    """Single-path scam alert:
    gemini (strict two-shape prompt) → raw_verdict
    """

    gemini = GeminiScanNode(prompt_builder=build_scam_alert_prompt)
    raw_verdict = RawVerdictNode()

    gemini.successors = {"ok": raw_verdict}

    return AsyncFlow(start=gemini)

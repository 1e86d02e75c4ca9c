# finsafe/runtime/nodes/knowledge_base.py
from __future__ import annotations
import logging
from typing import Any, Dict
from pocketflow import AsyncNode
from finsafe.runtime.knowledge import get_enhanced_mock_response, match_topic

logger = logging.getLogger(__name__)

KNOWLEDGE_BASE_NOTE = "Providing detailed financial guidance from our knowledge base."


class KnowledgeBaseNode(AsyncNode):
    """Triggered when the advisor model is unavailable.
    Prep: pick the user query
    Exec: look up the canned answer (pure)
    Post: commit to shared + route
    """

    def __init__(self, note: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self.note = note or KNOWLEDGE_BASE_NOTE

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        return {"query": str(shared.get("input_text") or "")}

    async def exec_async(self, prep: Dict[str, Any]) -> Dict[str, Any]:
        rule = match_topic(prep["query"])
        return {
            "reply": get_enhanced_mock_response(prep["query"]),
            "topic": rule.topic if rule else "general",
        }

    async def post_async(self, shared: Dict[str, Any], prep: Dict[str, Any], exec_res: Dict[str, Any]) -> str:
        logger.info("Answering from knowledge base (topic=%s)", exec_res["topic"])
        shared["assistant_reply"] = exec_res["reply"]
        shared["mode"] = "enhanced_mock"
        shared["note"] = self.note
        return "ok"

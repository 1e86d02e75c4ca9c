# finsafe/runtime/nodes/advisor.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from pocketflow import AsyncNode
from finsafe.runtime.prompts import ADVISOR_SYSTEM_PROMPT
from finsafe.services.openai_client import OpenAIClient

logger = logging.getLogger(__name__)


class AdvisorChatNode(AsyncNode):
    """LLM advisor node with clean prep/exec/post lifecycle.
    - prep_async: build messages + resolve client (None means mock mode)
    - exec_async: call LLM (pure compute, no side-effects)
    - post_async: write back to shared and route "ok" or "fallback"
    """

    def __init__(self, *, temperature: float = 0.7, max_tokens: int = 300, **kwargs) -> None:
        super().__init__(**kwargs)
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        user_text = str(shared.get("input_text") or "")
        messages: List[Dict[str, str]] = [
            {"role": "system", "content": ADVISOR_SYSTEM_PROMPT},
            {"role": "user", "content": user_text},
        ]
        client: Optional[OpenAIClient] = shared.get("openai_client")
        return {
            "messages": messages,
            "client": client,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def exec_async(self, prep: Dict[str, Any]) -> Dict[str, Any]:
        client: Optional[OpenAIClient] = prep["client"]
        if client is None:
            return {"completion": None, "skipped": True}
        completion = await client.chat(
            messages=prep["messages"],
            temperature=prep["temperature"],
            extra={"max_tokens": prep["max_tokens"]},
        )
        return {"completion": completion}

    async def exec_fallback_async(self, prep: Dict[str, Any], exc: Exception) -> Dict[str, Any]:
        logger.warning("OpenAI error: %s", exc)
        return {
            "completion": None,
            "error": str(exc),
            "degraded": True,
        }

    async def post_async(self, shared: Dict[str, Any], prep: Dict[str, Any], exec_res: Dict[str, Any]) -> str:
        completion = exec_res.get("completion")
        if completion is None:
            return "fallback"

        shared["assistant_reply"] = completion.text
        shared["mode"] = "ai"
        shared["model"] = completion.model
        shared["tokens"] = completion.total_tokens
        return "ok"

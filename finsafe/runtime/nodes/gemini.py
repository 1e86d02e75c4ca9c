# finsafe/runtime/nodes/gemini.py
from __future__ import annotations

from typing import Any, Callable, Dict
from pocketflow import AsyncNode
from finsafe.runtime.prompts import build_scam_check_prompt
from finsafe.services.gemini_client import GeminiClient


class GeminiScanNode(AsyncNode):
    """Send the user's message to Gemini wrapped in a scam-screening prompt.

    No exec fallback: provider failures propagate out of the flow so the
    scam endpoints can report them explicitly.
    """

    def __init__(
        self,
        *,
        prompt_builder: Callable[[str], str] = build_scam_check_prompt,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.prompt_builder = prompt_builder

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        user_text = str(shared.get("input_text") or "")
        client: GeminiClient = shared["gemini_client"]
        return {
            "prompt": self.prompt_builder(user_text),
            "client": client,
        }

    async def exec_async(self, prep: Dict[str, Any]) -> Dict[str, Any]:
        client: GeminiClient = prep["client"]
        text = await client.generate(prep["prompt"])
        return {"reply": text}

    async def post_async(
        self,
        shared: Dict[str, Any],
        prep: Dict[str, Any],
        exec_res: Dict[str, Any],
    ) -> str:
        shared["model_reply"] = exec_res["reply"] or ""
        return "ok"

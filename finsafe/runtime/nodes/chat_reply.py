# finsafe/runtime/nodes/chat_reply.py
from __future__ import annotations
from typing import Any, Dict
from pocketflow import AsyncNode


class ChatReplyNode(AsyncNode):
    """
    Assemble the /api/chat response body from whichever branch answered.
    - prep_async: snapshot reply + mode metadata (no side-effects)
    - exec_async: build the payload, omitting fields the mode doesn't carry
    - post_async: publish to shared["response"] and finish
    """

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "reply": str(shared.get("assistant_reply") or ""),
            "mode": shared.get("mode", "enhanced_mock"),
            "model": shared.get("model"),
            "tokens": shared.get("tokens"),
            "note": shared.get("note"),
        }

    async def exec_async(self, prep: Dict[str, Any]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"reply": prep["reply"], "mode": prep["mode"]}
        if prep["mode"] == "ai":
            payload["model"] = prep["model"]
            payload["tokens"] = prep["tokens"]
        elif prep["note"]:
            payload["note"] = prep["note"]
        return payload

    async def post_async(self, shared: Dict[str, Any], prep: Dict[str, Any], exec_res: Dict[str, Any]) -> str:
        shared["response"] = exec_res
        return "ok"

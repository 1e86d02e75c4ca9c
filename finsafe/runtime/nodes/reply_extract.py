# finsafe/runtime/nodes/reply_extract.py
from __future__ import annotations

from typing import Any, Dict
from pocketflow import AsyncNode
from finsafe.runtime.classify import infer_verdict, parse_reply


def _verdict_fields(verdict) -> Dict[str, str]:
    return {
        "verdict": verdict.label,
        "verdictText": verdict.text,
        "badgeClass": verdict.badge,
    }


class ReplyExtractNode(AsyncNode):
    """Extract explanation/safety tips from a model reply and infer a verdict.
    - prep_async: gather minimal input (model_reply)
    - exec_async: pure extraction (no side-effects)
    - post_async: merge into shared and route
    """

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        return {"model_reply": str(shared.get("model_reply") or "")}

    async def exec_async(self, prep: Dict[str, Any]) -> Dict[str, Any]:
        parsed = parse_reply(prep["model_reply"])
        verdict = infer_verdict(parsed.explanation)
        return {
            **_verdict_fields(verdict),
            "explanation": parsed.explanation,
            "safetyTips": parsed.safety_tips,
        }

    async def post_async(self, shared: Dict[str, Any], prep: Dict[str, Any], exec_res: Dict[str, Any]) -> str:
        shared["result"] = exec_res
        return "ok"


class RawVerdictNode(AsyncNode):
    """Verdict straight from the raw reply text, without section parsing."""

    async def prep_async(self, shared: Dict[str, Any]) -> Dict[str, Any]:
        return {"model_reply": str(shared.get("model_reply") or "")}

    async def exec_async(self, prep: Dict[str, Any]) -> Dict[str, Any]:
        reply = prep["model_reply"]
        return {"reply": reply, **_verdict_fields(infer_verdict(reply))}

    async def post_async(self, shared: Dict[str, Any], prep: Dict[str, Any], exec_res: Dict[str, Any]) -> str:
        shared["result"] = exec_res
        return "ok"

# finsafe/api/scam.py
import logging
from typing import Any, Dict
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pocketflow import AsyncFlow
from finsafe import config
from finsafe.runtime.flow import make_scam_check_flow, make_scam_alert_flow
from finsafe.schemas.chat import ChatIn, ScamCheckOut, ScamAlertOut
from finsafe.services.gemini_client import GeminiClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["scam"])


def _missing_message() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Message is required"})


async def _run_scan(flow: AsyncFlow, message: str) -> Dict[str, Any]:
    """Run a Gemini-backed flow; provider failures surface as a 500 with the error attached."""
    client = None
    try:
        client = GeminiClient(api_key=config.GEMINI_API_KEY or None)
        shared: Dict[str, Any] = {"input_text": message, "gemini_client": client}
        await flow.run_async(shared)
        return shared["result"]
    finally:
        if client is not None:
            await client.aclose()


def _provider_failure(exc: Exception) -> JSONResponse:
    logger.error("Gemini API error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to analyze message", "message": str(exc)},
    )


@router.post("/scam-check", response_model=ScamCheckOut)
async def scam_check_endpoint(payload: ChatIn):
    """
    Screen a message for scam signals:
    1. Gemini answers with either a scam-alert block or a plain reply
    2. Explanation + safety tips are extracted line by line
    3. A keyword verdict is inferred from the explanation
    """
    if not payload.text():
        return _missing_message()
    try:
        return await _run_scan(make_scam_check_flow(), payload.message)
    except Exception as e:
        return _provider_failure(e)


@router.post("/scam-alert", response_model=ScamAlertOut)
async def scam_alert_endpoint(payload: ChatIn):
    """Single-path variant: the verdict comes straight from the raw reply text."""
    if not payload.text():
        return _missing_message()
    try:
        return await _run_scan(make_scam_alert_flow(), payload.message)
    except Exception as e:
        return _provider_failure(e)

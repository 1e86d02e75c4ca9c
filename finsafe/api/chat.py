# finsafe/api/chat.py
import json
import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from finsafe import config
from finsafe.api.health import utc_timestamp
from finsafe.runtime.flow import make_advisor_flow
from finsafe.runtime.knowledge import get_enhanced_mock_response
from finsafe.schemas.chat import ChatIn, ChatOut, MinimalChatOut
from finsafe.services.openai_client import OpenAIClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

EMPTY_MESSAGE_REPLY = "Please enter a question."

MINIMAL_REPLY_TEMPLATE = (
    'Thanks for your question: "{message}". '
    "I'm here to help with financial advice for students! "
    "Here's a tip: Always track your expenses and save at least 20% of your income."
)


@router.post("/api/chat", response_model=ChatOut, response_model_exclude_none=True)
async def chat_endpoint(payload: ChatIn):
    """
    Handle a chat message from frontend:
    1. Reject blank input before any provider call
    2. Run flow (advisor → knowledge_base fallback → chat_reply)
    3. Return reply with the mode that produced it
    """
    message = payload.text()
    if not message:
        return JSONResponse(
            status_code=400,
            content={"reply": EMPTY_MESSAGE_REPLY, "mode": "error"},
        )

    logger.info('Chat request: "%s..."', message[:50])

    client: Optional[OpenAIClient] = None
    try:
        if config.openai_configured():
            client = OpenAIClient(api_key=config.OPENAI_API_KEY)
        shared: Dict[str, Any] = {
            "input_text": payload.message,
            "openai_client": client,
        }
        await make_advisor_flow().run_async(shared)
        return shared["response"]
    except Exception as e:
        logger.error("Server error: %s", e)
        return JSONResponse(
            status_code=500,
            content={
                "reply": get_enhanced_mock_response(payload.message or "Error occurred"),
                "mode": "fallback",
                "error": "Server error occurred",
            },
        )
    finally:
        if client is not None:
            await client.aclose()


@router.post("/chat", response_model=MinimalChatOut)
async def minimal_chat_endpoint(request: Request):
    """Minimal variant without a model: echo the question with a standing tip."""
    try:
        data = json.loads(await request.body())
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON"})

    message = data.get("message") if isinstance(data, dict) else None
    if not isinstance(message, str) or not message.strip():
        return JSONResponse(status_code=400, content={"error": "Message is required"})

    logger.info("Received: %s", message[:50])
    return MinimalChatOut(
        reply=MINIMAL_REPLY_TEMPLATE.format(message=message),
        timestamp=utc_timestamp(),
    )


@router.get("/")
async def root():
    return {
        "message": "Financial Assistant API",
        "status": "running",
        "endpoints": [
            "POST /chat",
            "POST /api/chat",
            "POST /api/scam-check",
            "POST /api/scam-alert",
            "GET /api/health",
        ],
    }

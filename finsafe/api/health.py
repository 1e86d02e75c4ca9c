from datetime import datetime, timezone
from fastapi import APIRouter
from finsafe import config
from finsafe.schemas.chat import HealthOut

router = APIRouter(tags=["health"])

SERVER_NAME = "FinSafe AI"


def utc_timestamp() -> str:
    """ISO 8601 UTC timestamp with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/api/health", response_model=HealthOut, response_model_exclude_none=True)
async def health_check():
    return HealthOut(
        status="healthy",
        server=SERVER_NAME,
        timestamp=utc_timestamp(),
        environment=config.NODE_ENV,
        openai="configured" if config.openai_configured() else "mock_mode",
        vercel=True,
    )

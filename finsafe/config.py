"""
Configuration
=============
Loads environment variables (optionally from a .env file).

- OPENAI_API_KEY: advisor chat key; without an "sk-" key the chat endpoint
  answers from the local knowledge base ("enhanced_mock" mode)
- GEMINI_API_KEY: key for the scam-check endpoints
- NODE_ENV: deployment environment reported by /api/health
- PORT: local development port
- FINSAFE_ALLOWED_ORIGINS: comma-separated CORS allow-list override
- FINSAFE_PROVIDER_TIMEOUT: seconds to wait for a model provider

Keys are optional at startup so the service can run in mock mode.
"""

import os
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")

NODE_ENV: Optional[str] = os.getenv("NODE_ENV")
ENVIRONMENT: str = NODE_ENV or "production"
PORT: int = int(os.getenv("PORT", "5501"))

PROVIDER_TIMEOUT: float = float(os.getenv("FINSAFE_PROVIDER_TIMEOUT", "30"))

DEFAULT_ALLOWED_ORIGINS: List[str] = [
    "https://fin-safe-ai.vercel.app",
    "https://finttiv.vercel.app",
    "http://localhost:5501",
    "http://127.0.0.1:5501",
]

ALLOWED_ORIGINS: List[str] = [
    o.strip().rstrip("/")
    for o in os.getenv("FINSAFE_ALLOWED_ORIGINS", "").split(",")
    if o.strip()
] or DEFAULT_ALLOWED_ORIGINS


def openai_configured() -> bool:
    return bool(OPENAI_API_KEY) and OPENAI_API_KEY.startswith("sk-")

# services/gemini_client.py
import os
import httpx
from typing import Any, Dict, List, Optional

from finsafe import config


class GeminiError(RuntimeError):
    pass


class GeminiClient:
    """Thin client for the Gemini generateContent REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url or os.getenv("GEMINI_BASE", "https://generativelanguage.googleapis.com")
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        self.model = model or os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.timeout = timeout if timeout is not None else config.PROVIDER_TIMEOUT

        if not self.api_key:
            raise GeminiError("GEMINI_API_KEY is not configured")

        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def generate(self, prompt: str) -> str:
        """
        Send a single-turn text prompt and return the concatenated text parts
        of the first candidate. Raises GeminiError on failure.
        """
        payload: Dict[str, Any] = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        }

        try:
            res = await self._client.post(
                f"/v1beta/models/{self.model}:generateContent",
                headers={"x-goog-api-key": self.api_key},
                json=payload,
            )
        except httpx.HTTPError as e:
            raise GeminiError(f"Gemini request failed: {e}") from e

        if res.status_code >= 400:
            raise GeminiError(f"HTTP {res.status_code}: {res.text[:200]}")

        try:
            data = res.json()
        except ValueError as e:
            raise GeminiError(f"Invalid JSON from Gemini: {res.text[:200]}") from e

        candidates = data.get("candidates") or []
        if not candidates:
            feedback = data.get("promptFeedback") or {}
            raise GeminiError(f"No candidates returned (blockReason={feedback.get('blockReason')})")

        parts: List[Dict[str, Any]] = (candidates[0].get("content") or {}).get("parts") or []
        text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
        if not text:
            raise GeminiError(f"Empty content (finishReason={candidates[0].get('finishReason')})")
        return text

# services/openai_client.py
import os
import httpx
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from finsafe import config


class OpenAIError(RuntimeError):
    pass


@dataclass(frozen=True)
class Completion:
    text: str
    model: str
    total_tokens: Optional[int] = None


class OpenAIClient:
    """Thin client for the OpenAI Chat Completions API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url or os.getenv("OPENAI_BASE", "https://api.openai.com/v1")
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.model = model or os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")
        self.timeout = timeout if timeout is not None else config.PROVIDER_TIMEOUT

        if not self.api_key:
            raise OpenAIError("OPENAI_API_KEY is not configured")

        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def chat(
        self,
        messages: List[Dict[str, Any]],
        temperature: float = 0.7,
        extra: Optional[Dict[str, Any]] = None,
    ) -> Completion:
        """
        Perform a non-streaming chat completion.
        Returns the assistant text with the served model name and token usage.
        Raises OpenAIError on failure.
        """
        payload: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        if extra:
            payload.update(extra)

        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            res = await self._client.post("/chat/completions", headers=headers, json=payload)
            if res.status_code in (429, 500, 502, 503, 504):
                raise OpenAIError(f"Transient HTTP {res.status_code}: {res.text[:200]}")
            res.raise_for_status()
            data = res.json()
        except OpenAIError:
            raise
        except Exception as e:  # network or parsing
            raise OpenAIError(f"OpenAI chat failed: {e}") from e

        if not isinstance(data, dict):
            raise OpenAIError(f"Unexpected body: {data!r}")
        choices = data.get("choices") or []
        if not choices:
            raise OpenAIError(f"Empty choices: {data!r}")
        message = choices[0].get("message") or {}
        content = message.get("content")
        if not isinstance(content, str):
            raise OpenAIError(f"Invalid content: {message!r}")
        usage = data.get("usage") or {}
        return Completion(
            text=content,
            model=data.get("model") or self.model,
            total_tokens=usage.get("total_tokens"),
        )

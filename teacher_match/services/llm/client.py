from __future__ import annotations

from typing import Any

import httpx

from teacher_match.config import settings


class LLMClientError(RuntimeError):
    pass


class GatewayLLMClient:
    """Chat-completions client for an OpenAI-compatible HTTP gateway.

    One attempt per call. Callers own the fallback policy.
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
        url: str | None = None,
        timeout_seconds: int | None = None,
        llm_enabled: bool | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.llm_api_key
        self.model = model if model is not None else settings.llm_model
        self.url = url if url is not None else settings.llm_gateway_url
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.llm_timeout_seconds
        self.runtime_enabled = llm_enabled if llm_enabled is not None else settings.llm_enabled
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.runtime_enabled and self.api_key and self.model and self.url)

    async def complete(self, messages: list[dict[str, str]]) -> str:
        if not self.enabled:
            raise LLMClientError("LLM disabled or missing gateway configuration")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {"model": self.model, "messages": messages}

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(self.url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise LLMClientError(str(exc) or exc.__class__.__name__) from exc

        if response.status_code >= 400:
            raise LLMClientError(f"HTTP {response.status_code}: {response.text[:300]}")

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMClientError("Gateway returned non-JSON body") from exc

        text = _extract_text(data)
        if text is None:
            raise LLMClientError("Empty gateway completion text")
        return text


def _extract_text(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None

    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None

    first = choices[0]
    if not isinstance(first, dict):
        return None

    message = first.get("message")
    if not isinstance(message, dict):
        return None

    content = message.get("content")
    if isinstance(content, str) and content.strip():
        return content.strip()
    return None

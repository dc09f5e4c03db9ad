from __future__ import annotations

from typing import Any

from openai import APIConnectionError, APIError, APIStatusError, APITimeoutError, AsyncOpenAI

from teacher_match.config import settings
from teacher_match.services.llm.client import LLMClientError


class OpenAILLMClient:
    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout_seconds: int | None = None,
        llm_enabled: bool | None = None,
    ):
        self.api_key = api_key if api_key is not None else settings.llm_api_key
        self.base_url = base_url if base_url is not None else settings.openai_base_url
        self.model = model if model is not None else settings.llm_model
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else settings.llm_timeout_seconds
        self.runtime_enabled = llm_enabled if llm_enabled is not None else settings.llm_enabled

    @property
    def enabled(self) -> bool:
        return bool(self.runtime_enabled and self.api_key and self.model)

    async def complete(self, messages: list[dict[str, str]]) -> str:
        if not self.enabled:
            raise LLMClientError("LLM disabled or missing OpenAI configuration")

        client = AsyncOpenAI(
            api_key=self.api_key,
            base_url=self.base_url or None,
            timeout=self.timeout_seconds,
            max_retries=0,
        )

        try:
            response = await client.chat.completions.create(model=self.model, messages=messages)
        except APIStatusError as exc:
            raise LLMClientError(f"HTTP {exc.status_code}: {str(exc)[:300]}") from exc
        except (APITimeoutError, APIConnectionError) as exc:
            raise LLMClientError(str(exc)) from exc
        except APIError as exc:
            raise LLMClientError(str(exc)) from exc
        finally:
            await client.close()

        text = _extract_text(response)
        if text is None:
            raise LLMClientError("Empty OpenAI completion text")
        return text


def _extract_text(response: Any) -> str | None:
    choices = getattr(response, "choices", None)
    if not choices:
        return None

    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if isinstance(content, str) and content.strip():
        return content.strip()
    return None

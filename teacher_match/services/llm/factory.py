from __future__ import annotations

from teacher_match.config import settings
from teacher_match.services.llm.client import GatewayLLMClient
from teacher_match.services.llm.openai_client import OpenAILLMClient


def get_llm_client():
    provider = (settings.llm_provider or "").strip().lower()

    if provider == "openai":
        return OpenAILLMClient(
            api_key=settings.llm_api_key,
            base_url=settings.openai_base_url,
            model=settings.llm_model,
            timeout_seconds=settings.llm_timeout_seconds,
            llm_enabled=settings.llm_enabled,
        )

    return GatewayLLMClient(
        api_key=settings.llm_api_key,
        model=settings.llm_model,
        url=settings.llm_gateway_url,
        timeout_seconds=settings.llm_timeout_seconds,
        llm_enabled=settings.llm_enabled,
    )

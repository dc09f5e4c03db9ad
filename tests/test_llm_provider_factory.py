from teacher_match.config import settings
from teacher_match.services.llm.client import GatewayLLMClient
from teacher_match.services.llm.factory import get_llm_client
from teacher_match.services.llm.openai_client import OpenAILLMClient


def test_factory_returns_openai_client_for_openai_provider(monkeypatch):
    monkeypatch.setattr(settings, "llm_provider", "openai")
    monkeypatch.setattr(settings, "llm_enabled", True)
    monkeypatch.setattr(settings, "llm_api_key", "fake-openai-key")
    monkeypatch.setattr(settings, "llm_model", "gpt-4o-mini")

    client = get_llm_client()
    assert isinstance(client, OpenAILLMClient)
    assert client.enabled is True


def test_factory_returns_gateway_client_by_default(monkeypatch):
    monkeypatch.setattr(settings, "llm_provider", "gateway")
    monkeypatch.setattr(settings, "llm_enabled", True)
    monkeypatch.setattr(settings, "llm_api_key", "fake-gateway-key")
    monkeypatch.setattr(settings, "llm_model", "google/gemini-2.5-flash")

    client = get_llm_client()
    assert isinstance(client, GatewayLLMClient)
    assert client.enabled is True
    assert client.url == settings.llm_gateway_url


def test_clients_are_disabled_when_llm_switched_off(monkeypatch):
    monkeypatch.setattr(settings, "llm_enabled", False)
    monkeypatch.setattr(settings, "llm_api_key", "some-key")

    for provider in ("openai", "gateway"):
        monkeypatch.setattr(settings, "llm_provider", provider)
        assert get_llm_client().enabled is False

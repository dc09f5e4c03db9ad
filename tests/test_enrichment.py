import asyncio
import json

import httpx

from teacher_match.services.enrichment import FALLBACK_DESCRIPTION, DescriptionEnricher
from teacher_match.services.llm import GatewayLLMClient, LLMClientError
from teacher_match.services.matching import MatchedTeacherView


def _view(teacher_id, *, bio=None, rank=1):
    return MatchedTeacherView(
        id=teacher_id,
        user_id=f"user-{teacher_id}",
        occupation="Data Scientist",
        years_of_experience=7,
        rank=rank,
        bio=bio,
        expertise_areas=["Pandas", "Statistics"],
        skill_name="Python for Data Science",
        proficiency_level="advanced",
        profile={"id": f"user-{teacher_id}", "full_name": f"Teacher {teacher_id}", "email": None},
    )


class FakeClient:
    enabled = True

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.prompts = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def complete(self, messages):
        self.prompts.append(messages)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        await asyncio.sleep(0.01)
        self.in_flight -= 1
        user = messages[1]["content"]
        name = user.split("Name: ", 1)[1].splitlines()[0]
        if name in self.failing:
            raise LLMClientError("HTTP 500: boom")
        return f"Generated for {name}"


def test_enricher_only_describes_the_first_five_views():
    views = [_view(str(i)) for i in range(8)]
    client = FakeClient()

    enriched = asyncio.run(DescriptionEnricher(client).enrich(views, "python"))

    assert [v.id for v in enriched] == [str(i) for i in range(8)]
    assert [v.ai_description for v in enriched[:5]] == [f"Generated for Teacher {i}" for i in range(5)]
    assert all(v.ai_description is None for v in enriched[5:])
    assert len(client.prompts) == 5
    assert client.max_in_flight == 5


def test_enricher_falls_back_per_item_without_touching_siblings():
    views = [_view("0"), _view("1", bio="Loves teaching pandas."), _view("2"), _view("3", bio="  ")]
    client = FakeClient(failing={"Teacher 1", "Teacher 3"})

    enriched = asyncio.run(DescriptionEnricher(client).enrich(views, "python"))

    assert enriched[0].ai_description == "Generated for Teacher 0"
    assert enriched[1].ai_description == "Loves teaching pandas."
    assert enriched[2].ai_description == "Generated for Teacher 2"
    assert enriched[3].ai_description == FALLBACK_DESCRIPTION


def test_enricher_prompt_mentions_teacher_details_and_query():
    client = FakeClient()
    asyncio.run(DescriptionEnricher(client).enrich([_view("7")], "data science"))

    system, user = client.prompts[0]
    assert system["role"] == "system"
    assert user["role"] == "user"
    for expected in [
        "Teacher 7",
        "Data Scientist",
        "7 years",
        "Python for Data Science (advanced)",
        "Pandas, Statistics",
        "learning data science",
    ]:
        assert expected in user["content"]


def test_enricher_uses_fallback_when_client_disabled():
    client = FakeClient()
    client.enabled = False

    enriched = asyncio.run(DescriptionEnricher(client).enrich([_view("0", bio="Bio text")], "python"))

    assert client.prompts == []
    assert enriched[0].ai_description == "Bio text"


def test_enricher_respects_configured_limit_and_empty_input():
    client = FakeClient()
    assert asyncio.run(DescriptionEnricher(client, limit=2).enrich([], "python")) == []

    enriched = asyncio.run(DescriptionEnricher(client, limit=2).enrich([_view("0"), _view("1"), _view("2")], "python"))
    assert [v.ai_description is not None for v in enriched] == [True, True, False]


def _gateway(handler, **kwargs):
    return GatewayLLMClient(
        api_key="test-key",
        model="google/gemini-2.5-flash",
        url="https://gateway.test/v1/chat/completions",
        timeout_seconds=5,
        llm_enabled=True,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def test_gateway_client_posts_bearer_model_and_messages():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": " A great teacher. "}}]})

    messages = [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}]
    text = asyncio.run(_gateway(handler).complete(messages))

    assert text == "A great teacher."
    assert seen["auth"] == "Bearer test-key"
    assert seen["body"] == {"model": "google/gemini-2.5-flash", "messages": messages}


def _raises_client_error(handler):
    try:
        asyncio.run(_gateway(handler).complete([{"role": "user", "content": "u"}]))
    except LLMClientError:
        return True
    return False


def test_gateway_client_errors_on_bad_status():
    assert _raises_client_error(lambda request: httpx.Response(429, text="slow down"))


def test_gateway_client_errors_on_malformed_payloads():
    assert _raises_client_error(lambda request: httpx.Response(200, json={"choices": []}))
    assert _raises_client_error(lambda request: httpx.Response(200, json={"choices": [{"message": {}}]}))
    assert _raises_client_error(lambda request: httpx.Response(200, text="not json"))


def test_gateway_client_errors_on_transport_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert _raises_client_error(handler)


def test_gateway_client_is_single_attempt():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503)

    assert _raises_client_error(handler)
    assert len(calls) == 1


def test_gateway_client_disabled_without_key():
    client = GatewayLLMClient(api_key="", llm_enabled=True)
    assert client.enabled is False

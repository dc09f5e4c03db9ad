from __future__ import annotations

import asyncio
import dataclasses
import logging

from teacher_match.services.errors import EnrichmentError
from teacher_match.services.llm import LLMClientError
from teacher_match.services.llm.prompts import build_teacher_description_messages
from teacher_match.services.matching import MatchedTeacherView

logger = logging.getLogger(__name__)

DEFAULT_ENRICHMENT_LIMIT = 5
FALLBACK_DESCRIPTION = "Experienced educator ready to help you learn."


class DescriptionEnricher:
    """Attach a generated blurb to the top ranked views.

    Only the first ``limit`` views are sent out, one call each, concurrently.
    A failed call falls back to the teacher's bio or a fixed sentence; it never
    fails the batch. Views past the limit are returned as they came in.
    """

    def __init__(self, client, *, limit: int = DEFAULT_ENRICHMENT_LIMIT):
        self._client = client
        self._limit = max(0, int(limit))

    async def enrich(self, views: list[MatchedTeacherView], query: str) -> list[MatchedTeacherView]:
        head = views[: self._limit]
        tail = views[self._limit :]
        if not head:
            return list(views)

        enriched = await asyncio.gather(*(self._describe(view, query) for view in head))
        return [*enriched, *tail]

    async def _describe(self, view: MatchedTeacherView, query: str) -> MatchedTeacherView:
        try:
            text = await self._generate(view, query)
        except EnrichmentError as exc:
            logger.warning("Description fallback for teacher %s: %s", view.id, exc)
            text = fallback_description(view)
        return dataclasses.replace(view, ai_description=text)

    async def _generate(self, view: MatchedTeacherView, query: str) -> str:
        if not getattr(self._client, "enabled", False):
            raise EnrichmentError("LLM disabled or missing configuration")

        messages = build_teacher_description_messages(
            full_name=view.full_name,
            occupation=view.occupation,
            years_of_experience=view.years_of_experience,
            skill_name=view.skill_name,
            proficiency_level=view.proficiency_level,
            expertise_areas=view.expertise_areas,
            query=query,
        )
        try:
            return await self._client.complete(messages)
        except LLMClientError as exc:
            raise EnrichmentError(str(exc)) from exc


def fallback_description(view: MatchedTeacherView) -> str:
    bio = (view.bio or "").strip()
    return bio or FALLBACK_DESCRIPTION

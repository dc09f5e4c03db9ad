from __future__ import annotations

import asyncio
import logging

from teacher_match.schemas import MatchedTeacherOut, MatchTeachersOut, ProfileOut
from teacher_match.services.enrichment import DescriptionEnricher
from teacher_match.services.matching import MatchedTeacherView, aggregate, find_matches, rank_views
from teacher_match.services.validation import validate_skill_query

logger = logging.getLogger(__name__)


class TeacherMatchService:
    """Skill query in, ranked and described teachers out.

    Collaborators are injected so the pipeline runs against fakes in tests.
    Raises ``MatchError`` subclasses; the router turns them into responses.
    """

    def __init__(self, directory, enricher: DescriptionEnricher):
        self._directory = directory
        self._enricher = enricher

    async def match(self, raw_skill) -> MatchTeachersOut:
        skill = validate_skill_query(raw_skill)
        logger.info("Matching teachers for skill: %s", skill)

        matches = await asyncio.to_thread(find_matches, self._directory, skill)
        views = await asyncio.to_thread(aggregate, self._directory, matches)
        ranked = rank_views(views)
        logger.info("Found teachers: %d", len(ranked))

        enriched = await self._enricher.enrich(ranked, skill)
        return assemble(enriched)


def assemble(views: list[MatchedTeacherView]) -> MatchTeachersOut:
    return MatchTeachersOut(teachers=[_view_out(view) for view in views])


def _view_out(view: MatchedTeacherView) -> MatchedTeacherOut:
    fields = {
        "id": view.id,
        "user_id": view.user_id,
        "occupation": view.occupation,
        "years_of_experience": view.years_of_experience,
        "rank": view.rank,
        "bio": view.bio,
        "expertise_areas": view.expertise_areas,
        "skill_name": view.skill_name,
        "proficiency_level": view.proficiency_level,
        "profile": ProfileOut(**view.profile) if view.profile else None,
    }
    # Only enriched views carry the key at all.
    if view.ai_description is not None:
        fields["ai_description"] = view.ai_description
    return MatchedTeacherOut(**fields)

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from teacher_match.services.errors import DataStoreError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillMatch:
    skill_name: str
    proficiency_level: str
    teacher: dict[str, Any]


@dataclass(frozen=True)
class MatchedTeacherView:
    id: str
    user_id: str | None
    occupation: str
    years_of_experience: int
    rank: int
    bio: str | None
    expertise_areas: list[str]
    skill_name: str
    proficiency_level: str
    profile: dict[str, Any] | None = None
    ai_description: str | None = None

    @property
    def full_name(self) -> str | None:
        if not self.profile:
            return None
        return self.profile.get("full_name") or None


@dataclass
class _ProfileIndex:
    by_id: dict[str, dict[str, Any]] = field(default_factory=dict)

    def get(self, user_id: str | None) -> dict[str, Any] | None:
        if not user_id:
            return None
        return self.by_id.get(user_id)


def compute_rank(years_of_experience: int) -> int:
    """Rank tier for a teacher; 1 is the most senior."""
    if years_of_experience >= 8:
        return 1
    if years_of_experience >= 6:
        return 2
    if years_of_experience >= 4:
        return 3
    if years_of_experience >= 2:
        return 4
    return 5


def one_or_none(related: Any) -> dict[str, Any] | None:
    """Collapse an embedded relation to a single record.

    The store may embed a related row as an object, as a list holding that
    object, or not at all.
    """
    if isinstance(related, list):
        related = related[0] if related else None
    if isinstance(related, dict) and related:
        return related
    return None


def find_matches(directory, query: str) -> list[SkillMatch]:
    rows = directory.find_skill_rows(query)

    matches: list[SkillMatch] = []
    for row in rows:
        teacher = one_or_none(row.get("teachers"))
        if teacher is None:
            # Skill left behind by a deleted teacher.
            continue
        matches.append(
            SkillMatch(
                skill_name=str(row.get("skill_name") or ""),
                proficiency_level=str(row.get("proficiency_level") or ""),
                teacher=teacher,
            )
        )
    return matches


def aggregate(directory, matches: list[SkillMatch]) -> list[MatchedTeacherView]:
    user_ids = list(dict.fromkeys(m.teacher["user_id"] for m in matches if m.teacher.get("user_id")))
    profiles = _load_profiles(directory, user_ids)

    views: list[MatchedTeacherView] = []
    for match in matches:
        teacher = match.teacher
        views.append(
            MatchedTeacherView(
                id=teacher["id"],
                user_id=teacher.get("user_id"),
                occupation=teacher.get("occupation") or "",
                years_of_experience=int(teacher.get("years_of_experience") or 0),
                rank=int(teacher["rank"]),
                bio=teacher.get("bio"),
                expertise_areas=list(teacher.get("expertise_areas") or []),
                skill_name=match.skill_name,
                proficiency_level=match.proficiency_level,
                profile=profiles.get(teacher.get("user_id")),
            )
        )
    return views


def rank_views(views: list[MatchedTeacherView]) -> list[MatchedTeacherView]:
    # sorted() is stable: equal ranks keep aggregation order, no secondary key.
    return sorted(views, key=lambda view: view.rank)


def _load_profiles(directory, user_ids: list[str]) -> _ProfileIndex:
    if not user_ids:
        return _ProfileIndex()

    try:
        rows = directory.get_profiles(user_ids)
    except DataStoreError as exc:
        logger.error("Error fetching profiles: %s", exc.__cause__ or exc)
        return _ProfileIndex()

    return _ProfileIndex(by_id={row["id"]: row for row in rows if row.get("id")})

from __future__ import annotations

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from teacher_match import models
from teacher_match.services.errors import DataStoreError


class TeacherDirectory:
    """Read-only access to the skills, teachers and profiles collections.

    Rows are returned as plain dicts shaped like the store's nested selects so
    the matching pipeline never touches ORM objects.
    """

    def __init__(self, db: Session):
        self._db = db

    def find_skill_rows(self, query: str) -> list[dict[str, Any]]:
        stmt = (
            select(models.Skill)
            .options(selectinload(models.Skill.teacher))
            .where(models.Skill.skill_name.ilike(f"%{query}%"))
        )
        try:
            skills = self._db.scalars(stmt).all()
        except SQLAlchemyError as exc:
            raise DataStoreError("Failed to fetch skills") from exc

        return [
            {
                "teacher_id": skill.teacher_id,
                "skill_name": skill.skill_name,
                "proficiency_level": skill.proficiency_level,
                "teachers": _teacher_row(skill.teacher) if skill.teacher else None,
            }
            for skill in skills
        ]

    def get_profiles(self, user_ids: list[str]) -> list[dict[str, Any]]:
        if not user_ids:
            return []

        stmt = select(models.Profile).where(models.Profile.id.in_(user_ids))
        try:
            profiles = self._db.scalars(stmt).all()
        except SQLAlchemyError as exc:
            raise DataStoreError("Failed to fetch profiles") from exc

        return [_profile_row(profile) for profile in profiles]

    def get_teacher(self, teacher_id: str) -> dict[str, Any] | None:
        try:
            teacher = self._db.get(models.Teacher, teacher_id)
        except SQLAlchemyError as exc:
            raise DataStoreError("Failed to fetch teacher") from exc
        return _teacher_row(teacher) if teacher else None

    def get_profile(self, user_id: str | None) -> dict[str, Any] | None:
        if not user_id:
            return None
        try:
            profile = self._db.get(models.Profile, user_id)
        except SQLAlchemyError as exc:
            raise DataStoreError("Failed to fetch profile") from exc
        return _profile_row(profile) if profile else None

    def list_skills(self, teacher_id: str) -> list[dict[str, Any]]:
        stmt = (
            select(models.Skill)
            .where(models.Skill.teacher_id == teacher_id)
            .order_by(models.Skill.created_at)
        )
        try:
            skills = self._db.scalars(stmt).all()
        except SQLAlchemyError as exc:
            raise DataStoreError("Failed to fetch skills") from exc

        return [
            {
                "id": skill.id,
                "skill_name": skill.skill_name,
                "proficiency_level": skill.proficiency_level,
            }
            for skill in skills
        ]


def _teacher_row(teacher: models.Teacher) -> dict[str, Any]:
    return {
        "id": teacher.id,
        "user_id": teacher.user_id,
        "occupation": teacher.occupation,
        "years_of_experience": teacher.years_of_experience,
        "rank": teacher.rank,
        "bio": teacher.bio,
        "expertise_areas": list(teacher.expertise_areas or []),
    }


def _profile_row(profile: models.Profile) -> dict[str, Any]:
    return {"id": profile.id, "full_name": profile.full_name, "email": profile.email}

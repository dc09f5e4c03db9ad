from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProfileOut(BaseModel):
    id: str
    full_name: str
    email: str | None = None


class MatchedTeacherOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str | None = None
    occupation: str
    years_of_experience: int
    rank: int
    bio: str | None = None
    expertise_areas: list[str] = Field(default_factory=list)
    skill_name: str
    proficiency_level: str
    profile: ProfileOut | None = None
    ai_description: str | None = Field(default=None, alias="aiDescription")


class MatchTeachersOut(BaseModel):
    teachers: list[MatchedTeacherOut] = Field(default_factory=list)


class ErrorOut(BaseModel):
    error: str


class TeacherSkillOut(BaseModel):
    id: str
    skill_name: str
    proficiency_level: str


class TeacherDetailOut(BaseModel):
    id: str
    user_id: str | None = None
    occupation: str
    years_of_experience: int
    rank: int
    bio: str | None = None
    expertise_areas: list[str] = Field(default_factory=list)
    profile: ProfileOut | None = None
    skills: list[TeacherSkillOut] = Field(default_factory=list)


class RankPreviewOut(BaseModel):
    years_of_experience: int
    rank: int


class HealthOut(BaseModel):
    status: str = "ok"

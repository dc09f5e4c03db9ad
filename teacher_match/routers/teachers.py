from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from teacher_match.db import get_db
from teacher_match.schemas import ProfileOut, RankPreviewOut, TeacherDetailOut, TeacherSkillOut
from teacher_match.services.directory import TeacherDirectory
from teacher_match.services.errors import DataStoreError
from teacher_match.services.matching import compute_rank

router = APIRouter(prefix="/teachers", tags=["teachers"])


@router.get("/rank-preview", response_model=RankPreviewOut)
def rank_preview(years: int = Query(..., ge=0)) -> RankPreviewOut:
    return RankPreviewOut(years_of_experience=years, rank=compute_rank(years))


@router.get("/{teacher_id}", response_model=TeacherDetailOut)
def get_teacher(teacher_id: str, db: Session = Depends(get_db)) -> TeacherDetailOut:
    directory = TeacherDirectory(db)
    try:
        teacher = directory.get_teacher(teacher_id)
        if not teacher:
            raise HTTPException(status_code=404, detail="Teacher not found")
        profile = directory.get_profile(teacher["user_id"])
        skills = directory.list_skills(teacher_id)
    except DataStoreError as exc:
        raise HTTPException(status_code=500, detail=exc.message) from exc

    return TeacherDetailOut(
        **teacher,
        profile=ProfileOut(**profile) if profile else None,
        skills=[TeacherSkillOut(**skill) for skill in skills],
    )

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="teacher-match-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR}/test.db"
os.environ["LLM_API_KEY"] = ""

import pytest  # noqa: E402

from teacher_match import models  # noqa: E402
from teacher_match.db import Base, SessionLocal, init_db  # noqa: E402


@pytest.fixture()
def db():
    init_db()
    with SessionLocal() as session:
        yield session
    with SessionLocal() as session:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()


@pytest.fixture()
def add_teacher(db):
    def _add(*, full_name, rank, skills, bio=None, years=5, occupation="Engineer", expertise=None, with_profile=True):
        profile = None
        if with_profile:
            profile = models.Profile(full_name=full_name, email=f"{full_name.split()[0].lower()}@example.com")
            db.add(profile)
            db.flush()
        teacher = models.Teacher(
            user_id=profile.id if profile else "missing-profile",
            occupation=occupation,
            years_of_experience=years,
            rank=rank,
            bio=bio,
            expertise_areas=expertise or [],
        )
        teacher.skills = [models.Skill(skill_name=name, proficiency_level=level) for name, level in skills]
        db.add(teacher)
        db.commit()
        return teacher

    return _add

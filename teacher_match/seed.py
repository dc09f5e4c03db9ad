"""Populate the database with demo teachers for local development."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from teacher_match import models
from teacher_match.db import SessionLocal, init_db
from teacher_match.logging_config import configure_logging
from teacher_match.services.matching import compute_rank

logger = logging.getLogger(__name__)

TEACHER_SAMPLES = [
    {
        "full_name": "Ada Moreno",
        "email": "ada.moreno@example.com",
        "occupation": "Senior Software Engineer",
        "years_of_experience": 9,
        "bio": "Backend engineer who has mentored dozens of junior developers.",
        "expertise_areas": ["Backend", "APIs", "Testing"],
        "skills": [("Python Programming", "expert"), ("Python for Data Science", "advanced")],
    },
    {
        "full_name": "Tomas Lindqvist",
        "email": "tomas.lindqvist@example.com",
        "occupation": "Data Analyst",
        "years_of_experience": 6,
        "bio": None,
        "expertise_areas": ["SQL", "Dashboards"],
        "skills": [("SQL Fundamentals", "advanced"), ("Python Basics", "intermediate")],
    },
    {
        "full_name": "Mei Tanaka",
        "email": "mei.tanaka@example.com",
        "occupation": "Concert Pianist",
        "years_of_experience": 12,
        "bio": "Performs internationally and teaches piano to all ages.",
        "expertise_areas": ["Classical", "Music Theory"],
        "skills": [("Piano", "expert"), ("Music Theory", "expert")],
    },
    {
        "full_name": "Lucas Ferreira",
        "email": "lucas.ferreira@example.com",
        "occupation": "Frontend Developer",
        "years_of_experience": 3,
        "bio": "Builds accessible web interfaces.",
        "expertise_areas": ["React", "CSS"],
        "skills": [("JavaScript", "advanced"), ("Web Design", "intermediate")],
    },
    {
        "full_name": "Priya Nair",
        "email": "priya.nair@example.com",
        "occupation": "Language Tutor",
        "years_of_experience": 1,
        "bio": None,
        "expertise_areas": ["Conversation", "Grammar"],
        "skills": [("Spanish", "advanced"), ("English Writing", "intermediate")],
    },
]


def seed_teachers(db: Session) -> int:
    created = 0
    for sample in TEACHER_SAMPLES:
        existing = db.scalar(select(models.Profile).where(models.Profile.email == sample["email"]))
        if existing:
            continue

        profile = models.Profile(full_name=sample["full_name"], email=sample["email"])
        db.add(profile)
        db.flush()

        teacher = models.Teacher(
            user_id=profile.id,
            occupation=sample["occupation"],
            years_of_experience=sample["years_of_experience"],
            rank=compute_rank(sample["years_of_experience"]),
            bio=sample["bio"],
            expertise_areas=sample["expertise_areas"],
        )
        teacher.skills = [
            models.Skill(skill_name=name, proficiency_level=level) for name, level in sample["skills"]
        ]
        db.add(teacher)
        created += 1

    db.commit()
    return created


def main() -> None:
    configure_logging()
    init_db()
    with SessionLocal() as db:
        created = seed_teachers(db)
    logger.info("Seeded %d teachers", created)


if __name__ == "__main__":
    main()

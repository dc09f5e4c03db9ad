from __future__ import annotations

SYSTEM_PROMPT = "You are a helpful assistant that creates engaging teacher profiles."


def build_teacher_description_messages(
    *,
    full_name: str | None,
    occupation: str,
    years_of_experience: int,
    skill_name: str,
    proficiency_level: str,
    expertise_areas: list[str],
    query: str,
) -> list[dict[str, str]]:
    expertise = ", ".join(area for area in expertise_areas if area) or "Various areas"
    user_prompt = "\n".join(
        [
            "Generate a brief, engaging 2-sentence description for a teacher with these details:",
            f"Name: {full_name or 'Experienced teacher'}",
            f"Occupation: {occupation}",
            f"Experience: {years_of_experience} years",
            f"Skill: {skill_name} ({proficiency_level})",
            f"Expertise: {expertise}",
            "",
            f"Make it professional and highlight why they're a great match for learning {query}.",
        ]
    )
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ]

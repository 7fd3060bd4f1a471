#!/usr/bin/env python3
"""
Static suggestion lists for the skill and job title inputs.
"""

from typing import Iterable, List

from core.utils import fold_skill_name, folded_skill_set

POPULAR_SKILLS = [
    "React", "TypeScript", "JavaScript", "Python", "Node.js",
    "Java", "AWS", "Docker", "Kubernetes", "GraphQL",
    "MongoDB", "PostgreSQL", "Redux", "Next.js", "Vue.js",
    "Angular", "Django", "Flask", "Spring Boot", "Git",
]

JOB_TITLE_SUGGESTIONS = [
    "Frontend Developer", "Backend Developer", "Full Stack Developer",
    "Software Engineer", "DevOps Engineer", "Data Scientist",
    "Product Manager", "UI/UX Designer", "Mobile Developer", "Cloud Architect",
]

DEFAULT_SUGGESTION_LIMIT = 8


def _filter(candidates: Iterable[str], query: str) -> List[str]:
    needle = fold_skill_name(query or "")
    return [c for c in candidates if needle in fold_skill_name(c)]


def suggest_skills(
    query: str = "",
    current_skills: Iterable[str] = (),
    limit: int = DEFAULT_SUGGESTION_LIMIT
) -> List[str]:
    """Popular skills containing query (case-insensitive), minus the ones already held."""
    held = folded_skill_set(current_skills)
    matches = [s for s in _filter(POPULAR_SKILLS, query) if fold_skill_name(s) not in held]
    return matches[:limit]


def suggest_job_titles(query: str = "", limit: int = DEFAULT_SUGGESTION_LIMIT) -> List[str]:
    return _filter(JOB_TITLE_SUGGESTIONS, query)[:limit]

#!/usr/bin/env python3
"""
Skill Matcher - Compare a candidate's skills with a job's required skills.

Single source of truth for matching/missing skill partitioning and the
match percentage shown everywhere (cards, ranking, export).
"""
from typing import Iterable, List, Sequence

from core.matcher.models import JobListing, SkillMatchResult
from core.utils import fold_skill_name, folded_skill_set, round_half_up_percentage

# Match percentage of a job that requires nothing: no gap exists.
EMPTY_REQUIREMENTS_PERCENTAGE = 100


def calculate_skill_match(
    candidate_skills: Iterable[str],
    job: JobListing
) -> SkillMatchResult:
    """
    Partition a job's required skills into matching and missing skills.

    Comparison is case-insensitive on skill names. Both partitions keep the
    job's requirement order, are disjoint, and together equal the
    requirements.

    Args:
        candidate_skills: Skill names the candidate declared
        job: Job listing to compare against

    Returns:
        SkillMatchResult with match percentage in [0, 100]
    """
    held = folded_skill_set(candidate_skills)

    matching = []
    missing = []
    for skill in job.required_skills:
        if fold_skill_name(skill.name) in held:
            matching.append(skill)
        else:
            missing.append(skill)

    total = len(job.required_skills)
    if total == 0:
        percentage = EMPTY_REQUIREMENTS_PERCENTAGE
    else:
        percentage = round_half_up_percentage(len(matching), total)

    return SkillMatchResult(
        job=job,
        matching_skills=tuple(matching),
        missing_skills=tuple(missing),
        match_percentage=percentage,
    )


class SkillMatcher:
    """Match one candidate's skill set against many jobs."""

    def __init__(self, candidate_skills: Sequence[str]):
        self.candidate_skills = list(candidate_skills)

    def match(self, job: JobListing) -> SkillMatchResult:
        return calculate_skill_match(self.candidate_skills, job)

    def match_all(self, jobs: Iterable[JobListing]) -> List[SkillMatchResult]:
        return [self.match(job) for job in jobs]

#!/usr/bin/env python3
"""
Matcher Models - Skills, job listings and skill match results.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class Skill(BaseModel):
    """A catalog skill. Identity is the id; matching compares names case-insensitively."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="skill_id")
    name: str = Field(alias="skill_name", min_length=1)


class JobListing(BaseModel):
    """
    Snapshot of a job posting as returned by the job catalog.

    Accepts both the catalog wire names (position_id, job_title, skills)
    and the attribute names.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="position_id")
    title: str = Field(alias="job_title")
    detail_link: Optional[str] = Field(default=None, alias="job_detail_link")
    required_skills: Tuple[Skill, ...] = Field(default=(), alias="skills")

    @field_validator("required_skills")
    @classmethod
    def _drop_duplicate_skill_ids(cls, skills: Tuple[Skill, ...]) -> Tuple[Skill, ...]:
        seen = set()
        unique = []
        for skill in skills:
            if skill.id in seen:
                logger.warning(f"Dropping duplicate skill id {skill.id} ({skill.name})")
                continue
            seen.add(skill.id)
            unique.append(skill)
        return tuple(unique)


@dataclass(frozen=True)
class SkillMatchResult:
    """Outcome of comparing a candidate's skills with one job's requirements."""
    job: JobListing
    matching_skills: Tuple[Skill, ...]
    missing_skills: Tuple[Skill, ...]
    match_percentage: int

    @property
    def has_gaps(self) -> bool:
        return len(self.missing_skills) > 0

    @property
    def missing_count(self) -> int:
        return len(self.missing_skills)

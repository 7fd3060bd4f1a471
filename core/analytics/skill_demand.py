#!/usr/bin/env python3
"""
Skill Demand Aggregator - How often each skill is required across a cohort.

Skill names are grouped case-insensitively. The first-seen casing is used for
display and has_skill is decided on first encounter.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from core.matcher import JobListing
from core.utils import fold_skill_name, folded_skill_set

logger = logging.getLogger(__name__)

DEFAULT_TOP_SKILLS = 10


@dataclass(frozen=True)
class SkillFrequencyEntry:
    """Number of jobs (occurrences) requiring a skill, and whether the candidate has it."""
    skill_name: str
    count: int
    has_skill: bool


@dataclass(frozen=True)
class SkillDemandReport:
    """Skill frequencies sorted by count descending; ties keep encounter order."""
    entries: List[SkillFrequencyEntry] = field(default_factory=list)

    def top(self, limit: int = DEFAULT_TOP_SKILLS) -> List[SkillFrequencyEntry]:
        """Compact view for charts."""
        return self.entries[:limit]

    @property
    def skills_to_learn(self) -> int:
        """Number of demanded skills the candidate does not have yet."""
        return sum(1 for entry in self.entries if not entry.has_skill)


@dataclass
class _Tally:
    skill_name: str
    has_skill: bool
    count: int = 0


def aggregate_skill_demand(
    cohort: Iterable[JobListing],
    candidate_skills: Sequence[str]
) -> SkillDemandReport:
    """
    Tally required skills across every job of a cohort.

    Args:
        cohort: Jobs of one cohort
        candidate_skills: Skill names the candidate declared

    Returns:
        SkillDemandReport with one entry per distinct (case-insensitive) name
    """
    held = folded_skill_set(candidate_skills)
    tallies: Dict[str, _Tally] = {}

    for job in cohort:
        for skill in job.required_skills:
            key = fold_skill_name(skill.name)
            tally = tallies.get(key)
            if tally is None:
                tally = _Tally(skill_name=skill.name, has_skill=key in held)
                tallies[key] = tally
            tally.count += 1

    # stable sort: equal counts stay in encounter order
    ordered = sorted(tallies.values(), key=lambda t: -t.count)
    return SkillDemandReport(entries=[
        SkillFrequencyEntry(skill_name=t.skill_name, count=t.count, has_skill=t.has_skill)
        for t in ordered
    ])

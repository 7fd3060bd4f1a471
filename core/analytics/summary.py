#!/usr/bin/env python3
"""
Cohort summary - match distribution buckets and headline numbers.
"""

from dataclasses import dataclass, field
from typing import Dict, Sequence

from core.cohort import AnalyzedJob
from core.analytics.skill_demand import SkillDemandReport


@dataclass(frozen=True)
class DistributionThresholds:
    """Lower bounds (inclusive) of each match bucket."""
    excellent: int = 80
    good: int = 60
    fair: int = 40


def classify_match(percentage: int, thresholds: DistributionThresholds = DistributionThresholds()) -> str:
    """Bucket name for a match percentage."""
    if percentage >= thresholds.excellent:
        return 'excellent'
    if percentage >= thresholds.good:
        return 'good'
    if percentage >= thresholds.fair:
        return 'fair'
    return 'needs_work'


def match_distribution(
    cohort: Sequence[AnalyzedJob],
    thresholds: DistributionThresholds = DistributionThresholds()
) -> Dict[str, int]:
    """Count jobs per match bucket. Every bucket is present, possibly with 0."""
    distribution = {'excellent': 0, 'good': 0, 'fair': 0, 'needs_work': 0}
    for entry in cohort:
        distribution[classify_match(entry.match.match_percentage, thresholds)] += 1
    return distribution


@dataclass(frozen=True)
class CohortSummary:
    """Headline numbers shown above the analytics charts."""
    job_count: int
    candidate_skill_count: int
    skills_to_learn: int
    average_match: int
    distribution: Dict[str, int] = field(default_factory=dict)


def summarize_cohort(
    cohort: Sequence[AnalyzedJob],
    candidate_skills: Sequence[str],
    demand: SkillDemandReport,
    thresholds: DistributionThresholds = DistributionThresholds()
) -> CohortSummary:
    """
    Summarize a cohort. An empty cohort has an average match of 0.

    Args:
        cohort: Analyzed jobs
        candidate_skills: Candidate skill names
        demand: Skill demand report of the same cohort
        thresholds: Bucket boundaries

    Returns:
        CohortSummary
    """
    if cohort:
        total = sum(entry.match.match_percentage for entry in cohort)
        average = (total * 2 + len(cohort)) // (2 * len(cohort))
    else:
        average = 0

    return CohortSummary(
        job_count=len(cohort),
        candidate_skill_count=len(candidate_skills),
        skills_to_learn=demand.skills_to_learn,
        average_match=average,
        distribution=match_distribution(cohort, thresholds),
    )

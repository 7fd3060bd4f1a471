#!/usr/bin/env python3
"""
Cohort analysis - precompute match data (and normalized scores) per job.

A cohort is analyzed synchronously over the complete response; ranking,
skill demand and export all consume the resulting AnalyzedJob list.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from core.matcher import JobListing, SkillMatchResult, calculate_skill_match
from core.scorer import ScoredJob, ScoreNormalizer


@dataclass(frozen=True)
class AnalyzedJob:
    """One cohort entry with its precomputed match and optional normalized score."""
    job: JobListing
    match: SkillMatchResult
    score_percentage: Optional[float] = None

    @property
    def title(self) -> str:
        return self.job.title

    @property
    def is_scored(self) -> bool:
        return isinstance(self.job, ScoredJob)

    @property
    def ranking_percentage(self) -> float:
        """Normalized score for scored cohorts, match percentage otherwise."""
        if self.score_percentage is not None:
            return self.score_percentage
        return float(self.match.match_percentage)


def analyze_jobs(
    jobs: Sequence[JobListing],
    candidate_skills: Sequence[str]
) -> List[AnalyzedJob]:
    """Analyze an unscored cohort (e.g. a skill search result)."""
    return [
        AnalyzedJob(job=job, match=calculate_skill_match(candidate_skills, job))
        for job in jobs
    ]


def analyze_scored_cohort(
    cohort: Sequence[ScoredJob],
    candidate_skills: Sequence[str]
) -> List[AnalyzedJob]:
    """
    Analyze a single-algorithm recommendation cohort.

    Raises:
        MixedCohortError: If the cohort mixes algorithms.
    """
    normalizer = ScoreNormalizer.from_cohort(cohort)
    return [
        AnalyzedJob(
            job=job,
            match=calculate_skill_match(candidate_skills, job),
            score_percentage=normalizer.percentage(job.score),
        )
        for job in cohort
    ]

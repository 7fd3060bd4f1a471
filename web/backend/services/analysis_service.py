#!/usr/bin/env python3
"""
Analysis service - shapes skill gap analysis results for the API.
"""

import logging
from typing import List, Optional

from core.cohort import AnalyzedJob, analyze_jobs
from core.matcher import JobListing
from core.ranking import SearchFilters, rank_cohort
from core.scorer import format_score
from core.skill_gap_service import CohortSnapshot, SkillGapService
from ..models.responses import (
    CohortResponse,
    FavoriteResponse,
    JobCard,
    RecommendationResponse,
    SkillDemandItem,
    SkillDemandResponse,
    SummaryResponse,
    TopJobView,
)
from ..exceptions import JobNotFoundException

logger = logging.getLogger(__name__)


class AnalysisService:
    """Service converting cohort analysis into response models."""

    def __init__(self, skill_gap_service: SkillGapService):
        self.skill_gap_service = skill_gap_service

    def job_card(self, entry: AnalyzedJob) -> JobCard:
        job = entry.job
        return JobCard(
            job_id=job.id,
            title=job.title,
            detail_link=job.detail_link,
            match_percentage=entry.match.match_percentage,
            score_percentage=entry.score_percentage,
            score=format_score(job.score) if entry.is_scored else None,
            required_skills=[s.name for s in job.required_skills],
            matching_skills=[s.name for s in entry.match.matching_skills],
            missing_skills=[s.name for s in entry.match.missing_skills],
            is_favorite=self.skill_gap_service.is_favorite(job.id),
        )

    def listing_cards(self, jobs: List[JobListing]) -> List[JobCard]:
        """Cards for catalog listings, matched against the session's skills."""
        analyzed = analyze_jobs(jobs, self.skill_gap_service.candidate_skills)
        return [self.job_card(entry) for entry in analyzed]

    def cohort_response(
        self,
        snapshot: Optional[CohortSnapshot] = None,
        filters: Optional[SearchFilters] = None
    ) -> CohortResponse:
        """
        Ranked view of a cohort (the current one by default).

        Args:
            snapshot: Cohort to present
            filters: Sort order and gap filter; configured defaults if omitted

        Returns:
            CohortResponse
        """
        service = self.skill_gap_service
        snapshot = snapshot or service.require_current()
        filters = filters or service.default_filters()
        ranked = rank_cohort(snapshot.analyzed, filters)

        return CohortResponse(
            success=True,
            kind=snapshot.kind.value,
            generation=snapshot.generation,
            query=snapshot.query,
            algorithm=snapshot.algorithm.value if snapshot.algorithm else None,
            sort_by=filters.sort_by.value,
            show_only_missing=filters.show_only_missing,
            count=len(ranked),
            jobs=[self.job_card(entry) for entry in ranked],
        )

    def recommendation_response(self, snapshot: CohortSnapshot) -> RecommendationResponse:
        recommendation = snapshot.recommendation
        top = recommendation.top_job
        ranked = rank_cohort(snapshot.analyzed, self.skill_gap_service.default_filters())

        return RecommendationResponse(
            success=True,
            algorithm=recommendation.algorithm.value,
            algorithm_label=recommendation.algorithm.label,
            generation=snapshot.generation,
            top_job=TopJobView(
                job_id=top.id,
                title=top.title,
                score=format_score(top.score),
                matching_skills=[s.name for s in top.matching_skills],
                skills_to_learn=[s.name for s in top.missing_skills],
            ),
            count=len(ranked),
            jobs=[self.job_card(entry) for entry in ranked],
        )

    def skill_demand_response(self, full: bool = False) -> SkillDemandResponse:
        report = self.skill_gap_service.skill_demand()
        limit = self.skill_gap_service.analysis_config.top_skills_limit
        entries = report.entries if full else report.top(limit)

        return SkillDemandResponse(
            success=True,
            skills_to_learn=report.skills_to_learn,
            skills=[
                SkillDemandItem(
                    skill_name=entry.skill_name,
                    count=entry.count,
                    has_skill=entry.has_skill,
                )
                for entry in entries
            ],
        )

    def summary_response(self) -> SummaryResponse:
        summary = self.skill_gap_service.summary()
        return SummaryResponse(
            success=True,
            summary={
                'job_count': summary.job_count,
                'candidate_skill_count': summary.candidate_skill_count,
                'skills_to_learn': summary.skills_to_learn,
                'average_match': summary.average_match,
                'match_distribution': summary.distribution,
            },
        )

    def toggle_favorite(self, job_id: int) -> FavoriteResponse:
        """
        Toggle a job of the current cohort as favorite.

        Raises:
            JobNotFoundException: If the job is not in the current cohort.
        """
        service = self.skill_gap_service
        snapshot = service.require_current()
        if not any(job.id == job_id for job in snapshot.jobs):
            raise JobNotFoundException(f"Job {job_id} is not part of the current results")

        is_favorite = service.toggle_favorite(job_id)
        logger.info(f"Job {job_id} favorite={is_favorite}")
        return FavoriteResponse(
            success=True,
            job_id=job_id,
            is_favorite=is_favorite,
            favorites=service.favorites,
        )

#!/usr/bin/env python3
"""
Job endpoints - skill search, algorithm recommendations and ranked views.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.api import CatalogApi
from core.ranking import SearchFilters, SortBy
from core.scorer import ScoringAlgorithm
from core.skill_gap_service import SkillGapService
from ..dependencies import get_analysis_service, get_catalog_api, get_skill_gap_service
from ..services.analysis_service import AnalysisService
from ..models.requests import SearchBody
from ..models.responses import (
    CohortResponse,
    FavoriteResponse,
    JobsPageResponse,
    RecommendationResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.post("/search", response_model=CohortResponse)
async def search_jobs(
    body: SearchBody,
    service: SkillGapService = Depends(get_skill_gap_service),
    analysis: AnalysisService = Depends(get_analysis_service)
):
    """
    Search jobs for a title and compare them with the given skills.

    Resubmitting while a search is in flight supersedes the earlier one;
    the earlier request answers 409.
    """
    snapshot = await service.search(body.job_title, body.skills)
    return analysis.cohort_response(snapshot)


@router.get("/recommendation", response_model=RecommendationResponse)
async def get_recommendation(
    algorithm: ScoringAlgorithm = Query(default=ScoringAlgorithm.LLR),
    service: SkillGapService = Depends(get_skill_gap_service),
    analysis: AnalysisService = Depends(get_analysis_service)
):
    """
    Recommendation for the logged-in user's profile skills.

    Scores are only comparable within one algorithm's cohort.
    """
    snapshot = await service.recommend(algorithm)
    return analysis.recommendation_response(snapshot)


@router.get("/ranked", response_model=CohortResponse)
def get_ranked(
    sort_by: Optional[SortBy] = Query(default=None, description="Defaults to the configured order"),
    show_only_missing: bool = Query(default=False, description="Only jobs with skill gaps"),
    service: SkillGapService = Depends(get_skill_gap_service),
    analysis: AnalysisService = Depends(get_analysis_service)
):
    """Re-rank the current cohort without another upstream call."""
    filters = SearchFilters(
        sort_by=sort_by or service.analysis_config.default_sort_by,
        show_only_missing=show_only_missing,
    )
    return analysis.cohort_response(filters=filters)


@router.get("", response_model=JobsPageResponse)
async def list_jobs(
    page: int = Query(default=1, ge=1),
    size: int = Query(default=20, ge=1, le=100),
    catalog: CatalogApi = Depends(get_catalog_api),
    analysis: AnalysisService = Depends(get_analysis_service)
):
    """Browse the job catalog, matched against the current skills."""
    result = await catalog.list_jobs(page=page, size=size)
    return JobsPageResponse(
        success=True,
        total=result.total,
        page=result.page,
        size=result.size,
        jobs=analysis.listing_cards(result.items),
    )


@router.post("/{job_id}/favorite", response_model=FavoriteResponse)
def toggle_favorite(job_id: int, analysis: AnalysisService = Depends(get_analysis_service)):
    return analysis.toggle_favorite(job_id)

#!/usr/bin/env python3
"""
Analytics endpoints - skill demand and cohort summary.
"""

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_analysis_service
from ..services.analysis_service import AnalysisService
from ..models.responses import SkillDemandResponse, SummaryResponse

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/skill-demand", response_model=SkillDemandResponse)
def get_skill_demand(
    full: bool = Query(default=False, description="All skills instead of the top ones"),
    analysis: AnalysisService = Depends(get_analysis_service)
):
    """
    How often each skill is required across the current cohort.

    Sorted by count, highest first; has_skill marks skills the candidate holds.
    """
    return analysis.skill_demand_response(full=full)


@router.get("/summary", response_model=SummaryResponse)
def get_summary(analysis: AnalysisService = Depends(get_analysis_service)):
    """
    Headline numbers and match distribution of the current cohort.

    Buckets: excellent (80-100), good (60-79), fair (40-59), needs_work (0-39).
    """
    return analysis.summary_response()

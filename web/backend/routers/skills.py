#!/usr/bin/env python3
"""
Skill endpoints - catalog skills, profile skills and suggestions.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.api import CatalogApi
from core.skill_gap_service import SkillGapService
from core.suggestions import suggest_job_titles, suggest_skills
from ..dependencies import get_catalog_api, get_skill_gap_service
from ..models.requests import CreateSkillBody
from ..models.responses import (
    MessageResponse,
    SkillItem,
    SkillsPageResponse,
    SuggestionsResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/skills", tags=["skills"])


@router.get("", response_model=SkillsPageResponse)
async def list_skills(
    page: int = Query(default=1, ge=1),
    size: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = Query(default=None, description="Filter by name"),
    catalog: CatalogApi = Depends(get_catalog_api)
):
    """List catalog skills, paginated."""
    result = await catalog.list_skills(page=page, size=size, search=search)
    return SkillsPageResponse(
        success=True,
        total=result.total,
        page=result.page,
        size=result.size,
        skills=[SkillItem(skill_id=s.id, skill_name=s.name) for s in result.items],
    )


@router.post("", response_model=SkillItem)
async def create_skill(body: CreateSkillBody, catalog: CatalogApi = Depends(get_catalog_api)):
    skill = await catalog.create_skill(body.skill_name)
    return SkillItem(skill_id=skill.id, skill_name=skill.name)


@router.post("/mine/{skill_id}", response_model=MessageResponse)
async def add_profile_skill(skill_id: int, catalog: CatalogApi = Depends(get_catalog_api)):
    """Add a catalog skill to the user's profile."""
    await catalog.add_user_skill(skill_id)
    return MessageResponse(success=True, message=f"Skill {skill_id} added")


@router.delete("/mine/{skill_id}", response_model=MessageResponse)
async def remove_profile_skill(skill_id: int, catalog: CatalogApi = Depends(get_catalog_api)):
    await catalog.remove_user_skill(skill_id)
    return MessageResponse(success=True, message=f"Skill {skill_id} removed")


@router.get("/suggestions", response_model=SuggestionsResponse)
def suggestions(
    q: str = Query(default="", description="Case-insensitive substring"),
    service: SkillGapService = Depends(get_skill_gap_service)
):
    """
    Popular skill and job title suggestions.

    Skills already on the candidate's list are left out.
    """
    return SuggestionsResponse(
        success=True,
        skills=suggest_skills(q, service.candidate_skills),
        job_titles=suggest_job_titles(q),
    )

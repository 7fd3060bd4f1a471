#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Union


class SkillItem(BaseModel):
    """A catalog skill."""
    skill_id: int
    skill_name: str


class JobCard(BaseModel):
    """One job of the current cohort with its skill match."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "job_id": 42,
                "title": "Frontend Developer",
                "detail_link": "https://jobs.example.com/42",
                "match_percentage": 67,
                "score_percentage": 100.0,
                "score": "Cosine Similarity: 0.82",
                "required_skills": ["React", "TypeScript", "SQL"],
                "matching_skills": ["React", "TypeScript"],
                "missing_skills": ["SQL"],
                "is_favorite": False
            }
        }
    )

    job_id: int
    title: str
    detail_link: Optional[str] = None
    match_percentage: int = Field(ge=0, le=100)
    score_percentage: Optional[float] = Field(None, ge=0, le=100)
    score: Optional[str] = None
    required_skills: List[str] = Field(default_factory=list)
    matching_skills: List[str] = Field(default_factory=list)
    missing_skills: List[str] = Field(default_factory=list)
    is_favorite: bool = False


class CohortResponse(BaseModel):
    """Ranked view of the current cohort."""
    success: bool
    kind: str
    generation: int
    query: Optional[str] = None
    algorithm: Optional[str] = None
    sort_by: str
    show_only_missing: bool = False
    count: int
    jobs: List[JobCard]


class TopJobView(BaseModel):
    """Best recommendation with the skills still to learn."""
    job_id: int
    title: str
    score: str
    matching_skills: List[str] = Field(default_factory=list)
    skills_to_learn: List[str] = Field(default_factory=list)


class RecommendationResponse(BaseModel):
    success: bool
    algorithm: str
    algorithm_label: str
    generation: int
    top_job: TopJobView
    count: int
    jobs: List[JobCard]


class SkillDemandItem(BaseModel):
    skill_name: str
    count: int = Field(ge=1)
    has_skill: bool


class SkillDemandResponse(BaseModel):
    success: bool
    skills_to_learn: int
    skills: List[SkillDemandItem]


class SummaryResponse(BaseModel):
    success: bool
    summary: Dict[str, Union[int, Dict[str, int]]]


class UserResponse(BaseModel):
    success: bool
    user_id: Union[int, str]
    email: str
    username: Optional[str] = None
    job_title: Optional[str] = None
    skills: List[SkillItem] = Field(default_factory=list)


class MessageResponse(BaseModel):
    success: bool
    message: str


class SkillsPageResponse(BaseModel):
    success: bool
    total: int
    page: int
    size: int
    skills: List[SkillItem]


class JobsPageResponse(BaseModel):
    success: bool
    total: int
    page: int
    size: int
    jobs: List[JobCard]


class SuggestionsResponse(BaseModel):
    success: bool
    skills: List[str] = Field(default_factory=list)
    job_titles: List[str] = Field(default_factory=list)


class FavoriteResponse(BaseModel):
    success: bool
    job_id: int
    is_favorite: bool
    favorites: List[int]

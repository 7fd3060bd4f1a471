#!/usr/bin/env python3
"""
Skill and job catalog endpoints, including algorithm recommendations.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from core.api.auth import validate_payload
from core.api.client import ApiClient
from core.exceptions import NotFoundError, ValidationError
from core.matcher import JobListing, Skill
from core.scorer import Recommendation, ScoredJob, ScoringAlgorithm, TopJob, make_score

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Score field carried by each recommendation endpoint. Chosen by the
# algorithm that was requested, never by which key a payload contains.
COHORT_SCORE_FIELDS = {
    ScoringAlgorithm.LLR: "lls_score",
    ScoringAlgorithm.COSINE: "cosine_score",
}
TOP_JOB_SCORE_FIELDS = {
    ScoringAlgorithm.LLR: "log_likelihood",
    ScoringAlgorithm.COSINE: "cosine_similarity",
}

NO_SKILLS_MESSAGE = "Add skills to your profile to get job recommendations."


class Page(BaseModel, Generic[T]):
    """One page of a paginated catalog listing."""
    items: List[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    size: int = 20


class SkillSearchRequest(BaseModel):
    """Payload of a skill-gap search."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    job_title: str = Field(min_length=1)
    current_skills: List[str] = Field(default_factory=list)

    @field_validator("current_skills")
    @classmethod
    def _clean_skills(cls, skills: List[str]) -> List[str]:
        return [s.strip() for s in skills if s and s.strip()]

    @classmethod
    def build(cls, job_title: str, current_skills: Sequence[str]) -> "SkillSearchRequest":
        """
        Raises:
            ValidationError: Blank job title.
        """
        return validate_payload(cls, job_title=job_title, current_skills=list(current_skills))


class CreateSkillRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    skill_name: str = Field(min_length=1)


def _score_value(entry: Dict[str, Any], field_name: str, label: str) -> float:
    value = entry.get(field_name)
    if value is None:
        raise ValidationError(f"{label} has no {field_name}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{label} has a non-numeric {field_name}: {value!r}") from e


def parse_recommendation(payload: Any, algorithm: ScoringAlgorithm) -> Recommendation:
    """
    Convert a recommendation response into a tagged Recommendation.

    Wire shape:
        {"job": {"job_id", "job_title", <top score>, "skills": {"matching", "recommended"}},
         "all_job_scores": [{"job_id", "title", <score>, "skills": [{skill_id, skill_name}]}]}

    Raises:
        ValidationError: If the payload does not have that shape.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("job"), dict):
        raise ValidationError("Recommendation response has no top job")

    top = payload["job"]
    cohort_field = COHORT_SCORE_FIELDS[algorithm]
    top_field = TOP_JOB_SCORE_FIELDS[algorithm]

    try:
        top_skills = top.get("skills") or {}
        top_job = TopJob(
            id=top.get("job_id"),
            title=top.get("job_title"),
            score=make_score(algorithm, _score_value(top, top_field, "Top job")),
            matching_skills=[Skill.model_validate(s) for s in top_skills.get("matching", [])],
            missing_skills=[Skill.model_validate(s) for s in top_skills.get("recommended", [])],
        )

        cohort = []
        for entry in payload.get("all_job_scores") or []:
            label = f"Job {entry.get('job_id')}"
            cohort.append(ScoredJob(
                id=entry.get("job_id"),
                title=entry.get("title"),
                skills=entry.get("skills") or [],
                score=make_score(algorithm, _score_value(entry, cohort_field, label)),
            ))
    except PydanticValidationError as e:
        raise ValidationError(f"Malformed recommendation response: {e.error_count()} error(s)") from e

    return Recommendation(algorithm=algorithm, top_job=top_job, cohort=cohort)


class CatalogApi:
    """Wrapper around the skill, user-skill and job endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    async def list_skills(
        self,
        page: int = 1,
        size: int = 20,
        search: Optional[str] = None
    ) -> Page[Skill]:
        params: Dict[str, Any] = {"page": page, "size": size}
        if search:
            params["search"] = search
        payload = await self.client.get("/skills/", params=params)
        return self._parse_page(payload, Page[Skill])

    async def create_skill(self, name: str) -> Skill:
        request = validate_payload(CreateSkillRequest, skill_name=name)
        payload = await self.client.post("/skills/", json=request.model_dump())
        try:
            return Skill.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError("Malformed skill in create response") from e

    async def add_user_skill(self, skill_id: int) -> None:
        await self.client.post(f"/users/me/skills/{skill_id}", json={})
        logger.info(f"Added skill {skill_id} to profile")

    async def remove_user_skill(self, skill_id: int) -> None:
        await self.client.delete(f"/users/me/skills/{skill_id}")
        logger.info(f"Removed skill {skill_id} from profile")

    async def list_jobs(self, page: int = 1, size: int = 20) -> Page[JobListing]:
        payload = await self.client.get("/jobs/", params={"page": page, "size": size})
        return self._parse_page(payload, Page[JobListing])

    async def search_jobs(self, request: SkillSearchRequest) -> List[JobListing]:
        """Fetch the job cohort for a skill-gap search."""
        payload = await self.client.post("/recommend-skills/", json=request.model_dump())
        if not isinstance(payload, list):
            raise ValidationError("Skill search response is not a list of jobs")
        try:
            jobs = [JobListing.model_validate(item) for item in payload]
        except PydanticValidationError as e:
            raise ValidationError(f"Malformed job in search response: {e.error_count()} error(s)") from e
        logger.info(f"Skill search for '{request.job_title}' returned {len(jobs)} jobs")
        return jobs

    async def get_recommendation(self, algorithm: ScoringAlgorithm) -> Recommendation:
        """
        Fetch the recommendation cohort for one algorithm.

        Raises:
            NotFoundError: The user has no skills yet.
        """
        try:
            payload = await self.client.get(f"/jobs/recommend/{algorithm.value}")
        except NotFoundError as e:
            raise NotFoundError(NO_SKILLS_MESSAGE, status_code=404) from e

        recommendation = parse_recommendation(payload, algorithm)
        logger.info(
            f"{algorithm.label} recommendation: top job '{recommendation.top_job.title}', "
            f"cohort of {len(recommendation.cohort)}"
        )
        return recommendation

    @staticmethod
    def _parse_page(payload: Any, page_cls):
        try:
            return page_cls.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(f"Malformed page: {e.error_count()} error(s)") from e

#!/usr/bin/env python3
"""
Scoring Models - Algorithm-tagged job scores and recommendation results.

A score is always one explicit variant, LlrScore or CosineScore. Display and
normalization dispatch on the ``kind`` tag; nothing inspects which score
field a payload happens to carry.
"""

from enum import Enum
from typing import Annotated, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from core.matcher.models import JobListing, Skill


class ScoringAlgorithm(str, Enum):
    """Similarity algorithms offered by the recommendation endpoints."""
    LLR = "llr"
    COSINE = "cosine"

    @property
    def label(self) -> str:
        return ALGORITHM_LABELS[self]


ALGORITHM_LABELS = {
    ScoringAlgorithm.LLR: "Log-Likelihood Ratio",
    ScoringAlgorithm.COSINE: "Cosine Similarity",
}


class LlrScore(BaseModel):
    """Log-likelihood ratio score; unbounded, higher is better."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["llr"] = "llr"
    value: float

    @property
    def algorithm(self) -> ScoringAlgorithm:
        return ScoringAlgorithm(self.kind)


class CosineScore(BaseModel):
    """Cosine similarity score."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["cosine"] = "cosine"
    value: float

    @property
    def algorithm(self) -> ScoringAlgorithm:
        return ScoringAlgorithm(self.kind)


JobScore = Annotated[Union[LlrScore, CosineScore], Field(discriminator="kind")]


def make_score(algorithm: ScoringAlgorithm, value: float) -> Union[LlrScore, CosineScore]:
    """Build the score variant for an algorithm."""
    if algorithm is ScoringAlgorithm.LLR:
        return LlrScore(value=value)
    return CosineScore(value=value)


def format_score(score: Union[LlrScore, CosineScore]) -> str:
    """Human readable score, e.g. 'Log-Likelihood Ratio: 12.34'."""
    return f"{score.algorithm.label}: {score.value:.2f}"


class ScoredJob(JobListing):
    """Job listing plus the raw score one algorithm assigned to it."""
    score: JobScore

    @property
    def algorithm(self) -> ScoringAlgorithm:
        return self.score.algorithm

    @property
    def raw_score(self) -> float:
        return self.score.value


class TopJob(BaseModel):
    """Best match of a recommendation, with the skills the candidate still needs."""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    score: JobScore
    matching_skills: Tuple[Skill, ...] = ()
    missing_skills: Tuple[Skill, ...] = ()


class Recommendation(BaseModel):
    """One recommendation response: the top job plus the cohort it was chosen from."""
    model_config = ConfigDict(frozen=True)

    algorithm: ScoringAlgorithm
    top_job: TopJob
    cohort: List[ScoredJob] = Field(default_factory=list)

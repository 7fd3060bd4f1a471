#!/usr/bin/env python3
"""
Score Normalizer - Min-max scaling of raw scores within one cohort.

Percentages are only meaningful relative to the cohort they were computed
over. A cohort always comes from a single algorithm; LLR and Cosine
percentages must never be compared with each other.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from core.exceptions import MixedCohortError
from core.scorer.models import CosineScore, LlrScore, ScoredJob, ScoringAlgorithm

logger = logging.getLogger(__name__)

# Percentage assigned to every score when the cohort has no spread.
FLAT_COHORT_PERCENTAGE = 100.0


def _min_max_percentage(value: float, score_min: float, score_max: float) -> float:
    if score_max == score_min:
        return FLAT_COHORT_PERCENTAGE
    percentage = (value - score_min) / (score_max - score_min) * 100
    return max(0.0, min(100.0, percentage))


def normalize_scores(scores: Sequence[float]) -> List[float]:
    """
    Map raw scores to percentages of the cohort's range.

    [10, 20, 30] -> [0.0, 50.0, 100.0]; equal scores all map to 100.0;
    an empty sequence maps to an empty list.
    """
    if not scores:
        return []
    score_min = min(scores)
    score_max = max(scores)
    return [_min_max_percentage(score, score_min, score_max) for score in scores]


@dataclass(frozen=True)
class ScoreNormalizer:
    """Min-max normalizer bound to one algorithm's cohort."""
    algorithm: Optional[ScoringAlgorithm]
    score_min: float
    score_max: float

    @classmethod
    def from_cohort(cls, cohort: Sequence[ScoredJob]) -> "ScoreNormalizer":
        """
        Build a normalizer from a scored cohort.

        Raises:
            MixedCohortError: If the cohort mixes algorithms.
        """
        if not cohort:
            return cls(algorithm=None, score_min=0.0, score_max=0.0)

        algorithms = {job.algorithm for job in cohort}
        if len(algorithms) > 1:
            names = ", ".join(sorted(a.value for a in algorithms))
            raise MixedCohortError(f"Cannot normalize a cohort mixing algorithms: {names}")

        values = [job.raw_score for job in cohort]
        normalizer = cls(
            algorithm=cohort[0].algorithm,
            score_min=min(values),
            score_max=max(values),
        )
        logger.debug(
            f"Normalizer for {normalizer.algorithm.value}: "
            f"min={normalizer.score_min}, max={normalizer.score_max}, n={len(values)}"
        )
        return normalizer

    def percentage(self, score: Union[LlrScore, CosineScore]) -> float:
        """
        Percentage of a score within this cohort's range.

        Raises:
            MixedCohortError: If the score belongs to another algorithm.
        """
        if self.algorithm is not None and score.algorithm is not self.algorithm:
            raise MixedCohortError(
                f"{score.kind} score cannot be normalized against "
                f"a {self.algorithm.value} cohort"
            )
        return _min_max_percentage(score.value, self.score_min, self.score_max)

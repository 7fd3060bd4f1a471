#!/usr/bin/env python3
"""
Scoring Module - Algorithm-tagged scores and cohort normalization.

Public API:
- ScoringAlgorithm: LLR or Cosine
- LlrScore / CosineScore: the two score variants (JobScore union)
- ScoredJob, TopJob, Recommendation: recommendation data structures
- ScoreNormalizer, normalize_scores: min-max scaling within one cohort
"""

from core.scorer.models import (
    ScoringAlgorithm, LlrScore, CosineScore, JobScore, ScoredJob,
    TopJob, Recommendation, make_score, format_score
)
from core.scorer.normalizer import ScoreNormalizer, normalize_scores

__all__ = [
    'ScoringAlgorithm', 'LlrScore', 'CosineScore', 'JobScore', 'ScoredJob',
    'TopJob', 'Recommendation', 'make_score', 'format_score',
    'ScoreNormalizer', 'normalize_scores'
]

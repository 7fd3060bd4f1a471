"""Ranking Module - Sort and filter analyzed cohorts."""
from core.ranking.filters import SearchFilters, SortBy
from core.ranking.ranker import rank_cohort

__all__ = ['SearchFilters', 'SortBy', 'rank_cohort']

#!/usr/bin/env python3
"""
Ranking & Filter Engine - Order and filter an analyzed cohort.

Sorting relies on sorted(), which is stable: jobs with equal keys keep their
relative order from the input cohort. The input sequence is never mutated.
"""

import logging
from functools import lru_cache
from typing import Callable, Dict, List, Sequence

from pyuca import Collator

from core.cohort import AnalyzedJob
from core.ranking.filters import SearchFilters, SortBy

logger = logging.getLogger(__name__)


def _missing_skills_key(entry: AnalyzedJob):
    return entry.match.missing_count


def _match_percentage_desc_key(entry: AnalyzedJob):
    return -entry.ranking_percentage


@lru_cache(maxsize=1)
def _collator() -> Collator:
    """Unicode Collation Algorithm with the default table; loaded once."""
    return Collator()


def _alphabetical_key(entry: AnalyzedJob):
    # accents weigh less than letters: "Éclair" < "Eclipse" < "Zoo"
    return _collator().sort_key(entry.title.casefold())


SORT_KEYS: Dict[SortBy, Callable[[AnalyzedJob], object]] = {
    SortBy.MISSING_SKILLS_ASC: _missing_skills_key,
    SortBy.MATCH_PERCENTAGE_DESC: _match_percentage_desc_key,
    SortBy.ALPHABETICAL: _alphabetical_key,
}


def rank_cohort(
    cohort: Sequence[AnalyzedJob],
    filters: SearchFilters
) -> List[AnalyzedJob]:
    """
    Sort a cohort by the requested key, then apply the gap filter.

    Args:
        cohort: Analyzed jobs, in the order the catalog returned them
        filters: Sort order and show-only-missing flag

    Returns:
        New list; jobs without missing skills are dropped when
        show_only_missing is set.
    """
    ranked = sorted(cohort, key=SORT_KEYS[filters.sort_by])

    if filters.show_only_missing:
        ranked = [entry for entry in ranked if entry.match.has_gaps]

    logger.debug(
        f"Ranked {len(cohort)} jobs by {filters.sort_by.value}, "
        f"{len(ranked)} after filtering"
    )
    return ranked

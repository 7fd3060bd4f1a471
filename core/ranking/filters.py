#!/usr/bin/env python3
"""
Search filters - caller-owned sort/filter state passed into the ranker.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class SortBy(str, Enum):
    """Available cohort orderings."""
    MISSING_SKILLS_ASC = "missing_skills_asc"
    ALPHABETICAL = "alphabetical"
    MATCH_PERCENTAGE_DESC = "match_percentage_desc"


class SearchFilters(BaseModel):
    """Sort order and gap filter for one ranking call."""
    model_config = ConfigDict(frozen=True)

    sort_by: SortBy = SortBy.MISSING_SKILLS_ASC
    show_only_missing: bool = False

"""Matcher Module - Candidate skills vs. job requirements."""
from core.matcher.models import Skill, JobListing, SkillMatchResult
from core.matcher.skill_matcher import SkillMatcher, calculate_skill_match

__all__ = [
    'SkillMatcher', 'calculate_skill_match',
    'Skill', 'JobListing', 'SkillMatchResult'
]

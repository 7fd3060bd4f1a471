"""Analytics Module - Skill demand and cohort summaries."""
from core.analytics.skill_demand import (
    SkillFrequencyEntry, SkillDemandReport, aggregate_skill_demand, DEFAULT_TOP_SKILLS
)
from core.analytics.summary import (
    CohortSummary, DistributionThresholds, classify_match, match_distribution, summarize_cohort
)

__all__ = [
    'SkillFrequencyEntry', 'SkillDemandReport', 'aggregate_skill_demand', 'DEFAULT_TOP_SKILLS',
    'CohortSummary', 'DistributionThresholds', 'classify_match', 'match_distribution',
    'summarize_cohort'
]

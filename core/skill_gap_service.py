#!/usr/bin/env python3
"""
Skill Gap Service - Orchestrates searches, recommendations and cohort analysis.

Each search or recommendation produces an immutable CohortSnapshot. Ranking,
skill demand, summary and CSV export are all computed from the current
snapshot, so every view agrees on the same match data.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Set, Tuple, Union

from core.analytics import (
    CohortSummary,
    DistributionThresholds,
    SkillDemandReport,
    aggregate_skill_demand,
    summarize_cohort,
)
from core.api.auth import AuthApi
from core.api.catalog import CatalogApi, SkillSearchRequest
from core.api.generations import GenerationGuard
from core.cohort import AnalyzedJob, analyze_jobs, analyze_scored_cohort
from core.config_loader import AnalysisConfig, ExportConfig
from core.exceptions import NotFoundError
from core.export import export_cohort_csv, write_csv_file
from core.ranking import SearchFilters, SortBy, rank_cohort
from core.scorer import Recommendation, ScoringAlgorithm
from core.utils import fold_skill_name

logger = logging.getLogger(__name__)

NO_COHORT_MESSAGE = "No analysis available yet. Run a search or a recommendation first."


class CohortKind(str, Enum):
    SEARCH = "search"
    RECOMMENDATION = "recommendation"


@dataclass(frozen=True)
class CohortSnapshot:
    """A complete, analyzed response for one search or recommendation."""
    kind: CohortKind
    generation: int
    candidate_skills: Tuple[str, ...]
    analyzed: Tuple[AnalyzedJob, ...] = ()
    query: Optional[str] = None
    recommendation: Optional[Recommendation] = None

    @property
    def algorithm(self) -> Optional[ScoringAlgorithm]:
        return self.recommendation.algorithm if self.recommendation else None

    @property
    def jobs(self):
        return [entry.job for entry in self.analyzed]


@dataclass
class SkillGapService:
    """
    Service for skill-gap analysis of one user session.

    Responsibilities:
    - Hold the candidate's skill list
    - Run searches and recommendations through the generation guard
    - Derive ranked views, skill demand, summary and CSV from the current cohort
    - Track favorite job ids
    """
    catalog: CatalogApi
    auth: AuthApi
    analysis_config: AnalysisConfig = field(default_factory=AnalysisConfig)
    export_config: ExportConfig = field(default_factory=ExportConfig)
    guard: GenerationGuard = field(default_factory=GenerationGuard)

    _candidate_skills: List[str] = field(default_factory=list, init=False)
    _current: Optional[CohortSnapshot] = field(default=None, init=False)
    _favorites: Set[int] = field(default_factory=set, init=False)

    # ------------------------------------------------------------------
    # Candidate skills
    # ------------------------------------------------------------------

    @property
    def candidate_skills(self) -> List[str]:
        return list(self._candidate_skills)

    def set_candidate_skills(self, skills: Sequence[str]) -> None:
        self._candidate_skills = []
        for skill in skills:
            self.add_skill(skill)

    def add_skill(self, name: str) -> bool:
        """Add a skill; blanks and case-insensitive duplicates are ignored."""
        name = (name or "").strip()
        if not name:
            return False
        folded = fold_skill_name(name)
        if any(fold_skill_name(s) == folded for s in self._candidate_skills):
            return False
        self._candidate_skills.append(name)
        return True

    def remove_skill(self, name: str) -> bool:
        folded = fold_skill_name(name or "")
        remaining = [s for s in self._candidate_skills if fold_skill_name(s) != folded]
        removed = len(remaining) != len(self._candidate_skills)
        self._candidate_skills = remaining
        return removed

    # ------------------------------------------------------------------
    # Cohort acquisition
    # ------------------------------------------------------------------

    async def search(
        self,
        job_title: str,
        skills: Optional[Sequence[str]] = None
    ) -> CohortSnapshot:
        """
        Search jobs for a title and analyze them against the candidate's skills.

        Args:
            job_title: Target job title (required)
            skills: Replaces the candidate skill list when given

        Raises:
            ValidationError: Blank job title (nothing is sent).
            StaleResponseError: A newer search superseded this one.
        """
        if skills is not None:
            self.set_candidate_skills(skills)
        candidate_skills = tuple(self._candidate_skills)

        request = SkillSearchRequest.build(job_title, candidate_skills)
        generation, jobs = await self.guard.run(
            CohortKind.SEARCH.value,
            self.catalog.search_jobs(request),
        )

        snapshot = CohortSnapshot(
            kind=CohortKind.SEARCH,
            generation=generation,
            candidate_skills=candidate_skills,
            analyzed=tuple(analyze_jobs(jobs, candidate_skills)),
            query=request.job_title,
        )
        return self._publish(snapshot)

    async def recommend(self, algorithm: ScoringAlgorithm) -> CohortSnapshot:
        """
        Fetch the recommendation for one algorithm, using the profile's skills.

        Raises:
            NotFoundError: The profile has no skills.
            StaleResponseError: Another algorithm was selected meanwhile.
        """
        generation, (user, recommendation) = await self.guard.run(
            CohortKind.RECOMMENDATION.value,
            self._fetch_recommendation(algorithm),
        )

        candidate_skills = tuple(user.skill_names)
        self.set_candidate_skills(candidate_skills)

        snapshot = CohortSnapshot(
            kind=CohortKind.RECOMMENDATION,
            generation=generation,
            candidate_skills=candidate_skills,
            analyzed=tuple(analyze_scored_cohort(recommendation.cohort, candidate_skills)),
            recommendation=recommendation,
        )
        return self._publish(snapshot)

    async def _fetch_recommendation(self, algorithm: ScoringAlgorithm):
        user = await self.auth.current_user()
        recommendation = await self.catalog.get_recommendation(algorithm)
        return user, recommendation

    def _publish(self, snapshot: CohortSnapshot) -> CohortSnapshot:
        # Generations are global, so the most recently issued request wins across kinds
        if self._current is None or snapshot.generation > self._current.generation:
            self._current = snapshot
            logger.info(
                f"Analyzed {snapshot.kind.value} cohort of {len(snapshot.analyzed)} jobs "
                f"(generation {snapshot.generation})"
            )
        else:
            logger.info(f"Keeping newer cohort over generation {snapshot.generation}")
        return snapshot

    # ------------------------------------------------------------------
    # Views over the current cohort
    # ------------------------------------------------------------------

    @property
    def current(self) -> Optional[CohortSnapshot]:
        return self._current

    def require_current(self) -> CohortSnapshot:
        if self._current is None:
            raise NotFoundError(NO_COHORT_MESSAGE, status_code=404)
        return self._current

    def default_filters(self) -> SearchFilters:
        return SearchFilters(sort_by=self.analysis_config.default_sort_by)

    def ranked(self, filters: Optional[SearchFilters] = None) -> List[AnalyzedJob]:
        snapshot = self.require_current()
        return rank_cohort(snapshot.analyzed, filters or self.default_filters())

    def skill_demand(self) -> SkillDemandReport:
        snapshot = self.require_current()
        return aggregate_skill_demand(snapshot.jobs, snapshot.candidate_skills)

    def summary(self) -> CohortSummary:
        snapshot = self.require_current()
        thresholds = self.analysis_config.thresholds
        return summarize_cohort(
            snapshot.analyzed,
            snapshot.candidate_skills,
            self.skill_demand(),
            DistributionThresholds(
                excellent=thresholds.excellent,
                good=thresholds.good,
                fair=thresholds.fair,
            ),
        )

    def export_csv(self, sort_by: Optional[SortBy] = None) -> str:
        """
        CSV of every job in the current cohort, in the given display order.

        The show-only-missing filter does not apply: the file always holds
        the whole cohort.
        """
        return export_cohort_csv(
            self.ranked(SearchFilters(sort_by=sort_by or self.analysis_config.default_sort_by)),
            line_terminator=self.export_config.line_terminator,
        )

    def save_csv(
        self,
        sort_by: Optional[SortBy] = None,
        directory: Optional[Union[str, Path]] = None
    ) -> Path:
        return write_csv_file(
            self.export_csv(sort_by),
            directory=directory or self.export_config.output_dir,
            filename=self.export_config.filename,
        )

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def toggle_favorite(self, job_id: int) -> bool:
        """Flip a job's favorite flag. Returns the new state."""
        if job_id in self._favorites:
            self._favorites.discard(job_id)
            return False
        self._favorites.add(job_id)
        return True

    def is_favorite(self, job_id: int) -> bool:
        return job_id in self._favorites

    @property
    def favorites(self) -> List[int]:
        return sorted(self._favorites)



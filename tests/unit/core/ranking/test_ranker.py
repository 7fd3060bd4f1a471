#!/usr/bin/env python3
"""
Test suite for cohort ranking and filtering.
"""

import unittest

from core.cohort import analyze_jobs, analyze_scored_cohort
from core.ranking import SearchFilters, SortBy, rank_cohort
from core.scorer import ScoringAlgorithm
from tests.fixtures.job_fixtures import make_job, make_scored_job


class TestRankCohort(unittest.TestCase):
    """Sort keys, stability and the gap filter."""

    def setUp(self):
        self.candidate = ["React", "TypeScript"]
        self.jobs = [
            make_job("Zeta Engineer", ["React", "SQL", "Docker"], job_id=1),      # 2 missing
            make_job("alpha Developer", ["React", "TypeScript"], job_id=2),       # 0 missing
            make_job("Beta Analyst", ["SQL"], job_id=3),                          # 1 missing
            make_job("Gamma Designer", ["TypeScript", "Figma"], job_id=4),        # 1 missing
        ]
        self.cohort = analyze_jobs(self.jobs, self.candidate)

    def ids(self, ranked):
        return [entry.job.id for entry in ranked]

    def test_default_filters(self):
        filters = SearchFilters()

        self.assertIs(filters.sort_by, SortBy.MISSING_SKILLS_ASC)
        self.assertFalse(filters.show_only_missing)

    def test_missing_skills_ascending_is_stable(self):
        ranked = rank_cohort(self.cohort, SearchFilters(sort_by=SortBy.MISSING_SKILLS_ASC))

        # jobs 3 and 4 tie on one missing skill and keep input order
        self.assertEqual(self.ids(ranked), [2, 3, 4, 1])

    def test_match_percentage_descending(self):
        ranked = rank_cohort(self.cohort, SearchFilters(sort_by=SortBy.MATCH_PERCENTAGE_DESC))

        # 100, 50, 33, 0
        self.assertEqual(self.ids(ranked), [2, 4, 1, 3])

    def test_alphabetical_ignores_case(self):
        ranked = rank_cohort(self.cohort, SearchFilters(sort_by=SortBy.ALPHABETICAL))

        self.assertEqual(
            [entry.title for entry in ranked],
            ["alpha Developer", "Beta Analyst", "Gamma Designer", "Zeta Engineer"],
        )

    def test_alphabetical_titles(self):
        cohort = analyze_jobs(
            [
                make_job("Backend Engineer", job_id=1),
                make_job("Analyst", job_id=2),
                make_job("Cloud Engineer", job_id=3),
            ],
            [],
        )

        ranked = rank_cohort(cohort, SearchFilters(sort_by=SortBy.ALPHABETICAL))

        self.assertEqual(
            [entry.title for entry in ranked],
            ["Analyst", "Backend Engineer", "Cloud Engineer"],
        )

    def test_alphabetical_places_accented_titles_with_their_base_letter(self):
        cohort = analyze_jobs(
            [
                make_job("Zookeeper", job_id=1),
                make_job("Écologiste", job_id=2),
                make_job("Eclipse Developer", job_id=3),
                make_job("Éclair Baker", job_id=4),
                make_job("Analyst", job_id=5),
            ],
            [],
        )

        ranked = rank_cohort(cohort, SearchFilters(sort_by=SortBy.ALPHABETICAL))

        self.assertEqual(
            [entry.title for entry in ranked],
            ["Analyst", "Éclair Baker", "Eclipse Developer", "Écologiste", "Zookeeper"],
        )

    def test_alphabetical_ties_keep_input_order(self):
        cohort = analyze_jobs(
            [make_job("DATA ENGINEER", job_id=1), make_job("Data Engineer", job_id=2)],
            [],
        )

        ranked = rank_cohort(cohort, SearchFilters(sort_by=SortBy.ALPHABETICAL))

        self.assertEqual(self.ids(ranked), [1, 2])

    def test_show_only_missing_drops_complete_matches(self):
        ranked = rank_cohort(
            self.cohort,
            SearchFilters(sort_by=SortBy.MISSING_SKILLS_ASC, show_only_missing=True),
        )

        self.assertEqual(self.ids(ranked), [3, 4, 1])
        self.assertTrue(all(entry.match.has_gaps for entry in ranked))

    def test_input_is_not_mutated(self):
        before = list(self.cohort)

        rank_cohort(self.cohort, SearchFilters(sort_by=SortBy.ALPHABETICAL))

        self.assertEqual(self.cohort, before)

    def test_empty_cohort(self):
        self.assertEqual(rank_cohort([], SearchFilters()), [])

    def test_scored_cohort_ranks_by_normalized_score(self):
        cohort = analyze_scored_cohort(
            [
                make_scored_job("Low", 1.0, ["React"], job_id=1),
                make_scored_job("High", 9.0, ["Go"], job_id=2),
                make_scored_job("Mid", 5.0, ["React", "Go"], job_id=3),
            ],
            ["React"],
        )

        ranked = rank_cohort(cohort, SearchFilters(sort_by=SortBy.MATCH_PERCENTAGE_DESC))

        self.assertEqual(self.ids(ranked), [2, 3, 1])
        self.assertEqual([entry.score_percentage for entry in ranked], [100.0, 50.0, 0.0])


class TestAnalyzeScoredCohort(unittest.TestCase):

    def test_flat_cohort(self):
        cohort = analyze_scored_cohort(
            [
                make_scored_job("A", 0.4, job_id=1, algorithm=ScoringAlgorithm.COSINE),
                make_scored_job("B", 0.4, job_id=2, algorithm=ScoringAlgorithm.COSINE),
            ],
            [],
        )

        self.assertEqual([entry.score_percentage for entry in cohort], [100.0, 100.0])
        self.assertTrue(all(entry.is_scored for entry in cohort))


if __name__ == '__main__':
    unittest.main()

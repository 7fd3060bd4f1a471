#!/usr/bin/env python3
"""
Test suite for match distribution and cohort summary.
"""

import unittest

from core.analytics import (
    DistributionThresholds,
    aggregate_skill_demand,
    classify_match,
    match_distribution,
    summarize_cohort,
)
from core.cohort import analyze_jobs
from tests.fixtures.job_fixtures import make_job


class TestClassifyMatch(unittest.TestCase):

    def test_bucket_boundaries(self):
        self.assertEqual(classify_match(100), 'excellent')
        self.assertEqual(classify_match(80), 'excellent')
        self.assertEqual(classify_match(79), 'good')
        self.assertEqual(classify_match(60), 'good')
        self.assertEqual(classify_match(59), 'fair')
        self.assertEqual(classify_match(40), 'fair')
        self.assertEqual(classify_match(39), 'needs_work')
        self.assertEqual(classify_match(0), 'needs_work')

    def test_custom_thresholds(self):
        thresholds = DistributionThresholds(excellent=90, good=70, fair=50)

        self.assertEqual(classify_match(85, thresholds), 'good')


class TestSummarizeCohort(unittest.TestCase):

    def setUp(self):
        self.candidate = ["React", "TypeScript"]
        self.cohort = analyze_jobs(
            [
                make_job("A", ["React", "TypeScript"], job_id=1),          # 100
                make_job("B", ["React", "TypeScript", "SQL"], job_id=2),   # 67
                make_job("C", ["React", "SQL"], job_id=3),                 # 50
                make_job("D", ["Go"], job_id=4),                           # 0
            ],
            self.candidate,
        )

    def test_distribution_has_every_bucket(self):
        self.assertEqual(
            match_distribution(self.cohort),
            {'excellent': 1, 'good': 1, 'fair': 1, 'needs_work': 1},
        )

    def test_summary(self):
        demand = aggregate_skill_demand([e.job for e in self.cohort], self.candidate)

        summary = summarize_cohort(self.cohort, self.candidate, demand)

        self.assertEqual(summary.job_count, 4)
        self.assertEqual(summary.candidate_skill_count, 2)
        self.assertEqual(summary.skills_to_learn, 2)  # SQL, Go
        self.assertEqual(summary.average_match, 54)  # 217 / 4 = 54.25

    def test_average_of_match_percentages(self):
        cohort = analyze_jobs(
            [make_job("A", ["X", "Y"], job_id=1), make_job("B", ["X"], job_id=2)],
            ["X"],
        )
        demand = aggregate_skill_demand([e.job for e in cohort], ["X"])

        self.assertEqual(summarize_cohort(cohort, ["X"], demand).average_match, 75)

    def test_average_rounds_half_up(self):
        cohort = analyze_jobs(
            [make_job("A", ["X", "Y"], job_id=1), make_job("B", ["X", "Y", "Z"], job_id=2)],
            ["X"],
        )
        demand = aggregate_skill_demand([e.job for e in cohort], ["X"])

        # (50 + 33) / 2 = 41.5
        self.assertEqual(summarize_cohort(cohort, ["X"], demand).average_match, 42)

    def test_empty_cohort(self):
        demand = aggregate_skill_demand([], [])

        summary = summarize_cohort([], [], demand)

        self.assertEqual(summary.job_count, 0)
        self.assertEqual(summary.average_match, 0)
        self.assertEqual(summary.distribution, {'excellent': 0, 'good': 0, 'fair': 0, 'needs_work': 0})


if __name__ == '__main__':
    unittest.main()

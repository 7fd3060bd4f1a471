#!/usr/bin/env python3
"""
Test suite for catalog endpoint wrappers and recommendation parsing.
"""

import unittest

import httpx

from core.api import ApiClient, CatalogApi, SkillSearchRequest, parse_recommendation
from core.exceptions import NotFoundError, ValidationError
from core.scorer import CosineScore, LlrScore, ScoringAlgorithm
from tests.fixtures.job_fixtures import job_payload, recommendation_payload
from tests.mocks.catalog_mocks import MockCatalog, json_body


class TestParseRecommendation(unittest.TestCase):

    def test_llr_payload(self):
        payload = recommendation_payload(ScoringAlgorithm.LLR, [
            (10, "Backend Developer", 42.5, ["Python", "Django", "Redis"]),
            (11, "Data Engineer", 12.0, ["Python", "Spark"]),
        ])

        recommendation = parse_recommendation(payload, ScoringAlgorithm.LLR)

        self.assertIs(recommendation.algorithm, ScoringAlgorithm.LLR)
        self.assertEqual(recommendation.top_job.title, "Backend Developer")
        self.assertEqual(recommendation.top_job.score, LlrScore(value=42.5))
        self.assertEqual([s.name for s in recommendation.top_job.matching_skills], ["Python"])
        self.assertEqual([s.name for s in recommendation.top_job.missing_skills], ["Django", "Redis"])
        self.assertEqual([j.id for j in recommendation.cohort], [10, 11])
        self.assertTrue(all(isinstance(j.score, LlrScore) for j in recommendation.cohort))
        self.assertEqual(recommendation.cohort[1].required_skills[1].name, "Spark")

    def test_cosine_payload(self):
        payload = recommendation_payload(ScoringAlgorithm.COSINE, [
            (3, "Frontend Developer", 0.91, ["React"]),
        ])

        recommendation = parse_recommendation(payload, ScoringAlgorithm.COSINE)

        self.assertEqual(recommendation.cohort[0].score, CosineScore(value=0.91))
        self.assertEqual(recommendation.top_job.score, CosineScore(value=0.91))

    def test_score_field_follows_requested_algorithm(self):
        payload = recommendation_payload(ScoringAlgorithm.COSINE, [
            (3, "Frontend Developer", 0.91, ["React"]),
        ])

        with self.assertRaises(ValidationError):
            parse_recommendation(payload, ScoringAlgorithm.LLR)

    def test_missing_top_job(self):
        with self.assertRaises(ValidationError):
            parse_recommendation({"all_job_scores": []}, ScoringAlgorithm.LLR)

    def test_empty_cohort(self):
        payload = recommendation_payload(ScoringAlgorithm.LLR, [(1, "Only", 1.0, [])])
        payload["all_job_scores"] = []

        self.assertEqual(parse_recommendation(payload, ScoringAlgorithm.LLR).cohort, [])


class TestSkillSearchRequest(unittest.TestCase):

    def test_build_strips_and_cleans(self):
        request = SkillSearchRequest.build("  Frontend Developer ", ["React", " ", "SQL "])

        self.assertEqual(request.job_title, "Frontend Developer")
        self.assertEqual(request.current_skills, ["React", "SQL"])

    def test_blank_title_rejected(self):
        with self.assertRaises(ValidationError):
            SkillSearchRequest.build("   ", ["React"])


class TestCatalogApi(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        self.catalog = MockCatalog()
        self.client = ApiClient(base_url="http://catalog.test", transport=self.catalog.transport())
        self.api = CatalogApi(self.client)

    async def asyncTearDown(self):
        await self.client.close()

    async def test_search_jobs(self):
        self.catalog.route("POST", "/recommend-skills/", [
            job_payload(1, "Frontend Developer", ["React", "TypeScript"]),
            job_payload(2, "UI Engineer", ["CSS"]),
        ])

        jobs = await self.api.search_jobs(SkillSearchRequest.build("Frontend", ["React"]))

        self.assertEqual([job.title for job in jobs], ["Frontend Developer", "UI Engineer"])
        self.assertEqual(
            json_body(self.catalog.requests[0]),
            {"job_title": "Frontend", "current_skills": ["React"]},
        )

    async def test_search_jobs_rejects_non_list(self):
        self.catalog.route("POST", "/recommend-skills/", {"detail": "unexpected"})

        with self.assertRaises(ValidationError):
            await self.api.search_jobs(SkillSearchRequest.build("Frontend", []))

    async def test_recommendation_without_skills_is_not_found(self):
        self.catalog.route(
            "GET", "/jobs/recommend/llr",
            lambda r: httpx.Response(404, json={"detail": "User has no skills"}),
        )

        with self.assertRaises(NotFoundError) as ctx:
            await self.api.get_recommendation(ScoringAlgorithm.LLR)

        self.assertIn("Add skills", str(ctx.exception))

    async def test_get_recommendation_uses_algorithm_path(self):
        self.catalog.route("GET", "/jobs/recommend/cosine", recommendation_payload(
            ScoringAlgorithm.COSINE, [(5, "ML Engineer", 0.7, ["Python"])],
        ))

        recommendation = await self.api.get_recommendation(ScoringAlgorithm.COSINE)

        self.assertIs(recommendation.algorithm, ScoringAlgorithm.COSINE)

    async def test_list_skills_page(self):
        self.catalog.route("GET", "/skills/", {
            "items": [{"skill_id": 1, "skill_name": "Python"}],
            "total": 1, "page": 2, "size": 5,
        })

        page = await self.api.list_skills(page=2, size=5, search="py")

        self.assertEqual(page.items[0].name, "Python")
        self.assertEqual(page.page, 2)
        self.assertEqual(self.catalog.requests[0].url.params["search"], "py")

    async def test_list_jobs_page(self):
        self.catalog.route("GET", "/jobs/", {
            "items": [job_payload(1, "SRE", ["Go"])], "total": 1, "page": 1, "size": 20,
        })

        page = await self.api.list_jobs()

        self.assertEqual(page.items[0].required_skills[0].name, "Go")

    async def test_create_skill_validates_before_sending(self):
        with self.assertRaises(ValidationError):
            await self.api.create_skill("  ")

        self.assertEqual(self.catalog.requests, [])

    async def test_add_and_remove_user_skill(self):
        self.catalog.route("POST", "/users/me/skills/7", {"ok": True})
        self.catalog.route("DELETE", "/users/me/skills/7", lambda r: httpx.Response(204))

        await self.api.add_user_skill(7)
        await self.api.remove_user_skill(7)

        self.assertEqual([r.method for r in self.catalog.requests], ["POST", "DELETE"])


if __name__ == '__main__':
    unittest.main()

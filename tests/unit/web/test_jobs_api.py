#!/usr/bin/env python3
"""
Unit tests for the /jobs endpoints.
"""

import unittest

from fastapi.testclient import TestClient
from sqlalchemy import text

from web.backend.app import create_app
from web.backend.auth import create_token
from tests.fixtures.db_fixtures import make_seeded_manager

JOB1 = {"title": "job1", "salary": 50000, "equity": 0, "companyHandle": "c1"}
JOB2 = {"title": "job2", "salary": 175000, "equity": 1.0, "companyHandle": "c2"}
ENGINEER = {"title": "Engineer", "salary": 200000, "equity": 0.75, "companyHandle": "c3"}


def by_title(jobs):
    return sorted(jobs, key=lambda job: job["title"])


class JobsApiTestCase(unittest.TestCase):

    def setUp(self):
        self.manager = make_seeded_manager()
        self.client = TestClient(create_app(self.manager), raise_server_exceptions=False)
        self.admin_headers = {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}
        self.user_headers = {"Authorization": f"Bearer {create_token('u1')}"}

    def tearDown(self):
        self.client.close()
        self.manager.dispose()


class TestCreateJob(JobsApiTestCase):
    """Tests for POST /jobs."""

    new_job = {"title": "job3", "salary": 50000, "equity": 0.2, "companyHandle": "c1"}

    def test_admin_creates_job(self):
        resp = self.client.post("/jobs", json=self.new_job, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json(), {"job": self.new_job})

    def test_non_admin_rejected(self):
        resp = self.client.post("/jobs", json=self.new_job, headers=self.user_headers)

        self.assertEqual(resp.status_code, 401)

    def test_anonymous_rejected(self):
        resp = self.client.post("/jobs", json=self.new_job)

        self.assertEqual(resp.status_code, 401)

    def test_forged_token_rejected(self):
        headers = {"Authorization": "Bearer not.a.token"}

        resp = self.client.post("/jobs", json=self.new_job, headers=headers)

        self.assertEqual(resp.status_code, 401)

    def test_missing_fields(self):
        resp = self.client.post("/jobs", json={"title": "job3", "salary": 55000}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()["success"])

    def test_invalid_equity(self):
        resp = self.client.post("/jobs", json={**self.new_job, "equity": 1.1}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)

    def test_duplicate(self):
        resp = self.client.post("/jobs", json={**self.new_job, "title": "JOB1"}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Duplicate job: JOB1")
        self.assertEqual(resp.json()["type"], "ValidationError")


class TestListJobs(JobsApiTestCase):
    """Tests for GET /jobs."""

    def test_all_jobs(self):
        resp = self.client.get("/jobs")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(by_title(resp.json()["jobs"]), by_title([JOB1, JOB2, ENGINEER]))

    def test_title_filter(self):
        resp = self.client.get("/jobs", params={"title": "Engineer"})

        self.assertEqual(resp.json(), {"jobs": [ENGINEER]})

    def test_combined_filters(self):
        resp = self.client.get("/jobs", params={"title": "job", "minSalary": 50001, "hasEquity": "true"})

        self.assertEqual(resp.json(), {"jobs": [JOB2]})

    def test_has_equity_true(self):
        resp = self.client.get("/jobs", params={"hasEquity": "true"})

        self.assertEqual(by_title(resp.json()["jobs"]), by_title([JOB2, ENGINEER]))

    def test_has_equity_false(self):
        resp = self.client.get("/jobs", params={"hasEquity": "false"})

        self.assertEqual(resp.json(), {"jobs": [JOB1]})

    def test_min_salary(self):
        resp = self.client.get("/jobs", params={"minSalary": 200000})

        self.assertEqual(resp.json(), {"jobs": [ENGINEER]})

    def test_min_salary_at_ceiling(self):
        resp = self.client.get("/jobs", params={"minSalary": 1000000})

        self.assertEqual(resp.status_code, 400)

    def test_min_salary_not_a_number(self):
        resp = self.client.get("/jobs", params={"minSalary": "plenty"})

        self.assertEqual(resp.status_code, 400)

    def test_store_failure_is_500(self):
        with self.manager.engine.begin() as conn:
            conn.execute(text("DROP TABLE jobs"))

        resp = self.client.get("/jobs", headers=self.user_headers)

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["error"], "Internal server error")


class TestGetJob(JobsApiTestCase):
    """Tests for GET /jobs/{title}."""

    def test_get(self):
        resp = self.client.get("/jobs/job1")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"job": JOB1})

    def test_not_found(self):
        resp = self.client.get("/jobs/nope")

        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["type"], "NotFoundError")


class TestUpdateJob(JobsApiTestCase):
    """Tests for PATCH /jobs/{title}."""

    def test_admin_updates_salary(self):
        resp = self.client.patch("/jobs/job1", json={"salary": 60000}, headers=self.admin_headers)

        self.assertEqual(resp.json(), {"job": {**JOB1, "salary": 60000}})

    def test_admin_updates_title(self):
        resp = self.client.patch("/jobs/job1", json={"title": "job1-new"}, headers=self.admin_headers)

        self.assertEqual(resp.json(), {"job": {**JOB1, "title": "job1-new"}})
        self.assertEqual(self.client.get("/jobs/job1").status_code, 404)

    def test_admin_updates_company_handle(self):
        resp = self.client.patch("/jobs/job1", json={"companyHandle": "c2"}, headers=self.admin_headers)

        self.assertEqual(resp.json(), {"job": {**JOB1, "companyHandle": "c2"}})

    def test_non_admin_rejected(self):
        resp = self.client.patch("/jobs/job1", json={"salary": 1}, headers=self.user_headers)

        self.assertEqual(resp.status_code, 401)

    def test_anonymous_rejected(self):
        resp = self.client.patch("/jobs/job1", json={"salary": 1})

        self.assertEqual(resp.status_code, 401)

    def test_not_found(self):
        resp = self.client.patch("/jobs/nope", json={"salary": 1}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 404)

    def test_empty_body(self):
        resp = self.client.patch("/jobs/job1", json={}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)

    def test_salary_above_ceiling(self):
        resp = self.client.patch("/jobs/job1", json={"salary": 50000000}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)

    def test_equity_above_max(self):
        resp = self.client.patch("/jobs/job1", json={"equity": 1.1}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)

    def test_null_salary(self):
        resp = self.client.patch("/jobs/job1", json={"salary": None}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)

    def test_unknown_field(self):
        resp = self.client.patch("/jobs/job1", json={"bonus": 5}, headers=self.admin_headers)

        self.assertEqual(resp.status_code, 400)


class TestDeleteJob(JobsApiTestCase):
    """Tests for DELETE /jobs/{title}."""

    def test_admin_deletes(self):
        resp = self.client.delete("/jobs/job1", headers=self.admin_headers)

        self.assertEqual(resp.json(), {"deleted": "job1"})
        self.assertEqual(self.client.get("/jobs/job1").status_code, 404)

    def test_non_admin_rejected(self):
        resp = self.client.delete("/jobs/job1", headers=self.user_headers)

        self.assertEqual(resp.status_code, 401)

    def test_anonymous_rejected(self):
        resp = self.client.delete("/jobs/job1")

        self.assertEqual(resp.status_code, 401)

    def test_not_found(self):
        resp = self.client.delete("/jobs/nope", headers=self.admin_headers)

        self.assertEqual(resp.status_code, 404)


if __name__ == '__main__':
    unittest.main()

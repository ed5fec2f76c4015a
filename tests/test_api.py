"""
HTTP-level tests for the quiz routes, run against the in-memory store.
"""
import unittest

import httpx
from fastapi.testclient import TestClient

from app.dependencies import build_services, get_services
from app.main import app
from app.store.client import RecordStoreClient
from tests.fakes import FakeAirtable, make_settings


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.fake = FakeAirtable()
        self.services = build_services(self.fake.client(), make_settings())
        app.dependency_overrides[get_services] = lambda: self.services
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self):
        app.dependency_overrides.clear()


class TestQuestionRoutes(ApiTestCase):

    def test_health(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})

    def test_list_questions(self):
        self.fake.add_question(2)
        self.fake.add_question(1)
        resp = self.client.get("/questions")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual([r["fields"]["Question Number"] for r in body], [1, 2])
        self.assertIn("createdTime", body[0])

    def test_get_question(self):
        record = self.fake.add_question(1)
        resp = self.client.get("/question/1")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["id"], record["id"])

    def test_get_question_missing(self):
        resp = self.client.get("/question/3")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Question not found"})

    def test_get_question_bad_number(self):
        resp = self.client.get("/question/abc")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())

    def test_active_without_flag(self):
        self.fake.add_question(1)
        self.assertEqual(self.client.get("/active").json(), {"active": False})

    def test_active_with_flag(self):
        record = self.fake.add_question(1, active=True)
        body = self.client.get("/active").json()
        self.assertTrue(body["active"])
        self.assertEqual(body["questionId"], record["id"])
        self.assertEqual(body["fields"]["Question"], "Question 1?")

    def test_next_moves_active_question(self):
        self.fake.add_question(1, active=True)
        second = self.fake.add_question(2)
        body = self.client.post("/next").json()
        self.assertEqual(body["newActive"]["id"], second["id"])
        self.assertEqual(self.client.get("/active").json()["questionId"], second["id"])

    def test_next_at_end(self):
        self.fake.add_question(1, active=True)
        self.assertEqual(self.client.post("/next").json(), {"message": "No next question found"})

    def test_upstream_error_is_500(self):
        del self.fake.tables["Quiz"]
        resp = self.client.get("/questions")
        self.assertEqual(resp.status_code, 500)
        self.assertIn("TABLE_NOT_FOUND", resp.json()["error"])

    def test_transport_error_is_500(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        store = RecordStoreClient(make_settings(), transport=httpx.MockTransport(handler))
        services = build_services(store, make_settings())
        app.dependency_overrides[get_services] = lambda: services
        resp = self.client.get("/questions")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "connection refused"})


class TestSessionRoutes(ApiTestCase):

    def setUp(self):
        super().setUp()
        for number in (1, 2):
            self.fake.add_question(number)

    def test_session_flow(self):
        resp = self.client.post("/session", json={"sessionName": "Party"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["fields"], {"Session Name": "Party", "Current Question": 0})

        self.assertEqual(self.client.get("/session/Party").json()["fields"]["Current Question"], 0)
        self.assertEqual(self.client.get("/active", params={"session": "Party"}).json(), {"waiting": True})

        body = self.client.post("/session/Party/next").json()
        self.assertTrue(body["success"])
        self.assertEqual(body["newCurrentQuestion"], 1)
        self.assertEqual(body["updatedRecord"]["fields"]["Current Question"], 1)

        active = self.client.get("/active", params={"session": "Party"}).json()
        self.assertTrue(active["active"])
        self.assertEqual(active["fields"]["Question Number"], 1)

        self.client.post("/session/Party/next")
        self.client.post("/session/Party/next")
        self.assertEqual(self.client.get("/active", params={"session": "Party"}).json(), {"end": True})

    def test_create_session_without_name(self):
        resp = self.client.post("/session", json={})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "sessionName is required"})

    def test_padded_session_name(self):
        self.client.post("/session", json={"sessionName": " Party "})
        resp = self.client.get("/session/%20Party%20")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["fields"]["Session Name"], "Party")

    def test_unknown_session(self):
        self.assertEqual(self.client.get("/session/Nobody").status_code, 404)
        self.assertEqual(self.client.post("/session/Nobody/next").status_code, 404)
        resp = self.client.get("/active", params={"session": "Nobody"})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Session not found"})


class TestVoteRoutes(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.question = self.fake.add_question(1)

    def test_vote_by_question_id(self):
        resp = self.client.post(
            "/vote",
            json={"voterName": "Alex", "questionId": self.question["id"], "answerNumber": 2},
        )
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["voteRecord"]["fields"]["Vote"], "2")

    def test_vote_by_question_number(self):
        resp = self.client.post("/vote", json={"voterName": "Alex", "questionNumber": 1, "answerNumber": "4"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["voteRecord"]["fields"]["Question"], [self.question["id"]])

    def test_vote_missing_fields(self):
        resp = self.client.post("/vote", json={"voterName": "Alex", "answerNumber": 1})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Missing fields"})
        self.assertEqual(self.fake.tables["Votes"], [])

    def test_vote_unknown_question_number(self):
        resp = self.client.post("/vote", json={"voterName": "Alex", "questionNumber": 8, "answerNumber": 1})
        self.assertEqual(resp.status_code, 404)

    def test_results(self):
        for choice in ("1", "1", "2", "4"):
            self.fake.add_vote(self.question["id"], choice)
        body = self.client.get("/results/1").json()
        self.assertEqual(body["votes"], {"1": 2, "2": 1, "3": 0, "4": 1})
        self.assertEqual(body["answers"]["3"], "Q1 A3")

    def test_results_without_votes(self):
        body = self.client.get("/results/1").json()
        self.assertEqual(body["questionNumber"], 1)
        self.assertEqual(body["question"], "Question 1?")
        self.assertEqual(body["votes"], {"1": 0, "2": 0, "3": 0, "4": 0})

    def test_results_unknown_question(self):
        resp = self.client.get("/results/5")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Question not found"})


if __name__ == "__main__":
    unittest.main()

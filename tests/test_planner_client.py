"""
Tests for the planner API command-line client.

Uses an httpx mock transport, so no server is needed.

Usage:
    pytest tests/test_planner_client.py -v
"""
import json
import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from planner_client import PlannerClient, main, run  # noqa: E402


STUDENT = {
    "courses": [{"name": "AP Biology", "courseLevel": "AP", "gradePercent": 91}],
    "wellness_logs": [{"date": "2025-03-10"}],
    "deadlines": [
        {"id": "d1", "title": "Lab Report", "type": "Homework", "dueDate": "2025-03-13T09:00:00Z"},
    ],
}


class FakePlannerAPI:
    """Records requests and answers like the planner API."""

    def __init__(self):
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.path, body))

        if request.url.path == "/api/academics/gpa":
            return httpx.Response(200, json={
                "unweighted": "3.70", "weighted": "4.70", "gradedCourses": 1, "totalCourses": 1,
            })
        if request.url.path == "/api/wellness/streak":
            return httpx.Response(200, json={"streak": 1, "asOf": "2025-03-10T09:00:00Z"})
        if request.url.path == "/api/deadlines/reminders/plan":
            return httpx.Response(200, json=[self._reminder()])
        if request.method == "PUT" and request.url.path == "/api/deadlines/d1":
            return httpx.Response(200, json={
                "deadlineId": "d1", "isCompleted": False, "reminders": [self._reminder()],
            })
        return httpx.Response(404, json={"detail": "Not Found"})

    @staticmethod
    def _reminder():
        return {
            "id": "d1_24h",
            "fireAt": "2025-03-12T09:00:00Z",
            "title": "Due Tomorrow: Lab Report",
            "body": "Don't forget to finish this homework.",
        }


@pytest.fixture
def api():
    return FakePlannerAPI()


@pytest.fixture
def planner(api):
    client = httpx.Client(base_url="http://planner.test", transport=httpx.MockTransport(api))
    yield PlannerClient("http://planner.test", client=client)
    client.close()


class TestPlannerClient:
    """Test request shapes sent to the API."""

    def test_streak_passes_as_of(self, planner, api):
        planner.streak([{"date": "2025-03-10"}], as_of="2025-03-10T12:00:00")
        assert api.requests[-1][2] == {"logs": [{"date": "2025-03-10"}], "asOf": "2025-03-10T12:00:00"}

    def test_plan_without_now(self, planner, api):
        planner.plan({"id": "d1"})
        assert api.requests[-1] == ("POST", "/api/deadlines/reminders/plan", {"deadline": {"id": "d1"}})

    def test_http_errors_raise(self, planner):
        with pytest.raises(httpx.HTTPStatusError):
            planner._post("/api/unknown", {})


class TestRun:
    """Test the printed report."""

    def test_full_report(self, planner, capsys):
        run(planner, STUDENT, only=None, schedule=False, now=None)
        out = capsys.readouterr().out

        assert "Unweighted: 3.70" in out
        assert "Weighted:   4.70" in out
        assert "1 day as of" in out
        assert "Due Tomorrow: Lab Report" in out

    def test_only_one_section(self, planner, api, capsys):
        run(planner, STUDENT, only="gpa", schedule=False, now=None)

        assert [path for _, path, _ in api.requests] == ["/api/academics/gpa"]
        assert "WELLNESS STREAK" not in capsys.readouterr().out

    def test_schedule_saves_deadlines(self, planner, api):
        run(planner, STUDENT, only="reminders", schedule=True, now=None)
        assert api.requests == [("PUT", "/api/deadlines/d1", STUDENT["deadlines"][0])]

    def test_no_reminders(self, planner, capsys):
        planner.client = httpx.Client(
            base_url="http://planner.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])),
        )
        run(planner, {"deadlines": [{"id": "d9", "title": "Past"}]}, only=None, schedule=False, now=None)
        assert "No upcoming reminders." in capsys.readouterr().out


class TestMain:
    def test_unreadable_file(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["planner_client.py", "--file", str(tmp_path / "missing.json")])

        with pytest.raises(SystemExit) as exc:
            main()

        assert exc.value.code == 1
        assert "Could not read" in capsys.readouterr().out

import logging
from types import SimpleNamespace

import pytest

from src.team_attendance.team_attendance import main
from src.team_attendance.team_attendance.core.constants import DEFAULT_LEADERBOARD_LIMIT, MAX_OCCURRENCES
from src.team_attendance.team_attendance.logging_config import setup_logging
from src.team_attendance.team_attendance.main import create_app
from tests.fakes import FALL, FakeBadgeRepo, FakeChallengeRepo, FakeRecognitionRepo, FakeTeamRepo

AS_OF = "asOf=2025-03-15T12:00:00Z"


@pytest.fixture
def client(scenario):
    app = create_app(
        scenario.repositories(
            challenges=FakeChallengeRepo([FALL]),
            badges=FakeBadgeRepo(),
            recognitions=FakeRecognitionRepo(),
        ),
        env="testing",
    )
    return app.test_client()


def test_recurrence_preview(client):
    resp = client.post(
        "/api/recurrence/preview",
        json={"startDate": "2024-01-01", "endDate": "2024-01-28", "frequency": "BIWEEKLY", "daysOfWeek": [1]},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["dates"] == ["2024-01-01", "2024-01-15"]
    assert body["instants"][0] == "2024-01-01T12:00:00+00:00"


def test_recurrence_preview_validation(client):
    resp = client.post("/api/recurrence/preview", json={"startDate": "2024-01-01", "frequency": "DAILY"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    too_long = client.post(
        "/api/recurrence/preview",
        json={"startDate": "2024-01-01", "endDate": "2026-01-01", "frequency": "DAILY"},
    )
    assert too_long.status_code == 400

    out_of_range = client.post(
        "/api/recurrence/preview",
        json={"startDate": "99999999999999999999", "endDate": "2024-02-01", "frequency": "DAILY"},
    )
    assert out_of_range.status_code == 400

    infinite_day = client.post(
        "/api/recurrence/preview",
        data='{"startDate": "2024-01-01", "endDate": "2024-02-01", "frequency": "WEEKLY", "daysOfWeek": [1e400]}',
        content_type="application/json",
    )
    assert infinite_day.status_code == 400


def test_season_range(client):
    resp = client.get("/api/seasons/range?start_month=9&end_month=6&year=2024")
    body = resp.get_json()
    assert body["start"] == "2024-09-01T00:00:00+00:00"
    assert body["end"] == "2025-06-30T23:59:59.999999+00:00"

    assert client.get("/api/seasons/range?start_month=13&end_month=6&year=2024").status_code == 400
    assert client.get("/api/seasons/range?start_month=9").status_code == 400


def test_team_attendance(client):
    body = client.get(f"/api/teams/t1/attendance?{AS_OF}").get_json()
    assert body["data"]["attendance_percent"] == 45.0
    assert client.get("/api/teams/nope/attendance").status_code == 400


def test_member_stats(client):
    body = client.get(f"/api/teams/t1/members/u1/stats?{AS_OF}").get_json()
    assert body["data"]["hours_logged"] == 4
    assert body["data"]["best_streak"] == 4


def test_leaderboard(client):
    body = client.get(f"/api/teams/t1/leaderboard?limit=1&{AS_OF}").get_json()
    assert [row["user_id"] for row in body["data"]] == ["u2"]
    assert client.get("/api/teams/t1/leaderboard?limit=0").status_code == 400


def test_trends(client):
    body = client.get(f"/api/teams/t1/trends?{AS_OF}").get_json()
    assert [row["week_start"] for row in body["data"]] == ["2024-09-30", "2024-11-25", "2025-01-27"]


def test_challenge_progress(client):
    body = client.get("/api/challenges/ch1/progress").get_json()
    assert body["data"]["currentPercent"] == 80.0
    assert body["data"]["challenge"]["start"] == "2024-09-01T00:00:00+00:00"
    assert client.get("/api/challenges/nope/progress").status_code == 400


def test_challenge_progress_without_gamification(scenario):
    client = create_app(scenario.repositories(), env="testing").test_client()
    assert client.get("/api/challenges/ch1/progress").status_code == 404


class BrokenTeamRepo(FakeTeamRepo):
    def get_by_id(self, team_id):
        raise RuntimeError("storage offline")


def test_unexpected_errors_become_500(scenario):
    scenario.teams = BrokenTeamRepo(teams=scenario.teams.teams, members=scenario.teams.members)
    client = create_app(scenario.repositories(), env="testing").test_client()
    resp = client.get("/api/teams/t1/attendance")
    assert resp.status_code == 500
    assert resp.get_json()["success"] is False


def test_missing_settings_fall_back_to_engine_defaults(scenario, monkeypatch):
    monkeypatch.setattr(main, "load_settings", lambda env=None: SimpleNamespace(SECRET_KEY="test"))
    app = create_app(scenario.repositories(), env="testing")
    assert app.config["MAX_OCCURRENCES"] == MAX_OCCURRENCES
    assert app.config["LEADERBOARD_LIMIT"] == DEFAULT_LEADERBOARD_LIMIT


def test_setup_logging_levels():
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("werkzeug").level == logging.WARNING

    setup_logging("INFO", request_log=True)
    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("werkzeug").level == logging.INFO

import pytest

from src.team_attendance.team_attendance.core.enums import RecognitionPeriod
from src.team_attendance.team_attendance.core.exceptions import ValidationError
from src.team_attendance.team_attendance.gamification.service import GamificationService
from tests.fakes import FALL, WINTER, FakeBadgeRepo, FakeChallengeRepo, FakeRecognitionRepo


def make_service(scenario, badges=None, recognitions=None):
    return GamificationService(
        FakeChallengeRepo([FALL, WINTER]),
        badges or FakeBadgeRepo(),
        recognitions or FakeRecognitionRepo(),
        scenario.events,
        scenario.check_ins,
    )


def test_challenge_progress(scenario):
    progress = make_service(scenario).challenge_progress("ch1")
    # u1 on time, coach on time, u1 late, u2 excused, u1 on time at the ad hoc session
    assert progress.current_percent == 80.0
    assert progress.completed

    with pytest.raises(ValidationError):
        make_service(scenario).challenge_progress("nope")


def test_team_challenges_newest_first(scenario):
    rows = make_service(scenario).team_challenges("t1")
    assert [p.challenge.challenge_id for p in rows] == ["ch2", "ch1"]
    assert rows[0].current_percent == 50.0
    assert rows[0].completed


def test_user_badges_are_marked_new_once(scenario, fixed_now):
    badges_repo = FakeBadgeRepo()
    service = make_service(scenario, badges=badges_repo)

    first = {b.definition.badge_id: b for b in service.user_badges(user_id="u1", organization_id="o1", now=fixed_now)}
    assert first["hours_10"].progress == 11
    assert first["hours_10"].is_new
    assert first["attend_75"].earned

    second = {b.definition.badge_id: b for b in service.user_badges(user_id="u1", organization_id="o1", now=fixed_now)}
    assert second["hours_10"].earned and not second["hours_10"].is_new


def test_recognition_replaces_same_period(scenario, fixed_now):
    recognitions = FakeRecognitionRepo()
    service = make_service(scenario, recognitions=recognitions)

    service.recognize(user_id="u1", team_id="t1", organization_id="o1", nominated_by="c1", period_type="MONTH", now=fixed_now)
    latest = service.recognize(
        user_id="u2", team_id="t1", organization_id="o1", nominated_by="c1", period_type=RecognitionPeriod.MONTH, now=fixed_now
    )
    assert [r.user_id for r in recognitions.rows] == ["u2"]
    assert latest.period == "2025-03"
    assert latest.period_type is RecognitionPeriod.MONTH

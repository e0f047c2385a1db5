import pytest

from src.team_attendance.team_attendance.core.enums import ReportFrequency
from src.team_attendance.team_attendance.core.exceptions import ValidationError
from src.team_attendance.team_attendance.reports.guardian import report_window, upcoming_events
from src.team_attendance.team_attendance.reports.service import GuardianReportService
from tests.fakes import event, utc


class FakeGuardianRepo:
    def __init__(self, links):
        self.links = links

    def list_linked_athletes(self, *, guardian_id, organization_id):
        return list(self.links.get(guardian_id, []))


def make_service(scenario):
    return GuardianReportService(
        FakeGuardianRepo({"g1": ["u1"], "g2": ["u2"]}),
        scenario.check_ins,
        scenario.events,
        scenario.teams,
    )


@pytest.mark.parametrize(
    "frequency,start",
    [
        ("WEEKLY", utc(2025, 3, 8)),
        (ReportFrequency.MONTHLY, utc(2025, 2, 15)),
        ("quarterly", utc(2024, 12, 15)),
        ("BIANNUALLY", utc(2024, 9, 15)),
    ],
)
def test_report_window(frequency, start, fixed_now):
    assert report_window(frequency, fixed_now) == (start, fixed_now)


def test_month_window_clamps_day():
    assert report_window("QUARTERLY", utc(2025, 5, 31))[0] == utc(2025, 2, 28)
    assert report_window("MONTHLY", utc(2024, 3, 31))[0] == utc(2024, 2, 29)
    with pytest.raises(ValidationError):
        report_window("DAILY", utc(2025, 5, 31))


def test_upcoming_events_limit_and_horizon(fixed_now):
    events = [event(f"e{i}", utc(2025, 3, 16 + i)) for i in range(8)]
    picked = upcoming_events(list(reversed(events)), now=fixed_now, days=7, limit=5)
    assert [e.event_id for e in picked] == ["e0", "e1", "e2", "e3", "e4"]


def test_digest_uses_report_mode(scenario, fixed_now):
    digest = make_service(scenario).build_digest(
        guardian_id="g1", organization_id="o1", frequency="BIANNUALLY", now=fixed_now
    )
    assert digest.start == utc(2024, 9, 15)
    (report,) = digest.athletes
    assert report.stats.total_events == 5
    assert report.stats.attendance_rate == 80.0
    assert report.stats.total_hours == 9
    assert [e.event_id for e in report.upcoming_events] == ["e6"]


def test_excused_is_left_out_of_guardian_rate(scenario, fixed_now):
    digest = make_service(scenario).build_digest(
        guardian_id="g2", organization_id="o1", frequency="BIANNUALLY", now=fixed_now
    )
    stats = digest.athletes[0].stats
    assert stats.counts.excused == 1
    assert stats.attendance_rate == 100.0


def test_digest_with_no_activity(scenario, fixed_now):
    digest = make_service(scenario).build_digest(guardian_id="g1", organization_id="o1", frequency="WEEKLY", now=fixed_now)
    stats = digest.athletes[0].stats
    assert (stats.total_events, stats.attendance_rate, stats.total_hours) == (0, 0.0, 0)

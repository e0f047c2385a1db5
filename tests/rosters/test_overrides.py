import pytest

from src.team_attendance.team_attendance.core.exceptions import ValidationError
from src.team_attendance.team_attendance.rosters.model import RosterOverride
from src.team_attendance.team_attendance.rosters.overrides import effective_roster, listed_overrides
from src.team_attendance.team_attendance.rosters.service import RosterService
from tests.fakes import event, utc


class FakeOverrideRepo:
    def __init__(self):
        self.events = {}
        self.series = {}

    def get_for_event(self, event_id):
        return self.events.get(event_id)

    def get_for_series(self, series_id):
        return self.series.get(series_id)

    def save_for_event(self, event_id, override):
        self.events[event_id] = override

    def save_for_series(self, series_id, override):
        self.series[series_id] = override


def test_event_exclude_beats_series_include():
    roster = effective_roster(
        ["a", "b"],
        series_override=RosterOverride(include=frozenset({"x"})),
        event_override=RosterOverride(exclude=frozenset({"x"})),
    )
    assert roster == frozenset({"a", "b"})


def test_event_include_beats_series_exclude():
    roster = effective_roster(
        ["a", "b"],
        series_override=RosterOverride(exclude=frozenset({"a"})),
        event_override=RosterOverride(include=frozenset({"a"})),
    )
    assert roster == frozenset({"a", "b"})


def test_series_rules_ignored_outside_series():
    roster = effective_roster(
        ["a"],
        series_override=RosterOverride(exclude=frozenset({"a"})),
        in_series=False,
    )
    assert roster == frozenset({"a"})


def test_applying_overrides_twice_changes_nothing():
    series = RosterOverride(include=frozenset({"x"}), exclude=frozenset({"b"}))
    ev = RosterOverride(include=frozenset({"b"}), exclude=frozenset({"a"}))
    once = effective_roster(["a", "b", "c"], series_override=series, event_override=ev)
    twice = effective_roster(once, series_override=series, event_override=ev)
    assert once == twice == frozenset({"b", "c", "x"})


def test_same_scope_add_clears_opposite_list():
    override = RosterOverride().with_include("u1").with_exclude("u1")
    assert override.include == frozenset()
    assert override.exclude == frozenset({"u1"})


def test_listed_overrides_event_rows_first():
    assert listed_overrides(["b"], ["a", "b", "c"]) == ["b", "a", "c"]


def test_roster_service_applies_series_and_event_overrides(scenario):
    series_event = event("s-1", utc(2025, 3, 20), series_id="sr1")
    scenario.events.events.append(series_event)
    overrides = FakeOverrideRepo()
    service = RosterService(scenario.events, scenario.teams, overrides)

    service.exclude_from_series("sr1", "u2")
    service.include_in_series("sr1", "guest")
    service.include_in_event("s-1", "u2")

    view = service.event_roster("s-1")
    assert view.roster == frozenset({"u1", "u2", "guest"})
    assert view.included == ["u2", "guest"]
    assert view.excluded == ["u2"]

    service.remove_event_include("s-1", "u2")
    assert "u2" not in service.event_roster("s-1").roster

    with pytest.raises(ValidationError):
        service.event_roster("missing")


def test_roster_service_removals_restore_the_base_roster(scenario):
    scenario.events.events.append(event("s-2", utc(2025, 3, 27), series_id="sr2"))
    service = RosterService(scenario.events, scenario.teams, FakeOverrideRepo())

    service.exclude_from_event("s-2", "u1")
    assert service.event_roster("s-2").roster == frozenset({"u2"})
    service.remove_event_exclude("s-2", "u1")
    assert service.event_roster("s-2").roster == frozenset({"u1", "u2"})

    service.include_in_series("sr2", "guest")
    service.exclude_from_series("sr2", "u2")
    assert service.event_roster("s-2").roster == frozenset({"u1", "guest"})
    service.remove_series_include("sr2", "guest")
    service.remove_series_exclude("sr2", "u2")
    view = service.event_roster("s-2")
    assert view.roster == frozenset({"u1", "u2"})
    assert (view.included, view.excluded) == ([], [])

from datetime import date

import pytest

from src.team_attendance.team_attendance.common.datetime_utils import sunday_weekday
from src.team_attendance.team_attendance.core.enums import RecurrenceFrequency
from src.team_attendance.team_attendance.core.exceptions import OccurrenceLimitError, ValidationError
from src.team_attendance.team_attendance.events.model import RecurrenceRule
from src.team_attendance.team_attendance.events.recurrence import build_rule, expand, parse_frequency


def rule(start, end, frequency, days=()):
    return RecurrenceRule(start_date=start, end_date=end, frequency=frequency, days_of_week=frozenset(days))


def test_daily_covers_every_day_inclusive():
    dates = expand(rule(date(2024, 2, 27), date(2024, 3, 2), RecurrenceFrequency.DAILY))
    assert dates == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1), date(2024, 3, 2)]


def test_weekly_only_yields_selected_weekdays():
    days = {1, 3}  # Monday, Wednesday
    dates = expand(rule(date(2024, 1, 1), date(2024, 3, 31), RecurrenceFrequency.WEEKLY, days))
    assert dates
    assert all(sunday_weekday(d) in days for d in dates)
    assert dates == sorted(dates)
    assert len(dates) == len(set(dates))
    assert dates[:3] == [date(2024, 1, 1), date(2024, 1, 3), date(2024, 1, 8)]


def test_biweekly_keeps_even_weeks_from_sunday_anchor():
    dates = expand(rule(date(2024, 1, 1), date(2024, 1, 28), RecurrenceFrequency.BIWEEKLY, {1}))
    assert dates == [date(2024, 1, 1), date(2024, 1, 15)]


def test_biweekly_when_start_is_midweek():
    # Start on a Wednesday; the Sunday before anchors week 0.
    dates = expand(rule(date(2024, 1, 3), date(2024, 2, 4), RecurrenceFrequency.BIWEEKLY, {0, 5}))
    assert dates == [date(2024, 1, 5), date(2024, 1, 14), date(2024, 1, 19), date(2024, 1, 28), date(2024, 2, 2)]


def test_monthly_on_the_31st_skips_short_months():
    dates = expand(rule(date(2024, 1, 31), date(2024, 5, 31), RecurrenceFrequency.MONTHLY))
    assert dates == [date(2024, 1, 31), date(2024, 3, 31), date(2024, 5, 31)]


def test_monthly_crosses_year_boundary():
    dates = expand(rule(date(2024, 11, 15), date(2025, 2, 15), RecurrenceFrequency.MONTHLY))
    assert dates == [date(2024, 11, 15), date(2024, 12, 15), date(2025, 1, 15), date(2025, 2, 15)]


def test_end_not_after_start_is_rejected():
    with pytest.raises(ValidationError):
        expand(rule(date(2024, 1, 1), date(2024, 1, 1), RecurrenceFrequency.DAILY))


def test_weekly_without_days_is_rejected():
    with pytest.raises(ValidationError):
        expand(rule(date(2024, 1, 1), date(2024, 2, 1), RecurrenceFrequency.WEEKLY))


def test_no_matching_dates_is_rejected():
    # Monday only, but the range is Tuesday-Saturday
    with pytest.raises(ValidationError):
        expand(rule(date(2024, 1, 2), date(2024, 1, 6), RecurrenceFrequency.WEEKLY, {1}))


def test_cap_is_enforced():
    daily = rule(date(2024, 1, 1), date(2025, 12, 31), RecurrenceFrequency.DAILY)
    with pytest.raises(ValidationError):
        expand(daily)
    assert len(expand(rule(date(2024, 1, 1), date(2024, 1, 10), RecurrenceFrequency.DAILY), max_occurrences=10)) == 10
    with pytest.raises(OccurrenceLimitError) as err:
        expand(rule(date(2024, 1, 1), date(2024, 1, 11), RecurrenceFrequency.DAILY), max_occurrences=10)
    assert err.value.limit == 10


def test_build_rule_from_boundary_values():
    built = build_rule(
        start_date="2024-01-01T00:00:00Z",
        end_date=1706659200000,  # 2024-01-31
        frequency="weekly",
        days_of_week=[1, "3"],
    )
    assert built.start_date == date(2024, 1, 1)
    assert built.end_date == date(2024, 1, 31)
    assert built.frequency is RecurrenceFrequency.WEEKLY
    assert built.days_of_week == frozenset({1, 3})


def test_build_rule_rejects_bad_input():
    with pytest.raises(ValidationError):
        parse_frequency("YEARLY")
    with pytest.raises(ValidationError):
        build_rule(start_date="2024-01-01", end_date="2024-02-01", frequency="WEEKLY", days_of_week=[7])
    with pytest.raises(ValidationError):
        build_rule(start_date="99999999999999999999", end_date="2024-02-01", frequency="DAILY")
    with pytest.raises(ValidationError):
        build_rule(start_date="2024-01-01", end_date="2024-02-01", frequency="WEEKLY", days_of_week=[float("inf")])


def test_unknown_frequency_on_a_hand_built_rule_is_rejected():
    with pytest.raises(ValidationError):
        expand(rule(date(2024, 1, 1), date(2024, 2, 1), "YEARLY"))


def test_plain_string_frequency_is_accepted():
    dates = expand(rule(date(2024, 1, 1), date(2024, 1, 15), "weekly", {1}))
    assert dates == [date(2024, 1, 1), date(2024, 1, 8), date(2024, 1, 15)]


def test_expansion_is_repeatable():
    biweekly = rule(date(2024, 1, 3), date(2024, 6, 30), RecurrenceFrequency.BIWEEKLY, {0, 5})
    assert expand(biweekly) == expand(biweekly)

from __future__ import annotations

from collections import Counter
from datetime import date, datetime
from typing import Iterable, Optional, Sequence, Union

from ..common.datetime_utils import duration_hours, week_start
from ..core.enums import CheckInStatus, RateMode
from ..events.model import EventOccurrence
from ..membership.model import MembershipPeriod
from ..membership.periods import filter_by_membership
from ..seasons.model import SeasonRange
from ..teams.model import TeamMember
from .factory import RateStrategyFactory
from .model import CheckInCounts, CheckInRecord, MemberHours, RateResult, TeamHours, WeeklyTrend


def attendance_percent(hours_logged: float, hours_required: float) -> float:
    """Logged over required hours as a percentage, bounded to [0, 100].

    Logged hours can exceed required ones (manual corrections), hence the
    upper clamp.
    """
    if hours_required <= 0:
        return 0.0
    return max(0.0, min(100.0, 100 * hours_logged / hours_required))


def events_in_window(
    events: Iterable[EventOccurrence],
    window: SeasonRange,
    *,
    now: datetime,
) -> list[EventOccurrence]:
    """Non-ad-hoc events inside the window, cut at `now`."""
    capped = window.capped(now)
    return [e for e in events if not e.is_ad_hoc and capped.contains(e.date)]


def required_hours(events: Iterable[EventOccurrence]) -> float:
    return sum(duration_hours(e.start_time, e.end_time) for e in events)


def logged_hours(check_ins: Iterable[CheckInRecord]) -> float:
    """Sum of approved hours; rows without hours count as 0."""
    return sum(c.hours_logged or 0.0 for c in check_ins if c.approved)


def member_hours(
    events: Sequence[EventOccurrence],
    check_ins: Sequence[CheckInRecord],
    periods: Sequence[MembershipPeriod],
    *,
    window: SeasonRange,
    now: datetime,
    user_id: Optional[str] = None,
) -> MemberHours:
    """Hours mode for one member of one team.

    Only events inside the capped window and inside the member's periods are
    charged; only approved check-ins for those events are credited.
    """
    eligible = filter_by_membership(events_in_window(events, window, now=now), periods)
    event_ids = tuple(e.event_id for e in eligible)
    wanted = set(event_ids)
    credited = [
        c for c in check_ins
        if c.event_id in wanted and (user_id is None or c.user_id == user_id)
    ]

    hours_required = required_hours(eligible)
    hours_logged = logged_hours(credited)
    return MemberHours(
        user_id=user_id,
        hours_logged=hours_logged,
        hours_required=hours_required,
        attendance_percent=attendance_percent(hours_logged, hours_required),
        event_ids=event_ids,
    )


def team_hours(team_id: str, members: Sequence[TeamMember], check_ins: Sequence[CheckInRecord]) -> TeamHours:
    """Team rollup against each athlete's fixed `hours_required` target."""
    athletes = [m for m in members if m.is_athlete]
    athlete_ids = {m.user_id for m in athletes}
    hours_logged = logged_hours(c for c in check_ins if c.user_id in athlete_ids)
    hours_required = sum(m.hours_required for m in athletes)
    return TeamHours(
        team_id=team_id,
        hours_logged=hours_logged,
        hours_required=hours_required,
        attendance_percent=attendance_percent(hours_logged, hours_required),
    )


def count_check_ins(check_ins: Iterable[CheckInRecord]) -> CheckInCounts:
    tally = Counter(c.status for c in check_ins)
    return CheckInCounts(
        on_time=tally[CheckInStatus.ON_TIME],
        late=tally[CheckInStatus.LATE],
        absent=tally[CheckInStatus.ABSENT],
        excused=tally[CheckInStatus.EXCUSED],
    )


def attendance_rate(
    check_ins: Iterable[CheckInRecord],
    mode: Union[RateMode, str],
    *,
    factory: Optional[RateStrategyFactory] = None,
) -> RateResult:
    """Count mode: attended check-ins over the mode's total."""
    strategy = (factory or RateStrategyFactory()).for_mode(mode)
    counts = count_check_ins(check_ins)
    return RateResult(
        mode=strategy.mode,
        counts=counts,
        attended=counts.attended,
        total=strategy.denominator(counts),
        rate=strategy.rate(counts),
    )


def weekly_trends(events: Sequence[EventOccurrence], check_ins: Sequence[CheckInRecord]) -> list[WeeklyTrend]:
    """Required vs logged hours per Monday-started week, oldest week first."""
    logged_by_event: dict[str, float] = {}
    for c in check_ins:
        if c.approved:
            logged_by_event[c.event_id] = logged_by_event.get(c.event_id, 0.0) + (c.hours_logged or 0.0)

    weeks: dict[date, list[float]] = {}
    for e in events:
        bucket = weeks.setdefault(week_start(e.date), [0.0, 0.0, 0])
        bucket[0] += duration_hours(e.start_time, e.end_time)
        bucket[1] += logged_by_event.get(e.event_id, 0.0)
        bucket[2] += 1

    return [
        WeeklyTrend(
            week_start=week,
            hours_required=required,
            hours_logged=logged,
            events_count=int(count),
            attendance_percent=attendance_percent(logged, required),
        )
        for week, (required, logged, count) in sorted(weeks.items())
    ]


def average_percent(percents: Sequence[float]) -> float:
    if not percents:
        return 0.0
    return sum(percents) / len(percents)

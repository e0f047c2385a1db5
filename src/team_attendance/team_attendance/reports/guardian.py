from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Sequence, Union

from dateutil.relativedelta import relativedelta

from ..attendance.aggregator import attendance_rate
from ..attendance.model import CheckInRecord
from ..core.constants import DEFAULT_UPCOMING_EVENT_DAYS, DEFAULT_UPCOMING_EVENT_LIMIT
from ..core.enums import RateMode, ReportFrequency
from ..core.exceptions import ValidationError
from ..events.model import EventOccurrence
from .model import AthleteReportStats

_MONTHS_BACK = {
    ReportFrequency.MONTHLY: 1,
    ReportFrequency.QUARTERLY: 3,
    ReportFrequency.BIANNUALLY: 6,
}


def parse_report_frequency(value: Union[ReportFrequency, str]) -> ReportFrequency:
    if isinstance(value, ReportFrequency):
        return value
    try:
        return ReportFrequency(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Tần suất báo cáo không hợp lệ: {value!r}") from None


def report_window(frequency: Union[ReportFrequency, str], now: datetime) -> tuple[datetime, datetime]:
    """(start, now) covered by a digest sent at `now`."""
    frequency = parse_report_frequency(frequency)
    if frequency is ReportFrequency.WEEKLY:
        return now - timedelta(days=7), now
    # relativedelta clamps the day (May 31 - 3 months -> Feb 28/29).
    return now - relativedelta(months=_MONTHS_BACK[frequency]), now


def athlete_report_stats(check_ins: Sequence[CheckInRecord]) -> AthleteReportStats:
    """Report-mode rate; excused check-ins are left out of the denominator."""
    result = attendance_rate(check_ins, RateMode.REPORT)
    return AthleteReportStats(
        total_events=len(check_ins),
        counts=result.counts,
        attendance_rate=result.rate,
        total_hours=sum(c.hours_logged or 0.0 for c in check_ins),
    )


def upcoming_events(
    events: Iterable[EventOccurrence],
    *,
    now: datetime,
    days: int = DEFAULT_UPCOMING_EVENT_DAYS,
    limit: int = DEFAULT_UPCOMING_EVENT_LIMIT,
) -> list[EventOccurrence]:
    horizon = now + timedelta(days=days)
    unique = {e.event_id: e for e in events if now <= e.date <= horizon}
    return sorted(unique.values(), key=lambda e: e.date)[:limit]

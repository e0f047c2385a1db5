from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

from ..core.constants import ALL_DAY, FALLBACK_HOUR, FALLBACK_MINUTE, OCCURRENCE_HOUR_UTC
from ..core.exceptions import ValidationError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_AMPM_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.IGNORECASE)
_24H_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_EPOCH_MS_RE = re.compile(r"^-?\d+$")
_DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

InstantLike = Union[str, int, float, datetime, date]


@dataclass(frozen=True)
class ClockTime:
    """Wall-clock time of an event; `all_day` events carry no time."""

    hour: int = FALLBACK_HOUR
    minute: int = FALLBACK_MINUTE
    all_day: bool = False

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute


NOON = ClockTime()
ALL_DAY_TIME = ClockTime(hour=0, minute=0, all_day=True)


def parse_clock_time(value: Optional[str]) -> ClockTime:
    """Parse "6:00 PM" style strings.

    24-hour "18:00" is accepted too. "All Day" maps to `ALL_DAY_TIME`.
    Anything unparsable falls back to noon so one bad row cannot abort a
    whole batch; strict callers validate upstream.
    """
    text = (value or "").strip()
    if text.lower() == ALL_DAY.lower():
        return ALL_DAY_TIME

    match = _AMPM_RE.match(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if not (1 <= hour <= 12 and minute < 60):
            return NOON
        period = match.group(3).upper()
        if period == "PM" and hour != 12:
            hour += 12
        if period == "AM" and hour == 12:
            hour = 0
        return ClockTime(hour=hour, minute=minute)

    match = _24H_RE.match(text)
    if match:
        hour, minute = int(match.group(1)), int(match.group(2))
        if hour < 24 and minute < 60:
            return ClockTime(hour=hour, minute=minute)

    return NOON


def duration_hours(start: Optional[str], end: Optional[str]) -> float:
    """Elapsed hours between two clock strings, never negative.

    All-day or missing times contribute no required hours.
    """
    if not start or not end:
        return 0.0
    start_t = parse_clock_time(start)
    end_t = parse_clock_time(end)
    if start_t.all_day or end_t.all_day:
        return 0.0
    return max(0.0, (end_t.minutes - start_t.minutes) / 60)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _from_epoch_ms(value: Union[int, float]) -> datetime:
    try:
        return EPOCH + timedelta(milliseconds=value)
    except (OverflowError, ValueError):
        raise ValidationError(f"Thời điểm ngoài phạm vi: {value!r}") from None


def to_instant(value: InstantLike) -> datetime:
    """Normalize a stored timestamp into an aware UTC datetime.

    Rows written by the two storage paths carry either epoch milliseconds
    (as a number or a numeric string) or an ISO-8601 string. Date-only
    strings land on noon UTC, the same calendar day everywhere.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return occurrence_instant(value)
    if isinstance(value, bool):
        raise ValidationError(f"Không nhận dạng được thời điểm: {value!r}")
    if isinstance(value, (int, float)):
        return _from_epoch_ms(value)

    text = str(value).strip()
    if _EPOCH_MS_RE.match(text):
        return _from_epoch_ms(int(text))
    if _DATE_ONLY_RE.match(text):
        try:
            return occurrence_instant(date.fromisoformat(text))
        except ValueError:
            raise ValidationError(f"Ngày không hợp lệ: {text!r}") from None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"Không nhận dạng được thời điểm: {text!r}") from None
    try:
        return _as_utc(parsed)
    except OverflowError:
        raise ValidationError(f"Thời điểm ngoài phạm vi: {text!r}") from None


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_instant_of(year: int, month: int) -> datetime:
    return datetime(year, month, 1, tzinfo=timezone.utc)


def last_instant_of(year: int, month: int) -> datetime:
    last_day = date(year, month, days_in_month(year, month))
    return datetime.combine(last_day, time.max, tzinfo=timezone.utc)


def occurrence_instant(day: date) -> datetime:
    return datetime.combine(day, time(OCCURRENCE_HOUR_UTC), tzinfo=timezone.utc)


def sunday_weekday(day: date) -> int:
    """Weekday number with Sunday=0 ... Saturday=6."""
    return day.isoweekday() % 7


def week_start(instant: datetime) -> date:
    """Monday of the (UTC) week containing `instant`."""
    day = _as_utc(instant).date()
    return day - timedelta(days=day.weekday())


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def parse_as_of(value: Optional[str]) -> Optional[datetime]:
    """Optional `asOf` query value; None means "now" to the services."""
    if value is None or not str(value).strip():
        return None
    return to_instant(value)

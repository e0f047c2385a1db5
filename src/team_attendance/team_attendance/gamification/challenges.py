from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Sequence, Union

from ..attendance.aggregator import attendance_rate
from ..attendance.model import CheckInRecord
from ..common.datetime_utils import sunday_weekday
from ..core.enums import RateMode, RecognitionPeriod
from ..core.exceptions import ValidationError
from ..events.model import EventOccurrence
from ..seasons.model import SeasonRange


def challenge_percent(
    events: Sequence[EventOccurrence],
    check_ins: Sequence[CheckInRecord],
    window: SeasonRange,
) -> float:
    """Challenge-mode rate of the check-ins recorded for events inside `window`."""
    wanted = {e.event_id for e in events if window.contains(e.date)}
    if not wanted:
        return 0.0
    rows = [c for c in check_ins if c.event_id in wanted]
    return attendance_rate(rows, RateMode.CHALLENGE).rate


def parse_recognition_period(value: Union[RecognitionPeriod, str]) -> RecognitionPeriod:
    if isinstance(value, RecognitionPeriod):
        return value
    try:
        return RecognitionPeriod(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Loại kỳ vinh danh không hợp lệ: {value!r}") from None


def recognition_period_key(period_type: Union[RecognitionPeriod, str], now: datetime) -> str:
    """`YYYY-Www` for weekly recognitions, `YYYY-MM` for monthly ones.

    Weeks are counted from January 1st, shifted by its Sunday-based weekday.
    """
    period_type = parse_recognition_period(period_type)

    if period_type is RecognitionPeriod.WEEK:
        now = now if now.tzinfo else now.replace(tzinfo=timezone.utc)
        jan1 = datetime(now.year, 1, 1, tzinfo=now.tzinfo)
        elapsed_days = (now - jan1).total_seconds() / 86400
        week = math.ceil((elapsed_days + sunday_weekday(jan1.date()) + 1) / 7)
        return f"{now.year}-W{week:02d}"
    return f"{now.year}-{now.month:02d}"

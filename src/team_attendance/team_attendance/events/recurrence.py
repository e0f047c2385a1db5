from __future__ import annotations

from datetime import date, datetime, time
from itertools import islice
from typing import Iterable, Iterator, Optional, Union

from dateutil.rrule import DAILY, FR, MO, MONTHLY, SA, SU, TH, TU, WE, WEEKLY, rrule

from ..common.datetime_utils import InstantLike, to_instant
from ..common.validators import require_weekdays
from ..core.constants import MAX_OCCURRENCES
from ..core.enums import RecurrenceFrequency
from ..core.exceptions import OccurrenceLimitError, ValidationError
from .model import RecurrenceRule

_WEEKLY_FREQUENCIES = (RecurrenceFrequency.WEEKLY, RecurrenceFrequency.BIWEEKLY)

# Indexed by the Sunday=0 weekday numbering used across the engine.
_RRULE_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)


def _rrule_for(rule: RecurrenceRule, frequency: RecurrenceFrequency) -> rrule:
    dtstart = datetime.combine(rule.start_date, time())
    until = datetime.combine(rule.end_date, time())
    byweekday = [_RRULE_WEEKDAYS[int(d)] for d in rule.days_of_week]

    if frequency is RecurrenceFrequency.DAILY:
        return rrule(DAILY, dtstart=dtstart, until=until)
    if frequency is RecurrenceFrequency.WEEKLY:
        return rrule(WEEKLY, dtstart=dtstart, until=until, byweekday=byweekday)
    if frequency is RecurrenceFrequency.BIWEEKLY:
        # Week 0 is the Sunday-started week containing start_date.
        return rrule(WEEKLY, interval=2, wkst=SU, dtstart=dtstart, until=until, byweekday=byweekday)
    # rrule drops months that have no such day (e.g. the 31st).
    return rrule(MONTHLY, dtstart=dtstart, until=until, bymonthday=rule.start_date.day)


def _occurrence_dates(rule: RecurrenceRule, frequency: RecurrenceFrequency) -> Iterator[date]:
    for instant in _rrule_for(rule, frequency):
        yield instant.date()


def parse_frequency(value: Union[str, RecurrenceFrequency]) -> RecurrenceFrequency:
    if isinstance(value, RecurrenceFrequency):
        return value
    try:
        return RecurrenceFrequency(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Tần suất lặp không hợp lệ: {value!r}") from None


def build_rule(
    *,
    start_date: InstantLike,
    end_date: InstantLike,
    frequency: Union[str, RecurrenceFrequency],
    days_of_week: Optional[Iterable[int]] = None,
) -> RecurrenceRule:
    """Build a rule from boundary values (ISO or epoch-ms dates, enum strings)."""
    start = start_date if type(start_date) is date else to_instant(start_date).date()
    end = end_date if type(end_date) is date else to_instant(end_date).date()
    return RecurrenceRule(
        start_date=start,
        end_date=end,
        frequency=parse_frequency(frequency),
        days_of_week=require_weekdays(days_of_week or (), "daysOfWeek"),
    )


def validate_rule(rule: RecurrenceRule) -> RecurrenceFrequency:
    frequency = parse_frequency(rule.frequency)
    if rule.end_date <= rule.start_date:
        raise ValidationError("Ngày kết thúc phải sau ngày bắt đầu")
    if frequency in _WEEKLY_FREQUENCIES and not rule.days_of_week:
        raise ValidationError("daysOfWeek là bắt buộc với tần suất WEEKLY và BIWEEKLY")
    require_weekdays(rule.days_of_week, "daysOfWeek")
    return frequency


def expand(rule: RecurrenceRule, *, max_occurrences: int = MAX_OCCURRENCES) -> list[date]:
    """Expand a recurrence rule into its concrete, ascending occurrence dates.

    Raises ValidationError when nothing matches or when the series would have
    more than `max_occurrences` dates; both are fixed by the user editing the
    rule, never by retrying.
    """
    frequency = validate_rule(rule)

    # One past the cap is enough to know the rule is too long.
    dates = list(dict.fromkeys(islice(_occurrence_dates(rule, frequency), max_occurrences + 1)))

    if not dates:
        raise ValidationError("Không có buổi nào khớp với quy tắc lặp đã chọn")
    if len(dates) > max_occurrences:
        raise OccurrenceLimitError(max_occurrences)
    return dates

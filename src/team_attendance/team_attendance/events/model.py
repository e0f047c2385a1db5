from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import RecurrenceFrequency


@dataclass(frozen=True)
class RecurrenceRule:
    """Input of the recurrence expander; consumed once to produce dates."""

    start_date: date
    end_date: date
    frequency: RecurrenceFrequency
    days_of_week: frozenset[int] = frozenset()


@dataclass(frozen=True)
class EventOccurrence:
    """Thực thể miền (domain): Một buổi tập/sự kiện cụ thể trên lịch."""

    event_id: str
    date: datetime
    start_time: str
    end_time: str
    team_id: Optional[str] = None
    recurring_series_id: Optional[str] = None
    organization_id: Optional[str] = None
    title: str = ""
    is_ad_hoc: bool = False


@dataclass(frozen=True)
class RecurringSeries:
    """Template a recurring event is created from."""

    series_id: str
    organization_id: str
    title: str
    start_time: str
    end_time: str
    rule: RecurrenceRule
    team_id: Optional[str] = None
    included_user_ids: frozenset[str] = field(default_factory=frozenset)
    excluded_user_ids: frozenset[str] = field(default_factory=frozenset)

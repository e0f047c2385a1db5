from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence, TypeVar

from .model import MembershipPeriod


class Dated(Protocol):
    @property
    def date(self) -> datetime: ...


T = TypeVar("T", bound=Dated)


def event_during_membership(event_date: datetime, periods: Sequence[MembershipPeriod]) -> bool:
    return any(p.contains(event_date) for p in periods)


def filter_by_membership(events: Sequence[T], periods: Sequence[MembershipPeriod]) -> list[T]:
    """Keep events whose date falls inside at least one membership period.

    Periods may come unsorted or overlapping; output keeps the input order of
    `events`. No periods means no events: the caller decides whether to
    substitute an implicit period (see `resolve_periods`).
    """
    if not periods:
        return []
    return [e for e in events if event_during_membership(e.date, periods)]


def resolve_periods(
    history: Sequence[MembershipPeriod],
    *,
    joined_at: Optional[datetime],
    season_start: datetime,
) -> list[MembershipPeriod]:
    """Periods to filter with: recorded history, else one implicit open period.

    The implicit period starts at the member's recorded join time, or at the
    season start when that is missing too (legacy rows).
    """
    if history:
        return sorted(history, key=lambda p: p.joined_at)
    return [MembershipPeriod(joined_at=joined_at or season_start, left_at=None)]

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import occurrence_instant
from ..core.constants import MAX_OCCURRENCES
from .model import EventOccurrence, RecurringSeries
from .recurrence import expand


@dataclass(frozen=True)
class SeriesDeletionPlan:
    """Which occurrences to detach (keep, unlink) and which to delete."""

    detach_ids: list[str]
    delete_ids: list[str]


def _default_event_id(series: RecurringSeries, index: int) -> str:
    return f"{series.series_id}-{index + 1:03d}"


def build_series_occurrences(
    series: RecurringSeries,
    *,
    max_occurrences: int = MAX_OCCURRENCES,
    make_id: Optional[Callable[[RecurringSeries, int], str]] = None,
) -> list[EventOccurrence]:
    """Materialize every occurrence of a series before the caller's batch write.

    The full list is validated (via `expand`) up front so the caller can
    write it atomically and a half-created series is never visible.
    """
    make_id = make_id or _default_event_id
    dates = expand(series.rule, max_occurrences=max_occurrences)
    return [
        EventOccurrence(
            event_id=make_id(series, i),
            date=occurrence_instant(day),
            start_time=series.start_time,
            end_time=series.end_time,
            team_id=series.team_id,
            recurring_series_id=series.series_id,
            organization_id=series.organization_id,
            title=series.title,
        )
        for i, day in enumerate(dates)
    ]


def plan_series_deletion(
    occurrences: Sequence[EventOccurrence],
    series_id: str,
    *,
    now: datetime,
    future_only: bool,
) -> SeriesDeletionPlan:
    """Split a series' occurrences for a delete.

    With `future_only`, occurrences before `now` are detached from the series
    so their check-in history survives; everything still linked is deleted.
    """
    detach: list[str] = []
    delete: list[str] = []
    for occ in occurrences:
        if occ.recurring_series_id != series_id:
            continue
        if future_only and occ.date < now:
            detach.append(occ.event_id)
        else:
            delete.append(occ.event_id)
    return SeriesDeletionPlan(detach_ids=detach, delete_ids=delete)


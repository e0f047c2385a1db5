from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import EventOccurrence, RecurringSeries


class EventRepository(Protocol):
    def get_by_id(self, event_id: str) -> Optional[EventOccurrence]:
        raise NotImplementedError

    def list_for_team(
        self,
        team_id: str,
        *,
        start: datetime,
        end: datetime,
        include_ad_hoc: bool = False,
    ) -> Sequence[EventOccurrence]:
        """Events owned by or shared with the team, with `start <= date <= end`."""

        raise NotImplementedError

    def list_for_organization(
        self,
        organization_id: str,
        *,
        start: datetime,
        end: datetime,
        include_ad_hoc: bool = False,
    ) -> Sequence[EventOccurrence]:
        raise NotImplementedError


class RecurringSeriesRepository(Protocol):
    def create_with_occurrences(self, series: RecurringSeries, occurrences: Sequence[EventOccurrence]) -> str:
        """Persist the series and all of its occurrences in one atomic batch.

        Returns series_id.
        """

        raise NotImplementedError

    def list_occurrences(self, series_id: str) -> Sequence[EventOccurrence]:
        raise NotImplementedError

    def apply_deletion(self, series_id: str, *, detach_ids: Sequence[str], delete_ids: Sequence[str]) -> None:
        """Detach, then delete, then drop the series itself, atomically."""

        raise NotImplementedError

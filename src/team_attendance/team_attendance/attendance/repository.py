from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import CheckInRecord


class CheckInRepository(Protocol):
    def list_for_user_events(
        self,
        *,
        user_id: str,
        event_ids: Sequence[str],
        approved_only: bool = True,
    ) -> Sequence[CheckInRecord]:
        raise NotImplementedError

    def list_for_events(self, event_ids: Sequence[str], *, approved_only: bool = True) -> Sequence[CheckInRecord]:
        raise NotImplementedError

    def list_for_user(
        self,
        *,
        user_id: str,
        organization_id: str,
        team_id: Optional[str] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        approved_only: bool = False,
    ) -> Sequence[CheckInRecord]:
        """Check-ins joined with their event's date and team.

        `start`/`end` bound the event date (inclusive) when given.
        """

        raise NotImplementedError

from __future__ import annotations

from typing import Protocol, Sequence

from .model import MembershipPeriod


class MembershipHistoryRepository(Protocol):
    def list_history(self, *, user_id: str, team_id: str) -> Sequence[MembershipPeriod]:
        """History rows for one (user, team), ordered by joined_at ascending."""

        raise NotImplementedError

    def replace_history(self, *, user_id: str, team_id: str, periods: Sequence[MembershipPeriod]) -> None:
        raise NotImplementedError

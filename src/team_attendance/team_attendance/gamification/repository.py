from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Protocol, Sequence

from .model import Challenge, Recognition


class ChallengeRepository(Protocol):
    def get_by_id(self, challenge_id: str) -> Optional[Challenge]:
        raise NotImplementedError

    def list_for_team(self, team_id: str) -> Sequence[Challenge]:
        raise NotImplementedError


class BadgeRepository(Protocol):
    def earned_badges(self, *, user_id: str, organization_id: str) -> Mapping[str, datetime]:
        """badge_id -> earned_at for badges already stored."""

        raise NotImplementedError

    def record_earned(self, *, user_id: str, organization_id: str, badge_ids: Sequence[str], earned_at: datetime) -> None:
        raise NotImplementedError


class RecognitionRepository(Protocol):
    def replace_for_period(self, recognition: Recognition) -> Recognition:
        """Store `recognition`, dropping any other one for the same team and period."""

        raise NotImplementedError

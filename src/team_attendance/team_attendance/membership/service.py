from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import now_utc
from .history import close_open_periods, open_period
from .model import MembershipPeriod
from .repository import MembershipHistoryRepository

logger = logging.getLogger(__name__)


class MembershipService:
    def __init__(self, history: MembershipHistoryRepository):
        self._history = history

    def record_join(self, *, user_id: str, team_id: str, now: datetime | None = None) -> list[MembershipPeriod]:
        now = now or now_utc()
        current = list(self._history.list_history(user_id=user_id, team_id=team_id))
        updated = open_period(current, now)
        if updated != current:
            self._history.replace_history(user_id=user_id, team_id=team_id, periods=updated)
            logger.info("user %s joined team %s at %s", user_id, team_id, now.isoformat())
        return updated

    def record_leave(self, *, user_id: str, team_id: str, now: datetime | None = None) -> list[MembershipPeriod]:
        now = now or now_utc()
        current = list(self._history.list_history(user_id=user_id, team_id=team_id))
        updated = close_open_periods(current, now)
        if updated != current:
            self._history.replace_history(user_id=user_id, team_id=team_id, periods=updated)
            logger.info("user %s left team %s at %s", user_id, team_id, now.isoformat())
        return updated

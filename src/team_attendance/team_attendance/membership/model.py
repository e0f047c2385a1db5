from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MembershipPeriod:
    """Khoảng thời gian thành viên thuộc đội; `left_at=None` là đang hoạt động."""

    joined_at: datetime
    left_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.left_at is None

    def contains(self, instant: datetime) -> bool:
        """Half-open: `joined_at <= instant < left_at`."""
        if instant < self.joined_at:
            return False
        return self.left_at is None or instant < self.left_at

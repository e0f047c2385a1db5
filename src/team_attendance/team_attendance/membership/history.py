from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.exceptions import ValidationError
from .model import MembershipPeriod


def open_period(history: Sequence[MembershipPeriod], joined_at: datetime) -> list[MembershipPeriod]:
    """History after a (re)join; re-adding a current member changes nothing."""
    if any(p.is_open for p in history):
        return list(history)
    if history and joined_at < max(p.left_at for p in history):
        raise ValidationError("Thời điểm tham gia phải sau lần rời đội gần nhất")
    return [*history, MembershipPeriod(joined_at=joined_at, left_at=None)]


def close_open_periods(history: Sequence[MembershipPeriod], left_at: datetime) -> list[MembershipPeriod]:
    """History after the member leaves; rows are closed, never deleted."""
    closed: list[MembershipPeriod] = []
    for p in history:
        if p.is_open:
            if left_at < p.joined_at:
                raise ValidationError("Thời điểm rời đội phải sau thời điểm tham gia")
            closed.append(MembershipPeriod(joined_at=p.joined_at, left_at=left_at))
        else:
            closed.append(p)
    return closed

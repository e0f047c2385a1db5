from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from ..core.enums import CheckInStatus
from .model import CheckInRecord, Streaks

_NO_DATE = datetime.min.replace(tzinfo=timezone.utc)


def compute_streaks(check_ins: Sequence[CheckInRecord]) -> Streaks:
    """Runs of attended check-ins in event-date order.

    ABSENT breaks a run; EXCUSED neither extends nor breaks it.
    """
    ordered = sorted(check_ins, key=lambda c: c.event_date or _NO_DATE)

    best = running = 0
    for c in ordered:
        if c.attended:
            running += 1
            best = max(best, running)
        elif c.status == CheckInStatus.ABSENT:
            running = 0

    current = 0
    for c in reversed(ordered):
        if c.attended:
            current += 1
        elif c.status == CheckInStatus.ABSENT:
            break

    return Streaks(current=current, best=best)

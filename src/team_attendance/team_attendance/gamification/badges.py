from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional

from .model import BadgeDefinition, BadgeProgress, BadgeStats

BADGE_DEFINITIONS: tuple[BadgeDefinition, ...] = (
    # Hours
    BadgeDefinition("hours_10", "Getting Started", "Log 10 hours of training", "hours", 10, "hours_logged"),
    BadgeDefinition("hours_25", "Committed", "Log 25 hours of training", "hours", 25, "hours_logged"),
    BadgeDefinition("hours_50", "Dedicated", "Log 50 hours of training", "hours", 50, "hours_logged"),
    BadgeDefinition("hours_100", "Century Club", "Log 100 hours of training", "hours", 100, "hours_logged"),
    BadgeDefinition("hours_250", "Elite Athlete", "Log 250 hours of training", "hours", 250, "hours_logged"),
    # Best streak ever
    BadgeDefinition("streak_5", "On a Roll", "Attend 5 events in a row", "streak", 5, "best_streak"),
    BadgeDefinition("streak_10", "Unstoppable", "Attend 10 events in a row", "streak", 10, "best_streak"),
    BadgeDefinition("streak_25", "Streak Master", "Attend 25 events in a row", "streak", 25, "best_streak"),
    # Attendance rate
    BadgeDefinition("attend_75", "Reliable", "Reach 75% attendance rate", "attendance", 75, "attendance_percent"),
    BadgeDefinition("attend_90", "Consistent", "Reach 90% attendance rate", "attendance", 90, "attendance_percent"),
    BadgeDefinition("attend_100", "Perfect Attendance", "Reach 100% attendance rate", "attendance", 100, "attendance_percent"),
    # Check-ins
    BadgeDefinition("checkin_10", "Regular", "Check in to 10 events", "checkins", 10, "check_in_count"),
    BadgeDefinition("checkin_25", "Veteran", "Check in to 25 events", "checkins", 25, "check_in_count"),
    BadgeDefinition("checkin_50", "All-Star", "Check in to 50 events", "checkins", 50, "check_in_count"),
    BadgeDefinition("checkin_100", "Legend", "Check in to 100 events", "checkins", 100, "check_in_count"),
)


def evaluate_badges(
    stats: BadgeStats,
    earned: Mapping[str, datetime],
    *,
    now: datetime,
    definitions: tuple[BadgeDefinition, ...] = BADGE_DEFINITIONS,
) -> list[BadgeProgress]:
    """Progress for every badge; `is_new` marks badges reached but not yet stored."""
    out: list[BadgeProgress] = []
    for d in definitions:
        progress = float(getattr(stats, d.field))
        reached = progress >= d.threshold
        earned_at: Optional[datetime] = earned.get(d.badge_id)
        is_new = reached and earned_at is None
        out.append(
            BadgeProgress(
                definition=d,
                progress=progress,
                earned=reached,
                is_new=is_new,
                earned_at=now if is_new else earned_at,
            )
        )
    return out

from datetime import datetime, timezone

from src.team_attendance.team_attendance.gamification.badges import BADGE_DEFINITIONS, evaluate_badges
from src.team_attendance.team_attendance.gamification.model import BadgeStats

NOW = datetime(2025, 3, 15, tzinfo=timezone.utc)


def by_id(badges):
    return {b.definition.badge_id: b for b in badges}


def test_catalogue_covers_all_categories():
    assert {d.category for d in BADGE_DEFINITIONS} == {"hours", "streak", "attendance", "checkins"}
    assert len(BADGE_DEFINITIONS) == 15


def test_thresholds_and_new_flags():
    stats = BadgeStats(hours_logged=26, check_in_count=10, attendance_percent=90, best_streak=4)
    earlier = datetime(2025, 1, 1, tzinfo=timezone.utc)
    badges = by_id(evaluate_badges(stats, {"hours_10": earlier}, now=NOW))

    assert badges["hours_10"].earned and not badges["hours_10"].is_new
    assert badges["hours_10"].earned_at == earlier
    assert badges["hours_25"].earned and badges["hours_25"].is_new
    assert badges["hours_25"].earned_at == NOW
    assert not badges["hours_50"].earned
    assert not badges["streak_5"].earned
    assert badges["streak_5"].progress == 4
    assert badges["attend_90"].earned and not badges["attend_100"].earned
    assert badges["checkin_10"].earned

from __future__ import annotations

from typing import Iterable

from ..teams.model import TeamMember
from .model import CheckInRecord


def non_athlete_team_map(memberships: Iterable[TeamMember]) -> dict[str, set[str]]:
    """user_id -> teams on which that user is staff rather than an athlete."""
    team_map: dict[str, set[str]] = {}
    for m in memberships:
        if not m.is_athlete:
            team_map.setdefault(m.user_id, set()).add(m.team_id)
    return team_map


def is_athlete_check_in(check_in: CheckInRecord, team_map: dict[str, set[str]]) -> bool:
    """A coach on team A who plays on team B still has team B check-ins counted.

    Org-wide events (no team) always count.
    """
    if not check_in.event_team_id:
        return True
    return check_in.event_team_id not in team_map.get(check_in.user_id, set())

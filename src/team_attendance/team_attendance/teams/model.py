from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import TeamRole
from ..seasons.model import OrgSeason


@dataclass(frozen=True)
class Team:
    """Thực thể miền (domain): Đội, tham chiếu (không sở hữu) mùa giải."""

    team_id: str
    organization_id: str
    name: str
    org_season: Optional[OrgSeason] = None
    season_year: Optional[int] = None
    archived: bool = False


@dataclass(frozen=True)
class TeamMember:
    user_id: str
    team_id: str
    role: TeamRole = TeamRole.MEMBER
    hours_required: float = 0.0
    joined_at: Optional[datetime] = None
    display_name: Optional[str] = None

    @property
    def is_athlete(self) -> bool:
        return self.role.is_athlete

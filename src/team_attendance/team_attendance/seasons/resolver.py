from __future__ import annotations

from datetime import datetime

from ..common.datetime_utils import EPOCH, first_instant_of, last_instant_of
from ..common.validators import require_month
from ..teams.model import Team
from .model import SeasonRange


def resolve_season_range(start_month: int, end_month: int, year: int) -> SeasonRange:
    """Map a month-range season onto concrete instants.

    `year` is the year the season starts in. When `end_month` is before
    `start_month` the season wraps and ends in `year + 1` (Sep-Jun 2024 runs
    2024-09-01 through the end of 2025-06-30).
    """
    start_month = require_month(start_month, "Tháng bắt đầu")
    end_month = require_month(end_month, "Tháng kết thúc")
    year = int(year)

    start = first_instant_of(year, start_month)
    if start_month <= end_month:
        end = last_instant_of(year, end_month)
    else:
        end = last_instant_of(year + 1, end_month)
    return SeasonRange(start=start, end=end)


def fallback_range(now: datetime) -> SeasonRange:
    """Full-history range used for teams with no season assigned."""
    return SeasonRange(start=EPOCH, end=now)


def team_season_range(team: Team, *, now: datetime) -> SeasonRange:
    if team.org_season is None or not team.season_year:
        return fallback_range(now)
    season = team.org_season
    return resolve_season_range(season.start_month, season.end_month, team.season_year)


def is_team_in_current_season(team: Team, *, now: datetime) -> bool:
    """Teams without a season (legacy teams) always count as current."""
    if team.org_season is None or not team.season_year:
        return True
    return team_season_range(team, now=now).contains(now)


def season_display_name(season_name: str, season_year: int) -> str:
    return f"{season_name} {season_year}"

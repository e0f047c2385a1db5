from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OrgSeason:
    """Thực thể miền (domain): Mùa giải của tổ chức, theo khoảng tháng."""

    season_id: str
    organization_id: str
    name: str
    start_month: int
    end_month: int


@dataclass(frozen=True)
class SeasonRange:
    """Concrete instant range of a season; both ends are inclusive."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        return self.start <= instant <= self.end

    def capped(self, now: datetime) -> "SeasonRange":
        """Same range with the upper bound cut at `now` for as-of-today reads."""
        return SeasonRange(start=self.start, end=min(self.end, now))

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CheckInStatus, RateMode


@dataclass(frozen=True)
class CheckInRecord:
    """Thực thể miền (domain): Bản ghi điểm danh của một thành viên cho một sự kiện."""

    check_in_id: str
    user_id: str
    event_id: str
    status: CheckInStatus
    hours_logged: Optional[float] = None
    approved: bool = True
    event_date: Optional[datetime] = None
    event_team_id: Optional[str] = None

    @property
    def attended(self) -> bool:
        return self.status.attended


@dataclass(frozen=True)
class MemberHours:
    user_id: Optional[str]
    hours_logged: float
    hours_required: float
    attendance_percent: float
    event_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class TeamHours:
    team_id: str
    hours_logged: float
    hours_required: float
    attendance_percent: float


@dataclass(frozen=True)
class CheckInCounts:
    on_time: int = 0
    late: int = 0
    absent: int = 0
    excused: int = 0

    @property
    def attended(self) -> int:
        return self.on_time + self.late

    @property
    def total(self) -> int:
        return self.on_time + self.late + self.absent + self.excused


@dataclass(frozen=True)
class RateResult:
    """Count-mode result; `rate` is a percentage and is not rounded."""

    mode: RateMode
    counts: CheckInCounts
    attended: int
    total: int
    rate: float


@dataclass(frozen=True)
class Streaks:
    current: int
    best: int


@dataclass(frozen=True)
class MemberStats:
    """Read-model cho màn hình thống kê của một thành viên."""

    user_id: str
    hours_logged: float
    hours_required: float
    attendance_percent: float
    current_streak: int
    best_streak: int
    team_size: int = 0
    org_size: int = 0


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    user_id: str
    display_name: Optional[str]
    hours_logged: float
    hours_required: float
    attendance_percent: float


@dataclass(frozen=True)
class TeamRanking:
    rank: int
    team_id: str
    team_name: str
    attendance_percent: float


@dataclass(frozen=True)
class WeeklyTrend:
    week_start: date
    hours_required: float
    hours_logged: float
    events_count: int
    attendance_percent: float


@dataclass(frozen=True)
class AttendanceInsights:
    counts: CheckInCounts
    total_expected: int
    attendance_rate: float
    event_count: int

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..attendance.model import CheckInCounts
from ..core.enums import ReportFrequency
from ..events.model import EventOccurrence


@dataclass(frozen=True)
class AthleteReportStats:
    total_events: int
    counts: CheckInCounts
    attendance_rate: float
    total_hours: float


@dataclass(frozen=True)
class AthleteReport:
    user_id: str
    stats: AthleteReportStats
    upcoming_events: tuple[EventOccurrence, ...] = ()


@dataclass(frozen=True)
class GuardianDigest:
    """Read-model cho báo cáo định kỳ gửi phụ huynh (chỉ dữ liệu, không định dạng)."""

    guardian_id: str
    organization_id: str
    frequency: ReportFrequency
    start: datetime
    end: datetime
    athletes: tuple[AthleteReport, ...]

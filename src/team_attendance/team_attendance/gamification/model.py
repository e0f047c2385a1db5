from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import RecognitionPeriod


@dataclass(frozen=True)
class Challenge:
    """Thực thể miền (domain): Thử thách chuyên cần của một đội."""

    challenge_id: str
    team_id: str
    organization_id: str
    title: str
    target_percent: float
    start: datetime
    end: datetime


@dataclass(frozen=True)
class ChallengeProgress:
    challenge: Challenge
    current_percent: float

    @property
    def completed(self) -> bool:
        return self.current_percent >= self.challenge.target_percent


@dataclass(frozen=True)
class Recognition:
    recognition_id: str
    user_id: str
    team_id: str
    organization_id: str
    nominated_by: str
    period: str
    period_type: RecognitionPeriod
    note: Optional[str] = None


@dataclass(frozen=True)
class BadgeDefinition:
    badge_id: str
    name: str
    description: str
    category: str
    threshold: float
    field: str


@dataclass(frozen=True)
class BadgeStats:
    hours_logged: float
    check_in_count: int
    attendance_percent: float
    best_streak: int


@dataclass(frozen=True)
class BadgeProgress:
    definition: BadgeDefinition
    progress: float
    earned: bool
    is_new: bool
    earned_at: Optional[datetime] = None

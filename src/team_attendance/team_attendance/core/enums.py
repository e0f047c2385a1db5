from __future__ import annotations

from enum import Enum


class CheckInStatus(str, Enum):
    """Status of one member's check-in for one event."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    ABSENT = "ABSENT"
    EXCUSED = "EXCUSED"

    @property
    def attended(self) -> bool:
        return self in (CheckInStatus.ON_TIME, CheckInStatus.LATE)


class RecurrenceFrequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"


class TeamRole(str, Enum):
    MEMBER = "MEMBER"
    CAPTAIN = "CAPTAIN"
    COACH = "COACH"
    ADMIN = "ADMIN"

    @property
    def is_athlete(self) -> bool:
        return self in (TeamRole.MEMBER, TeamRole.CAPTAIN)


class RateMode(str, Enum):
    """Which check-ins form the denominator of a count-mode rate."""

    CHALLENGE = "CHALLENGE"
    REPORT = "REPORT"


class ReportFrequency(str, Enum):
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    BIANNUALLY = "BIANNUALLY"


class RecognitionPeriod(str, Enum):
    WEEK = "WEEK"
    MONTH = "MONTH"


class DeductionType(str, Enum):
    FLAT = "FLAT"
    PERCENT = "PERCENT"

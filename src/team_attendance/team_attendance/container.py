from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import RateStrategyFactory
from .attendance.repository import CheckInRepository
from .attendance.service import AttendanceService
from .core.constants import (
    DEFAULT_LEADERBOARD_LIMIT,
    DEFAULT_UPCOMING_EVENT_DAYS,
    DEFAULT_UPCOMING_EVENT_LIMIT,
    MAX_OCCURRENCES,
)
from .events.repository import EventRepository, RecurringSeriesRepository
from .events.service import RecurringEventService
from .gamification.repository import BadgeRepository, ChallengeRepository, RecognitionRepository
from .gamification.service import GamificationService
from .membership.repository import MembershipHistoryRepository
from .membership.service import MembershipService
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollService
from .reports.repository import GuardianRepository
from .reports.service import GuardianReportService
from .rosters.repository import RosterOverrideRepository
from .rosters.service import RosterService
from .teams.repository import TeamRepository


@dataclass(frozen=True)
class Repositories:
    """Storage adapters supplied by the host application."""

    teams: TeamRepository
    events: EventRepository
    check_ins: CheckInRepository
    history: MembershipHistoryRepository
    series: Optional[RecurringSeriesRepository] = None
    overrides: Optional[RosterOverrideRepository] = None
    challenges: Optional[ChallengeRepository] = None
    badges: Optional[BadgeRepository] = None
    recognitions: Optional[RecognitionRepository] = None
    payroll: Optional[PayrollRepository] = None
    guardians: Optional[GuardianRepository] = None


@dataclass(frozen=True)
class Container:
    repos: Repositories

    attendance_service: AttendanceService
    membership_service: MembershipService
    recurring_event_service: Optional[RecurringEventService]
    roster_service: Optional[RosterService]
    gamification_service: Optional[GamificationService]
    payroll_service: Optional[PayrollService]
    guardian_report_service: Optional[GuardianReportService]


def build_container(
    repos: Repositories,
    *,
    max_occurrences: int = MAX_OCCURRENCES,
    leaderboard_limit: int = DEFAULT_LEADERBOARD_LIMIT,
    upcoming_event_days: int = DEFAULT_UPCOMING_EVENT_DAYS,
    upcoming_event_limit: int = DEFAULT_UPCOMING_EVENT_LIMIT,
) -> Container:
    attendance_service = AttendanceService(
        repos.check_ins,
        repos.events,
        repos.teams,
        repos.history,
        strategy_factory=RateStrategyFactory(),
        leaderboard_limit=leaderboard_limit,
    )
    membership_service = MembershipService(repos.history)

    recurring_event_service = None
    if repos.series is not None:
        recurring_event_service = RecurringEventService(repos.series, max_occurrences=max_occurrences)

    roster_service = None
    if repos.overrides is not None:
        roster_service = RosterService(repos.events, repos.teams, repos.overrides)

    gamification_service = None
    if repos.challenges is not None and repos.badges is not None and repos.recognitions is not None:
        gamification_service = GamificationService(
            repos.challenges, repos.badges, repos.recognitions, repos.events, repos.check_ins
        )

    payroll_service = None
    if repos.payroll is not None:
        payroll_service = PayrollService(repos.payroll, repos.check_ins)

    guardian_report_service = None
    if repos.guardians is not None:
        guardian_report_service = GuardianReportService(
            repos.guardians,
            repos.check_ins,
            repos.events,
            repos.teams,
            upcoming_days=upcoming_event_days,
            upcoming_limit=upcoming_event_limit,
        )

    return Container(
        repos=repos,
        attendance_service=attendance_service,
        membership_service=membership_service,
        recurring_event_service=recurring_event_service,
        roster_service=roster_service,
        gamification_service=gamification_service,
        payroll_service=payroll_service,
        guardian_report_service=guardian_report_service,
    )

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Union

from ..attendance.repository import CheckInRepository
from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_UPCOMING_EVENT_DAYS, DEFAULT_UPCOMING_EVENT_LIMIT
from ..core.enums import ReportFrequency
from ..events.model import EventOccurrence
from ..events.repository import EventRepository
from ..teams.repository import TeamRepository
from .guardian import athlete_report_stats, parse_report_frequency, report_window, upcoming_events
from .model import AthleteReport, GuardianDigest
from .repository import GuardianRepository

logger = logging.getLogger(__name__)


class GuardianReportService:
    def __init__(
        self,
        guardians: GuardianRepository,
        check_ins: CheckInRepository,
        events: EventRepository,
        teams: TeamRepository,
        *,
        upcoming_days: int = DEFAULT_UPCOMING_EVENT_DAYS,
        upcoming_limit: int = DEFAULT_UPCOMING_EVENT_LIMIT,
    ):
        self._guardians = guardians
        self._check_ins = check_ins
        self._events = events
        self._teams = teams
        self._upcoming_days = int(upcoming_days)
        self._upcoming_limit = int(upcoming_limit)

    def _upcoming_for(self, user_id: str, organization_id: str, now: datetime) -> list[EventOccurrence]:
        horizon = now + timedelta(days=self._upcoming_days)
        found: list[EventOccurrence] = []
        for m in self._teams.list_memberships_for_user(user_id, organization_id):
            found.extend(self._events.list_for_team(m.team_id, start=now, end=horizon))
        return upcoming_events(found, now=now, days=self._upcoming_days, limit=self._upcoming_limit)

    def build_digest(
        self,
        *,
        guardian_id: str,
        organization_id: str,
        frequency: Union[ReportFrequency, str],
        now: datetime | None = None,
    ) -> GuardianDigest:
        now = now or now_utc()
        frequency = parse_report_frequency(frequency)
        start, end = report_window(frequency, now)

        reports = []
        for user_id in self._guardians.list_linked_athletes(guardian_id=guardian_id, organization_id=organization_id):
            check_ins = self._check_ins.list_for_user(
                user_id=user_id,
                organization_id=organization_id,
                start=start,
                end=end,
            )
            reports.append(
                AthleteReport(
                    user_id=user_id,
                    stats=athlete_report_stats(check_ins),
                    upcoming_events=tuple(self._upcoming_for(user_id, organization_id, now)),
                )
            )

        logger.debug(
            "guardian digest %s (%s) %s..%s athletes=%d",
            guardian_id, frequency.value, start.date(), end.date(), len(reports),
        )
        return GuardianDigest(
            guardian_id=guardian_id,
            organization_id=organization_id,
            frequency=frequency,
            start=start,
            end=end,
            athletes=tuple(reports),
        )

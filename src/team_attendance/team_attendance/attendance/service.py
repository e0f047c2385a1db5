from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_LEADERBOARD_LIMIT
from ..core.enums import RateMode
from ..core.exceptions import ValidationError
from ..events.model import EventOccurrence
from ..events.repository import EventRepository
from ..membership.model import MembershipPeriod
from ..membership.periods import filter_by_membership, resolve_periods
from ..membership.repository import MembershipHistoryRepository
from ..seasons.model import SeasonRange
from ..seasons.resolver import fallback_range, is_team_in_current_season, team_season_range
from ..teams.model import Team, TeamMember
from ..teams.repository import TeamRepository
from .aggregator import (
    attendance_percent,
    attendance_rate,
    average_percent,
    events_in_window,
    logged_hours,
    member_hours,
    required_hours,
    team_hours,
    weekly_trends,
)
from .factory import RateStrategyFactory
from .filters import is_athlete_check_in, non_athlete_team_map
from .model import (
    AttendanceInsights,
    LeaderboardEntry,
    MemberHours,
    MemberStats,
    TeamHours,
    TeamRanking,
    WeeklyTrend,
)
from .repository import CheckInRepository
from .streaks import compute_streaks

logger = logging.getLogger(__name__)


class AttendanceService:
    """Reads rows through the repositories, then hands them to the aggregator.

    Every public method takes an explicit `now`; it defaults to the current
    UTC time only at this boundary.
    """

    def __init__(
        self,
        check_ins: CheckInRepository,
        events: EventRepository,
        teams: TeamRepository,
        history: MembershipHistoryRepository,
        *,
        strategy_factory: RateStrategyFactory | None = None,
        leaderboard_limit: int = DEFAULT_LEADERBOARD_LIMIT,
    ):
        self._check_ins = check_ins
        self._events = events
        self._teams = teams
        self._history = history
        self._factory = strategy_factory or RateStrategyFactory()
        self._leaderboard_limit = int(leaderboard_limit)

    def _get_team(self, team_id: str) -> Team:
        team = self._teams.get_by_id(team_id)
        if not team:
            raise ValidationError("Đội không tồn tại")
        return team

    def _team_events(self, team: Team, window: SeasonRange, now: datetime) -> list[EventOccurrence]:
        capped = window.capped(now)
        events = self._events.list_for_team(team.team_id, start=capped.start, end=capped.end)
        return events_in_window(events, window, now=now)

    def _periods(self, *, user_id: str, team_id: str, joined_at: Optional[datetime], window: SeasonRange) -> list[MembershipPeriod]:
        history = self._history.list_history(user_id=user_id, team_id=team_id)
        return resolve_periods(history, joined_at=joined_at, season_start=window.start)

    def _find_member(self, team_id: str, user_id: str) -> Optional[TeamMember]:
        for m in self._teams.list_members(team_id):
            if m.user_id == user_id:
                return m
        return None

    def _member_hours(
        self,
        *,
        user_id: str,
        team: Team,
        joined_at: Optional[datetime],
        window: SeasonRange,
        events: Sequence[EventOccurrence],
        now: datetime,
    ) -> MemberHours:
        periods = self._periods(user_id=user_id, team_id=team.team_id, joined_at=joined_at, window=window)
        check_ins = self._check_ins.list_for_user_events(
            user_id=user_id,
            event_ids=[e.event_id for e in events],
            approved_only=True,
        )
        return member_hours(events, check_ins, periods, window=window, now=now, user_id=user_id)

    def member_hours(self, *, user_id: str, team_id: str, now: datetime | None = None) -> MemberHours:
        now = now or now_utc()
        team = self._get_team(team_id)
        window = team_season_range(team, now=now)
        member = self._find_member(team_id, user_id)
        events = self._team_events(team, window, now)

        result = self._member_hours(
            user_id=user_id,
            team=team,
            joined_at=member.joined_at if member else None,
            window=window,
            events=events,
            now=now,
        )
        logger.debug(
            "member hours user=%s team=%s window=%s..%s events=%d logged=%.2f required=%.2f",
            user_id, team_id, window.start.date(), window.capped(now).end.date(),
            len(result.event_ids), result.hours_logged, result.hours_required,
        )
        return result

    def member_stats(self, *, user_id: str, team_id: str, now: datetime | None = None) -> MemberStats:
        now = now or now_utc()
        team = self._get_team(team_id)
        member = self._find_member(team_id, user_id)
        if not member:
            return MemberStats(user_id, 0.0, 0.0, 0.0, 0, 0)

        hours = self.member_hours(user_id=user_id, team_id=team_id, now=now)
        streaks = compute_streaks(
            self._check_ins.list_for_user(user_id=user_id, organization_id=team.organization_id, team_id=team_id)
        )
        athletes = self._teams.list_members(team_id, athletes_only=True)
        org_athletes = {m.user_id for m in self._teams.list_organization_memberships(team.organization_id) if m.is_athlete}
        return MemberStats(
            user_id=user_id,
            hours_logged=hours.hours_logged,
            hours_required=hours.hours_required,
            attendance_percent=hours.attendance_percent,
            current_streak=streaks.current,
            best_streak=streaks.best,
            team_size=len(athletes),
            org_size=len(org_athletes),
        )

    def organization_member_stats(self, *, user_id: str, organization_id: str, now: datetime | None = None) -> MemberStats:
        """Stats across every team of the user; shared events are charged once."""
        now = now or now_utc()
        memberships = self._teams.list_memberships_for_user(user_id, organization_id)
        if not memberships:
            return MemberStats(user_id, 0.0, 0.0, 0.0, 0, 0)

        charged: dict[str, EventOccurrence] = {}
        for m in memberships:
            team = self._get_team(m.team_id)
            window = team_season_range(team, now=now)
            periods = self._periods(user_id=user_id, team_id=team.team_id, joined_at=m.joined_at, window=window)
            for e in filter_by_membership(self._team_events(team, window, now), periods):
                charged.setdefault(e.event_id, e)

        check_ins = self._check_ins.list_for_user_events(user_id=user_id, event_ids=list(charged), approved_only=True)
        hours_logged = logged_hours(check_ins)
        hours_required = required_hours(charged.values())

        streaks = compute_streaks(self._check_ins.list_for_user(user_id=user_id, organization_id=organization_id))
        org_athletes = {m.user_id for m in self._teams.list_organization_memberships(organization_id) if m.is_athlete}
        return MemberStats(
            user_id=user_id,
            hours_logged=hours_logged,
            hours_required=hours_required,
            attendance_percent=attendance_percent(hours_logged, hours_required),
            current_streak=streaks.current,
            best_streak=streaks.best,
            org_size=len(org_athletes),
        )

    def team_attendance(self, *, team_id: str, now: datetime | None = None) -> TeamHours:
        now = now or now_utc()
        team = self._get_team(team_id)
        window = team_season_range(team, now=now)
        athletes = self._teams.list_members(team_id, athletes_only=True)
        capped = window.capped(now)
        events = self._events.list_for_team(team_id, start=capped.start, end=capped.end, include_ad_hoc=True)
        events = [e for e in events if e.team_id == team_id]
        check_ins = self._check_ins.list_for_events([e.event_id for e in events], approved_only=True)
        return team_hours(team_id, athletes, check_ins)

    def team_leaderboard(self, *, team_id: str, now: datetime | None = None, limit: int | None = None) -> list[LeaderboardEntry]:
        now = now or now_utc()
        team = self._get_team(team_id)
        window = team_season_range(team, now=now)
        events = self._team_events(team, window, now)

        scored: list[tuple[TeamMember, MemberHours]] = []
        for member in self._teams.list_members(team_id, athletes_only=True):
            hours = self._member_hours(
                user_id=member.user_id,
                team=team,
                joined_at=member.joined_at,
                window=window,
                events=events,
                now=now,
            )
            scored.append((member, hours))

        scored.sort(key=lambda item: item[1].attendance_percent, reverse=True)
        return [
            LeaderboardEntry(
                rank=i + 1,
                user_id=member.user_id,
                display_name=member.display_name,
                hours_logged=hours.hours_logged,
                hours_required=hours.hours_required,
                attendance_percent=hours.attendance_percent,
            )
            for i, (member, hours) in enumerate(scored[: limit or self._leaderboard_limit])
        ]

    def _current_teams(self, organization_id: str, now: datetime) -> list[Team]:
        teams = self._teams.list_for_organization(organization_id)
        return [t for t in teams if is_team_in_current_season(t, now=now)]

    def organization_leaderboard(
        self,
        *,
        organization_id: str,
        now: datetime | None = None,
        limit: int | None = None,
    ) -> list[LeaderboardEntry]:
        """Users ranked by the average of their per-team percents.

        Only current-season teams count, and teams where the user has no
        required hours yet are left out of the average.
        """
        now = now or now_utc()

        per_user: dict[str, dict] = {}
        for team in self._current_teams(organization_id, now):
            window = team_season_range(team, now=now)
            events = self._team_events(team, window, now)
            for member in self._teams.list_members(team.team_id, athletes_only=True):
                hours = self._member_hours(
                    user_id=member.user_id,
                    team=team,
                    joined_at=member.joined_at,
                    window=window,
                    events=events,
                    now=now,
                )
                row = per_user.setdefault(
                    member.user_id,
                    {"name": member.display_name, "logged": 0.0, "required": 0.0, "percents": []},
                )
                row["logged"] += hours.hours_logged
                row["required"] += hours.hours_required
                if hours.hours_required > 0:
                    row["percents"].append(hours.attendance_percent)

        ranked = sorted(per_user.items(), key=lambda kv: average_percent(kv[1]["percents"]), reverse=True)
        return [
            LeaderboardEntry(
                rank=i + 1,
                user_id=user_id,
                display_name=row["name"],
                hours_logged=row["logged"],
                hours_required=row["required"],
                attendance_percent=average_percent(row["percents"]),
            )
            for i, (user_id, row) in enumerate(ranked[: limit or self._leaderboard_limit])
        ]

    def team_rankings(self, *, organization_id: str, now: datetime | None = None) -> list[TeamRanking]:
        now = now or now_utc()
        scored = [
            (team, self.team_attendance(team_id=team.team_id, now=now))
            for team in self._current_teams(organization_id, now)
        ]
        scored.sort(key=lambda item: item[1].attendance_percent, reverse=True)
        return [
            TeamRanking(rank=i + 1, team_id=team.team_id, team_name=team.name, attendance_percent=hours.attendance_percent)
            for i, (team, hours) in enumerate(scored)
        ]

    def _reference_window(self, organization_id: str, team_id: Optional[str], now: datetime) -> Optional[SeasonRange]:
        if team_id:
            team = self._get_team(team_id)
            if team.org_season is not None and team.season_year:
                return team_season_range(team, now=now)
            return None
        for team in self._current_teams(organization_id, now):
            if team.org_season is not None and team.season_year:
                return team_season_range(team, now=now)
        return None

    def _window_events(self, organization_id: str, team_id: Optional[str], window: SeasonRange, now: datetime) -> list[EventOccurrence]:
        capped = window.capped(now)
        if team_id:
            rows = self._events.list_for_team(team_id, start=capped.start, end=capped.end)
        else:
            rows = self._events.list_for_organization(organization_id, start=capped.start, end=capped.end)
        return events_in_window(rows, window, now=now)

    def attendance_trends(
        self,
        *,
        organization_id: str,
        team_id: str | None = None,
        now: datetime | None = None,
    ) -> list[WeeklyTrend]:
        """Weekly required/logged hours for the reference season.

        Without any seasoned team the current calendar year is used.
        """
        now = now or now_utc()
        window = self._reference_window(organization_id, team_id, now)
        if window is None:
            window = SeasonRange(
                start=datetime(now.year, 1, 1, tzinfo=timezone.utc),
                end=datetime(now.year, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc),
            )
        events = self._window_events(organization_id, team_id, window, now)
        if not events:
            return []
        check_ins = self._check_ins.list_for_events([e.event_id for e in events], approved_only=True)
        return weekly_trends(events, check_ins)

    def attendance_insights(
        self,
        *,
        organization_id: str,
        team_id: str | None = None,
        now: datetime | None = None,
    ) -> AttendanceInsights:
        """Status breakdown of athlete check-ins over the reference season."""
        now = now or now_utc()
        window = self._reference_window(organization_id, team_id, now) or fallback_range(now)
        events = self._window_events(organization_id, team_id, window, now)
        check_ins = self._check_ins.list_for_events([e.event_id for e in events], approved_only=True)

        staff_map = non_athlete_team_map(self._teams.list_organization_memberships(organization_id))
        athlete_check_ins = [c for c in check_ins if is_athlete_check_in(c, staff_map)]
        result = attendance_rate(athlete_check_ins, RateMode.CHALLENGE, factory=self._factory)
        return AttendanceInsights(
            counts=result.counts,
            total_expected=result.total,
            attendance_rate=result.rate,
            event_count=len(events),
        )

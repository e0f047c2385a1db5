from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional

from ..attendance.aggregator import attendance_rate, logged_hours
from ..attendance.repository import CheckInRepository
from ..attendance.streaks import compute_streaks
from ..common.datetime_utils import now_utc
from ..core.enums import RateMode, RecognitionPeriod
from ..core.exceptions import ValidationError
from ..events.repository import EventRepository
from ..seasons.model import SeasonRange
from .badges import evaluate_badges
from .challenges import challenge_percent, parse_recognition_period, recognition_period_key
from .model import BadgeProgress, BadgeStats, ChallengeProgress, Recognition
from .repository import BadgeRepository, ChallengeRepository, RecognitionRepository

logger = logging.getLogger(__name__)


class GamificationService:
    def __init__(
        self,
        challenges: ChallengeRepository,
        badges: BadgeRepository,
        recognitions: RecognitionRepository,
        events: EventRepository,
        check_ins: CheckInRepository,
    ):
        self._challenges = challenges
        self._badges = badges
        self._recognitions = recognitions
        self._events = events
        self._check_ins = check_ins

    def challenge_progress(self, challenge_id: str) -> ChallengeProgress:
        challenge = self._challenges.get_by_id(challenge_id)
        if not challenge:
            raise ValidationError("Thử thách không tồn tại")

        window = SeasonRange(start=challenge.start, end=challenge.end)
        events = self._events.list_for_team(
            challenge.team_id, start=window.start, end=window.end, include_ad_hoc=True,
        )
        check_ins = self._check_ins.list_for_events([e.event_id for e in events], approved_only=False)
        percent = challenge_percent(events, check_ins, window)
        logger.debug("challenge %s: events=%d check_ins=%d percent=%.1f", challenge_id, len(events), len(check_ins), percent)
        return ChallengeProgress(challenge=challenge, current_percent=percent)

    def team_challenges(self, team_id: str) -> list[ChallengeProgress]:
        challenges = sorted(self._challenges.list_for_team(team_id), key=lambda c: c.start, reverse=True)
        return [self.challenge_progress(c.challenge_id) for c in challenges]

    def user_badges(self, *, user_id: str, organization_id: str, now: datetime | None = None) -> list[BadgeProgress]:
        now = now or now_utc()
        check_ins = self._check_ins.list_for_user(user_id=user_id, organization_id=organization_id, approved_only=True)
        rate = attendance_rate(check_ins, RateMode.CHALLENGE)
        stats = BadgeStats(
            hours_logged=logged_hours(check_ins),
            check_in_count=rate.attended,
            attendance_percent=rate.rate,
            best_streak=compute_streaks(check_ins).best,
        )

        badges = evaluate_badges(stats, self._badges.earned_badges(user_id=user_id, organization_id=organization_id), now=now)
        new_ids = [b.definition.badge_id for b in badges if b.is_new]
        if new_ids:
            self._badges.record_earned(user_id=user_id, organization_id=organization_id, badge_ids=new_ids, earned_at=now)
            logger.info("user %s earned badges %s", user_id, ", ".join(new_ids))
        return badges

    def recognize(
        self,
        *,
        user_id: str,
        team_id: str,
        organization_id: str,
        nominated_by: str,
        period_type: RecognitionPeriod | str,
        note: Optional[str] = None,
        now: datetime | None = None,
    ) -> Recognition:
        now = now or now_utc()
        period_type = parse_recognition_period(period_type)
        period = recognition_period_key(period_type, now)
        recognition = Recognition(
            recognition_id=uuid.uuid4().hex,
            user_id=user_id,
            team_id=team_id,
            organization_id=organization_id,
            nominated_by=nominated_by,
            period=period,
            period_type=period_type,
            note=note,
        )
        return self._recognitions.replace_for_period(recognition)

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import InstantLike, now_utc
from ..common.validators import require_non_empty
from ..core.constants import MAX_OCCURRENCES
from ..core.enums import RecurrenceFrequency
from ..core.exceptions import ValidationError
from .model import EventOccurrence, RecurringSeries
from .recurrence import build_rule, expand
from .repository import RecurringSeriesRepository
from .series import SeriesDeletionPlan, build_series_occurrences, plan_series_deletion

logger = logging.getLogger(__name__)


class RecurringEventService:
    def __init__(self, series: RecurringSeriesRepository, *, max_occurrences: int = MAX_OCCURRENCES):
        self._series = series
        self._max_occurrences = int(max_occurrences)

    def preview(
        self,
        *,
        start_date: InstantLike,
        end_date: InstantLike,
        frequency: str | RecurrenceFrequency,
        days_of_week: Optional[Iterable[int]] = None,
    ) -> list[date]:
        rule = build_rule(start_date=start_date, end_date=end_date, frequency=frequency, days_of_week=days_of_week)
        return expand(rule, max_occurrences=self._max_occurrences)

    def create_series(
        self,
        *,
        organization_id: str,
        title: str,
        start_time: str,
        end_time: str,
        start_date: InstantLike,
        end_date: InstantLike,
        frequency: str | RecurrenceFrequency,
        days_of_week: Optional[Iterable[int]] = None,
        team_id: Optional[str] = None,
        included_user_ids: Iterable[str] = (),
        excluded_user_ids: Iterable[str] = (),
    ) -> tuple[str, list[EventOccurrence]]:
        """Validate, expand and persist a series with all of its occurrences.

        Nothing is written when the rule is invalid, matches no dates, or is
        longer than the occurrence cap.
        """
        title = require_non_empty(title, "Tiêu đề")
        rule = build_rule(start_date=start_date, end_date=end_date, frequency=frequency, days_of_week=days_of_week)
        series = RecurringSeries(
            series_id=uuid.uuid4().hex,
            organization_id=organization_id,
            title=title,
            start_time=start_time,
            end_time=end_time,
            rule=rule,
            team_id=team_id,
            included_user_ids=frozenset(included_user_ids),
            excluded_user_ids=frozenset(excluded_user_ids),
        )
        occurrences = build_series_occurrences(series, max_occurrences=self._max_occurrences)
        series_id = self._series.create_with_occurrences(series, occurrences)
        logger.info(
            "created series %s (%s, %d occurrences %s..%s)",
            series_id, rule.frequency.value, len(occurrences), rule.start_date, rule.end_date,
        )
        return series_id, occurrences

    def delete_series(self, series_id: str, *, future_only: bool = False, now: datetime | None = None) -> SeriesDeletionPlan:
        now = now or now_utc()
        occurrences = self._series.list_occurrences(series_id)
        if not occurrences:
            raise ValidationError("Chuỗi sự kiện không tồn tại hoặc không còn buổi nào")

        plan = plan_series_deletion(occurrences, series_id, now=now, future_only=future_only)
        self._series.apply_deletion(series_id, detach_ids=plan.detach_ids, delete_ids=plan.delete_ids)
        logger.info(
            "deleted series %s: detached=%d deleted=%d", series_id, len(plan.detach_ids), len(plan.delete_ids)
        )
        return plan

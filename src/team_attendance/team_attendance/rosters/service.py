from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.exceptions import ValidationError
from ..events.repository import EventRepository
from ..teams.repository import TeamRepository
from .model import EMPTY_OVERRIDE, RosterOverride
from .overrides import effective_roster, listed_overrides
from .repository import RosterOverrideRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventRosterView:
    event_id: str
    roster: frozenset[str]
    included: list[str]
    excluded: list[str]


class RosterService:
    def __init__(self, events: EventRepository, teams: TeamRepository, overrides: RosterOverrideRepository):
        self._events = events
        self._teams = teams
        self._overrides = overrides

    def _event_override(self, event_id: str) -> RosterOverride:
        return self._overrides.get_for_event(event_id) or EMPTY_OVERRIDE

    def _series_override(self, series_id: str) -> RosterOverride:
        return self._overrides.get_for_series(series_id) or EMPTY_OVERRIDE

    def include_in_event(self, event_id: str, user_id: str) -> RosterOverride:
        updated = self._event_override(event_id).with_include(user_id)
        self._overrides.save_for_event(event_id, updated)
        return updated

    def remove_event_include(self, event_id: str, user_id: str) -> RosterOverride:
        updated = self._event_override(event_id).without_include(user_id)
        self._overrides.save_for_event(event_id, updated)
        return updated

    def exclude_from_event(self, event_id: str, user_id: str) -> RosterOverride:
        updated = self._event_override(event_id).with_exclude(user_id)
        self._overrides.save_for_event(event_id, updated)
        return updated

    def remove_event_exclude(self, event_id: str, user_id: str) -> RosterOverride:
        updated = self._event_override(event_id).without_exclude(user_id)
        self._overrides.save_for_event(event_id, updated)
        return updated

    def include_in_series(self, series_id: str, user_id: str) -> RosterOverride:
        updated = self._series_override(series_id).with_include(user_id)
        self._overrides.save_for_series(series_id, updated)
        return updated

    def remove_series_include(self, series_id: str, user_id: str) -> RosterOverride:
        updated = self._series_override(series_id).without_include(user_id)
        self._overrides.save_for_series(series_id, updated)
        return updated

    def exclude_from_series(self, series_id: str, user_id: str) -> RosterOverride:
        updated = self._series_override(series_id).with_exclude(user_id)
        self._overrides.save_for_series(series_id, updated)
        return updated

    def remove_series_exclude(self, series_id: str, user_id: str) -> RosterOverride:
        updated = self._series_override(series_id).without_exclude(user_id)
        self._overrides.save_for_series(series_id, updated)
        return updated

    def event_roster(self, event_id: str) -> EventRosterView:
        event = self._events.get_by_id(event_id)
        if not event:
            raise ValidationError("Sự kiện không tồn tại")

        base: list[str] = []
        if event.team_id:
            base = [m.user_id for m in self._teams.list_members(event.team_id, athletes_only=True)]

        event_override = self._event_override(event_id)
        series_override = EMPTY_OVERRIDE
        if event.recurring_series_id:
            series_override = self._series_override(event.recurring_series_id)

        roster = effective_roster(
            base,
            series_override=series_override,
            event_override=event_override,
            in_series=event.recurring_series_id is not None,
        )
        logger.debug("event %s roster: base=%d effective=%d", event_id, len(base), len(roster))
        return EventRosterView(
            event_id=event_id,
            roster=roster,
            included=listed_overrides(sorted(event_override.include), sorted(series_override.include)),
            excluded=listed_overrides(sorted(event_override.exclude), sorted(series_override.exclude)),
        )

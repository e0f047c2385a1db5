from __future__ import annotations

from typing import Optional, Protocol

from .model import RosterOverride


class RosterOverrideRepository(Protocol):
    def get_for_event(self, event_id: str) -> Optional[RosterOverride]:
        raise NotImplementedError

    def get_for_series(self, series_id: str) -> Optional[RosterOverride]:
        raise NotImplementedError

    def save_for_event(self, event_id: str, override: RosterOverride) -> None:
        raise NotImplementedError

    def save_for_series(self, series_id: str, override: RosterOverride) -> None:
        raise NotImplementedError

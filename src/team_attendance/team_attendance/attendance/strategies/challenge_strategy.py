from __future__ import annotations

from ...core.enums import RateMode
from ..model import CheckInCounts
from .base import RateStrategy


class ChallengeRateStrategy(RateStrategy):
    """Team challenges: every check-in in the window counts, EXCUSED included."""

    mode = RateMode.CHALLENGE

    def denominator(self, counts: CheckInCounts) -> int:
        return counts.total

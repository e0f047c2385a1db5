from __future__ import annotations

from ...core.enums import RateMode
from ..model import CheckInCounts
from .base import RateStrategy


class ReportRateStrategy(RateStrategy):
    """Guardian reports: an excused absence counts neither for nor against."""

    mode = RateMode.REPORT

    def denominator(self, counts: CheckInCounts) -> int:
        return counts.total - counts.excused

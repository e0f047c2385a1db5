from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import RateMode
from ..model import CheckInCounts


class RateStrategy(ABC):
    """Strategy Pattern: decide which check-ins count toward a rate's total."""

    mode: RateMode

    @abstractmethod
    def denominator(self, counts: CheckInCounts) -> int:
        raise NotImplementedError

    def rate(self, counts: CheckInCounts) -> float:
        total = self.denominator(counts)
        if total <= 0:
            return 0.0
        return 100 * counts.attended / total

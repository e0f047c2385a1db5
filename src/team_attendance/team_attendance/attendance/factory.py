from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import RateMode
from ..core.exceptions import ValidationError
from .strategies.base import RateStrategy
from .strategies.challenge_strategy import ChallengeRateStrategy
from .strategies.report_strategy import ReportRateStrategy


@dataclass
class RateStrategyFactory:
    """Factory Pattern: choose the rate strategy for a count-mode consumer."""

    def for_mode(self, mode: Union[RateMode, str]) -> RateStrategy:
        try:
            mode = RateMode(mode)
        except ValueError:
            raise ValidationError(f"Chế độ tính tỷ lệ không hợp lệ: {mode!r}") from None

        if mode == RateMode.REPORT:
            return ReportRateStrategy()
        return ChallengeRateStrategy()

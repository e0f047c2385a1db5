from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..model import AppliedDeduction, Deduction, StaffPayProfile


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def gross_pay(self, profile: StaffPayProfile, total_hours: float) -> Optional[float]:
        raise NotImplementedError

    @abstractmethod
    def apply_deductions(
        self,
        gross_pay: Optional[float],
        deductions: Sequence[Deduction],
    ) -> tuple[Optional[float], list[AppliedDeduction]]:
        """Return (net_pay, applied deductions) for a gross amount."""

        raise NotImplementedError

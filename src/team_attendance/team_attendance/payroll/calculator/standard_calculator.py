from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from .base import PayrollCalculator
from ...core.enums import DeductionType
from ..model import AppliedDeduction, Deduction, StaffPayProfile


def round_cents(amount: float) -> float:
    return float(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary if set, else hourly rate * hours; no rate, no pay."""

    def gross_pay(self, profile: StaffPayProfile, total_hours: float) -> Optional[float]:
        if profile.salary_amount is not None:
            return round_cents(profile.salary_amount)
        if profile.hourly_rate is not None:
            return round_cents(total_hours * profile.hourly_rate)
        return None

    def apply_deductions(
        self,
        gross_pay: Optional[float],
        deductions: Sequence[Deduction],
    ) -> tuple[Optional[float], list[AppliedDeduction]]:
        if gross_pay is None:
            return None, []

        net = gross_pay
        applied: list[AppliedDeduction] = []
        for d in deductions:
            if d.type == DeductionType.PERCENT:
                amount = round_cents(gross_pay * d.value / 100)
            else:
                amount = round_cents(d.value)
            net = round_cents(net - amount)
            applied.append(AppliedDeduction(name=d.name, type=d.type, value=d.value, amount=amount))
        return net, applied

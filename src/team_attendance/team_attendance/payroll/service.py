from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from ..attendance.model import CheckInRecord
from ..attendance.repository import CheckInRepository
from ..common.datetime_utils import first_instant_of
from ..common.validators import require_month
from ..core.exceptions import ValidationError
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, round_cents
from .model import CoachPay, Deduction, StaffPayProfile
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


def month_window(year: int, month: int) -> tuple[datetime, datetime]:
    """[first instant of the month, first instant of the next month)."""
    month = require_month(month, "Tháng")
    start = first_instant_of(int(year), month)
    return start, start + relativedelta(months=1)


def worked_check_ins(check_ins: Iterable[CheckInRecord], start: datetime, end: datetime) -> list[CheckInRecord]:
    """Attended check-ins whose event falls in [start, end)."""
    return [
        c for c in check_ins
        if c.attended and c.event_date is not None and start <= c.event_date < end
    ]


class PayrollService:
    def __init__(
        self,
        payroll: PayrollRepository,
        check_ins: CheckInRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payroll = payroll
        self._check_ins = check_ins
        self._calculator = calculator or StandardPayrollCalculator()

    def _coach_pay(
        self,
        profile: StaffPayProfile,
        deductions: Sequence[Deduction],
        *,
        start: datetime,
        end: datetime,
    ) -> CoachPay:
        rows = self._check_ins.list_for_user(
            user_id=profile.user_id,
            organization_id=profile.organization_id,
            start=start,
            end=end - timedelta(microseconds=1),
        )
        worked = worked_check_ins(rows, start, end)
        total_hours = round_cents(sum(c.hours_logged or 0.0 for c in worked))

        gross = self._calculator.gross_pay(profile, total_hours)
        net, applied = self._calculator.apply_deductions(gross, deductions)
        return CoachPay(
            user_id=profile.user_id,
            total_hours=total_hours,
            gross_pay=gross,
            net_pay=net,
            hourly_rate=profile.hourly_rate,
            salary_amount=profile.salary_amount,
            applied_deductions=tuple(applied),
            check_in_ids=tuple(c.check_in_id for c in worked),
        )

    def coach_hours(self, *, user_id: str, organization_id: str, month: int, year: int) -> CoachPay:
        profile = self._payroll.get_profile(user_id=user_id, organization_id=organization_id)
        if not profile:
            raise ValidationError("Không tìm thấy hồ sơ lương của huấn luyện viên")
        start, end = month_window(year, month)
        return self._coach_pay(profile, self._payroll.list_deductions(organization_id), start=start, end=end)

    def organization_coach_hours(self, *, organization_id: str, month: int, year: int) -> list[CoachPay]:
        start, end = month_window(year, month)
        deductions = self._payroll.list_deductions(organization_id)
        staff = [p for p in self._payroll.list_staff(organization_id) if not p.role.is_athlete]
        out = [self._coach_pay(p, deductions, start=start, end=end) for p in staff]
        logger.debug("payroll %s %04d-%02d: staff=%d", organization_id, int(year), int(month), len(out))
        return out

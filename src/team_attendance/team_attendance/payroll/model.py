from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import DeductionType, TeamRole


@dataclass(frozen=True)
class StaffPayProfile:
    """Thực thể miền (domain): Hồ sơ lương của huấn luyện viên/nhân sự trong tổ chức."""

    user_id: str
    organization_id: str
    role: TeamRole = TeamRole.COACH
    hourly_rate: Optional[float] = None
    salary_amount: Optional[float] = None
    display_name: Optional[str] = None


@dataclass(frozen=True)
class Deduction:
    name: str
    type: DeductionType
    value: float


@dataclass(frozen=True)
class AppliedDeduction:
    name: str
    type: DeductionType
    value: float
    amount: float


@dataclass(frozen=True)
class CoachPay:
    user_id: str
    total_hours: float
    gross_pay: Optional[float]
    net_pay: Optional[float]
    hourly_rate: Optional[float] = None
    salary_amount: Optional[float] = None
    applied_deductions: tuple[AppliedDeduction, ...] = ()
    check_in_ids: tuple[str, ...] = ()

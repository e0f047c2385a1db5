from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Deduction, StaffPayProfile


class PayrollRepository(Protocol):
    def list_staff(self, organization_id: str) -> Sequence[StaffPayProfile]:
        raise NotImplementedError

    def get_profile(self, *, user_id: str, organization_id: str) -> Optional[StaffPayProfile]:
        raise NotImplementedError

    def list_deductions(self, organization_id: str) -> Sequence[Deduction]:
        """Organization payroll deductions, in the order they are applied."""

        raise NotImplementedError

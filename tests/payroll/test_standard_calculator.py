from src.team_attendance.team_attendance.core.enums import DeductionType
from src.team_attendance.team_attendance.payroll.calculator.standard_calculator import StandardPayrollCalculator
from src.team_attendance.team_attendance.payroll.model import Deduction, StaffPayProfile


def test_salary_takes_priority_over_hourly():
    profile = StaffPayProfile("c1", "o1", hourly_rate=50, salary_amount=1000)
    assert StandardPayrollCalculator().gross_pay(profile, 10) == 1000


def test_hourly_pay_is_rounded_to_cents():
    profile = StaffPayProfile("c1", "o1", hourly_rate=12.345)
    assert StandardPayrollCalculator().gross_pay(profile, 1) == 12.35


def test_no_rate_means_no_pay():
    calc = StandardPayrollCalculator()
    gross = calc.gross_pay(StaffPayProfile("c1", "o1"), 10)
    assert gross is None
    assert calc.apply_deductions(gross, [Deduction("Fee", DeductionType.FLAT, 5)]) == (None, [])


def test_deductions_apply_in_order():
    calc = StandardPayrollCalculator()
    net, applied = calc.apply_deductions(
        40.0,
        [Deduction("Tax", DeductionType.PERCENT, 10), Deduction("Fee", DeductionType.FLAT, 10)],
    )
    assert [d.amount for d in applied] == [4.0, 10.0]
    assert net == 26.0

from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_month(value: int, field_name: str) -> int:
    try:
        month = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} không hợp lệ") from None
    if not 1 <= month <= 12:
        raise ValidationError(f"{field_name} phải trong khoảng 1-12")
    return month


def require_weekdays(values: Iterable[int], field_name: str) -> frozenset[int]:
    try:
        days = frozenset(int(v) for v in values)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} không hợp lệ") from None
    if any(d < 0 or d > 6 for d in days):
        raise ValidationError(f"{field_name} phải trong khoảng 0 (Chủ nhật) - 6 (Thứ bảy)")
    return days


def require_positive_int(value, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} không hợp lệ") from None
    if number <= 0:
        raise ValidationError(f"{field_name} phải lớn hơn 0")
    return number

from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_day_count(value: Optional[str], field_name: str, *, default: int, max_days: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        days = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a whole number")
    if days < 1 or days > max_days:
        raise ValidationError(f"{field_name} must be between 1 and {max_days}")
    return days

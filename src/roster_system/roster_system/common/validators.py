from __future__ import annotations

from typing import Optional

from ..core.enums import ErrorCode
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", {field_name: ErrorCode.MISSING_REQUIRED_FIELD})
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    """Blank strings are stored as NULL."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def optional_int(value: object) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)


def blank_to_none(value: Optional[str]) -> Optional[str]:
    """Whitespace-only text becomes None; anything else is kept as entered."""
    if value is None or not str(value).strip():
        return None
    return str(value)

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional

from ..core.enums import ErrorCode
from ..core.exceptions import ValidationError
from .datetime_utils import parse_optional_date
from .validators import optional_int


def arg_int(args: Mapping[str, Any], name: str, *, required: bool = False) -> Optional[int]:
    try:
        value = optional_int(args.get(name))
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be an integer", {name: ErrorCode.INVALID_VALUE}) from None
    if required and value is None:
        raise ValidationError(f"{name} is required", {name: ErrorCode.MISSING_REQUIRED_FIELD})
    return value


def arg_date(args: Mapping[str, Any], name: str, *, required: bool = False) -> Optional[date]:
    try:
        value = parse_optional_date(args.get(name))
    except ValueError:
        raise ValidationError(f"{name} must be a YYYY-MM-DD date", {name: ErrorCode.INVALID_VALUE}) from None
    if required and value is None:
        raise ValidationError(f"{name} is required", {name: ErrorCode.MISSING_REQUIRED_FIELD})
    return value


def json_object(raw: object, name: str = "body") -> Mapping[str, Any]:
    """A JSON body or nested value that must be an object; missing means empty."""

    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ValidationError(f"{name} must be a JSON object", {name: ErrorCode.INVALID_VALUE})
    return raw

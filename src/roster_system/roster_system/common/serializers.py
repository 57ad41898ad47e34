from __future__ import annotations

import dataclasses
from datetime import date
from enum import Enum


def to_jsonable(value: object) -> object:
    """Dataclasses/enums/dates -> plain JSON types (dates as YYYY-MM-DD)."""

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value

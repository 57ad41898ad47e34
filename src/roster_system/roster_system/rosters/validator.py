"""Roster invariants.

Pure checks run before any roster write: required fields, one open entry per
player per team, and unique jersey numbers among the team's active entries.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence, TypeVar

from ..common.datetime_utils import today_local
from ..core.enums import ErrorCode
from .model import RosterCandidate, RosterEntry, ValidationResult

_INVALID = object()

P = TypeVar("P")


def parse_jersey_number(value: object) -> object:
    """Return an int, None for "no number", or ``_INVALID``."""

    if value is None:
        return None
    if isinstance(value, bool):
        return _INVALID
    if isinstance(value, int):
        return value if value >= 0 else _INVALID
    if isinstance(value, float):
        return int(value) if value.is_integer() and value >= 0 else _INVALID
    text = str(value).strip()
    if not text:
        return None
    if not text.isdecimal():
        return _INVALID
    return int(text)


def validate_roster_entry(
    candidate: RosterCandidate,
    existing_active_entries: Iterable[RosterEntry],
    *,
    as_of: Optional[date] = None,
) -> ValidationResult:
    as_of = as_of or today_local()
    others = [
        e
        for e in existing_active_entries
        if e.is_active(as_of) and e.entry_id != candidate.entry_id
    ]
    errors: dict[str, ErrorCode] = {}

    if candidate.start_date is None:
        errors["start_date"] = ErrorCode.MISSING_REQUIRED_FIELD

    if candidate.is_new:
        if candidate.player_id is None:
            errors["player_id"] = ErrorCode.MISSING_REQUIRED_FIELD
        elif any(e.player_id == candidate.player_id for e in others):
            errors["player_id"] = ErrorCode.PLAYER_ALREADY_ROSTERED

    jersey = parse_jersey_number(candidate.jersey_number)
    if jersey is _INVALID:
        errors["jersey_number"] = ErrorCode.INVALID_JERSEY_NUMBER
        jersey = None
    elif jersey is not None and any(e.jersey_number == jersey for e in others):
        errors["jersey_number"] = ErrorCode.DUPLICATE_JERSEY_NUMBER

    return ValidationResult(errors=errors, jersey_number=jersey)


def assignable_players(all_players: Sequence[P], active_entries: Iterable[RosterEntry]) -> list[P]:
    """Organization players not already on the active roster, order kept."""

    rostered = {e.player_id for e in active_entries}
    return [p for p in all_players if p.player_id not in rostered]

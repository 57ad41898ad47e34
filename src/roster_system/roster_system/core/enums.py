from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"
    EXCUSED = "Excused"


class ErrorCode(str, Enum):
    """Validation codes surfaced per field or per player."""

    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    PLAYER_ALREADY_ROSTERED = "PlayerAlreadyRostered"
    INVALID_JERSEY_NUMBER = "InvalidJerseyNumber"
    DUPLICATE_JERSEY_NUMBER = "DuplicateJerseyNumber"
    MISSING_STATUS = "MissingStatus"
    INVALID_STATUS = "InvalidStatus"
    ENTRY_ALREADY_ENDED = "EntryAlreadyEnded"
    INVALID_VALUE = "InvalidValue"


class SortField(str, Enum):
    EVENT_DATE = "event_date"
    PLAYER_NAME = "player_name"
    STATUS = "status"
    TEAM_NAME = "team_name"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

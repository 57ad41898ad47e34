from __future__ import annotations

from typing import Mapping, Optional

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for business rule violations."""


class NotFoundError(DomainError):
    """Raised when a team, player or roster entry does not exist."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a field name (or a player id) to the violated rule so every
    problem can be shown at once.
    """

    def __init__(self, message: str, errors: Optional[Mapping[object, ErrorCode]] = None):
        super().__init__(message)
        self.message = message
        self.errors = dict(errors or {})

    def as_dict(self) -> dict[str, str]:
        return {str(k): v.value for k, v in self.errors.items()}


class ReconciliationAbort(ValidationError):
    """Raised when roster players lack an attendance status at save time.

    Nothing has been written when this is raised.
    """


class UpstreamWriteFailure(DomainError):
    """A create/update was rejected by the store.

    ``key`` identifies the failed write (player id for attendance, entry id for
    roster entries) so the caller can retry just that one.
    """

    def __init__(self, message: str, *, key: object = None):
        super().__init__(message)
        self.key = key

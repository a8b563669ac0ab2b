"""Validation failures raised by the date math layer."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    MISSING_FIELDS = "missing_fields"
    MALFORMED_DATE = "malformed_date"
    ORDERING_VIOLATION = "ordering_violation"


class MarriedMoreError(ValueError):
    """Base class for rejected submissions.

    ``message_key`` names the i18n string shown to the user; ``code`` is the
    machine-checkable reason.
    """

    code: ErrorCode

    def __init__(self, message_key: str, detail: str = "") -> None:
        super().__init__(detail or message_key)
        self.message_key = message_key
        self.detail = detail


class MissingFieldsError(MarriedMoreError):
    """Raised when a required input is empty."""

    code = ErrorCode.MISSING_FIELDS


class MalformedDateError(MarriedMoreError):
    """Raised when an input does not parse into a real calendar date/time."""

    code = ErrorCode.MALFORMED_DATE


class OrderingViolationError(MarriedMoreError):
    """Raised when the wedding is not strictly after a birth."""

    code = ErrorCode.ORDERING_VIOLATION

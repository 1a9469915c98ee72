"""
Error kinds raised while creating a trip.

Business-rule failures raise ``TripError`` tagged with a ``TripErrorCode`` so
callers can tell causes apart without matching on message text. Structural
validation failures are reported by FastAPI before the handler runs and are
tagged ``VALIDATION_FAILED`` by the exception handler in ``app.main``.
"""

import enum


class TripErrorCode(str, enum.Enum):
    VALIDATION_FAILED = "validation_failed"
    INVALID_START_DATE = "invalid_start_date"
    INVALID_END_DATE = "invalid_end_date"


class TripError(Exception):
    """Trip creation rejected by a business rule."""

    def __init__(self, code: TripErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class InvalidStartDate(TripError):
    def __init__(self, message: str = "Invalid Trip starts date."):
        super().__init__(TripErrorCode.INVALID_START_DATE, message)


class InvalidEndDate(TripError):
    def __init__(self, message: str = "Invalid Trip ends date."):
        super().__init__(TripErrorCode.INVALID_END_DATE, message)

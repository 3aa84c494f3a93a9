# bocyields/normalizers/errors.py
from enum import Enum


class DateErrorKind(str, Enum):
    """Why a raw date string could not be normalized."""
    MALFORMED_INPUT = "malformed_input"        # no separator, mixed separators, not 3 parts
    NON_NUMERIC_FIELD = "non_numeric_field"
    NEGATIVE_FIELD = "negative_field"
    INCOMPLETE_DATE = "incomplete_date"        # year, month or day unresolved
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"


class DateFormatError(ValueError):
    """Raised when a raw date string cannot be turned into YYYY-MM-DD."""

    def __init__(self, kind: DateErrorKind, value: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.value = value
        self.message = message

    def to_dict(self):
        return {"error": self.kind.value, "message": self.message, "input": self.value}

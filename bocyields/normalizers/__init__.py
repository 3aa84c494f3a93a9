from .dates import normalize_date, get_default_normalizer, resolve_day_month, separators_in, SEPARATORS
from .errors import DateErrorKind, DateFormatError
from .base import DateNormalizer

__all__ = [
    "normalize_date",
    "get_default_normalizer",
    "resolve_day_month",
    "separators_in",
    "SEPARATORS",
    "DateErrorKind",
    "DateFormatError",
    "DateNormalizer",
]

# bocyields/normalizers/dates.py
"""
Normalize loosely written dates to the YYYY-MM-DD keys used by the Valet API.

Accepted inputs use one separator (-, \\ or /) between three numeric fields.
The year is the 4-character field, wherever it sits. Day and month are told
apart by magnitude (only a day can exceed 12) and, when both are <= 12, by
where the year was written:

    year first   2000-05-24  -> month, day
    year last    10-07-1990  -> larger value is the day
    year middle  05-1990-07  -> rejected, no convention to fall back on
"""
import logging
import re
from typing import List, Optional, Tuple

from .base import DateNormalizer
from .errors import DateErrorKind, DateFormatError

log = logging.getLogger(__name__)

# Checked in this order; the first one present is used to split
SEPARATORS = ("-", "\\", "/")

_INT_RE = re.compile(r"[+-]?[0-9]+")

# A hyphen opening a field ("10/-1/1990") is a sign, not a separator
_SIGN_RE = re.compile(r"(?:^|(?<=[/\\\s]))-(?=[0-9])")


def _fail(kind: DateErrorKind, raw: str, message: str) -> DateFormatError:
    log.debug("date rejected (%s): %r", kind.value, raw)
    return DateFormatError(kind, raw, message)


def separators_in(date: str) -> List[str]:
    """Separators found in `date`, in detection order."""
    present = [s for s in SEPARATORS if s in date]
    if "-" in present and len(present) > 1 and "-" not in _SIGN_RE.sub("", date):
        # every hyphen is a sign on a / or \ separated field
        present.remove("-")
    return present


def detect_separator(date: str) -> Optional[str]:
    """Return the separator used in `date`, or None if there is none."""
    present = separators_in(date)
    return present[0] if present else None


def split_parts(raw: str) -> List[str]:
    """Trim, pick the separator and split into exactly three trimmed parts."""
    date = raw.strip()
    present = separators_in(date)
    if not present:
        raise _fail(DateErrorKind.MALFORMED_INPUT, raw, f"no date separator in: {raw!r}")
    sep = present[0]

    if len(present) > 1:
        raise _fail(
            DateErrorKind.MALFORMED_INPUT, raw,
            f"mixed separators {''.join(present)!r} in: {raw!r}",
        )

    parts = [p.strip() for p in date.split(sep)]
    if len(parts) != 3:
        raise _fail(
            DateErrorKind.MALFORMED_INPUT, raw,
            f"invalid number of parts in date: {len(parts)}",
        )
    return parts


def parse_fields(raw: str, parts: List[str]) -> List[int]:
    digits = []
    for p in parts:
        if not _INT_RE.fullmatch(p):
            raise _fail(DateErrorKind.NON_NUMERIC_FIELD, raw, f"part should be digit: {p!r}")
        nb = int(p)
        if nb < 0:
            raise _fail(DateErrorKind.NEGATIVE_FIELD, raw, f"part cannot be negative: {p}")
        digits.append(nb)
    return digits


def find_year(parts: List[str], digits: List[int]) -> Tuple[int, Optional[int], List[int]]:
    """
    Return (year, year_index, remaining) where `remaining` are the two
    non-year values in their original order.
    Year is 0 and year_index None when no part is exactly 4 characters long.
    """
    for i, p in enumerate(parts):
        if len(p) == 4:
            return digits[i], i, digits[:i] + digits[i + 1:]
    return 0, None, digits[:2]


def resolve_day_month(year_index: Optional[int], d0: int, d1: int) -> Tuple[int, int]:
    """
    Decide which of the two non-year values is the day. Returns (day, month);
    (0, 0) means the combination is not resolvable.
    """
    # Only a day can be larger than 12
    if d0 > 12:
        return d0, d1
    if d1 > 12:
        return d1, d0

    # Both <= 12: the year position picks the convention
    if year_index == 0:
        return d1, d0
    if year_index == 2:
        if d0 > d1:
            return d0, d1
        return d1, d0

    # Year in the middle (or missing): left unresolved on purpose
    return 0, 0


def normalize_date(raw: str) -> str:
    """
    Normalize a raw date string to YYYY-MM-DD.

    Raises DateFormatError whose `kind` tells the caller why, e.g.

        >>> normalize_date("1990/20/12")
        '1990-12-20'
        >>> normalize_date("10-07-1990")
        '1990-07-10'
    """
    parts = split_parts(raw)
    digits = parse_fields(raw, parts)
    year, year_index, (d0, d1) = find_year(parts, digits)
    day, month = resolve_day_month(year_index, d0, d1)

    if year == 0 or month == 0 or day == 0:
        raise _fail(DateErrorKind.INCOMPLETE_DATE, raw, f"invalid format: {raw!r}")
    if month > 12:
        raise _fail(DateErrorKind.INVALID_MONTH, raw, f"invalid month: {month}")
    if day > 31:
        raise _fail(DateErrorKind.INVALID_DAY, raw, f"invalid day: {day}")

    return f"{year:04d}-{month:02d}-{day:02d}"


def get_default_normalizer() -> DateNormalizer:
    """Factory used by the repository when no normalizer is injected."""
    return normalize_date

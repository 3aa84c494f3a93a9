# bocyields/normalizers/base.py
from typing import Protocol

class DateNormalizer(Protocol):
    def __call__(self, raw: str) -> str:
        """Return the canonical YYYY-MM-DD form of `raw` or raise DateFormatError."""
        ...

import logging
from typing import Dict, List

import requests

from bocyields.fetcher import fetch_data
from bocyields.models import BOCData, GroupDetail, Observation, SeriesDetail, Terms
from bocyields.normalizers import DateNormalizer, get_default_normalizer

log = logging.getLogger(__name__)


class RecordNotFound(LookupError):
    """No observation is published for this (canonical) date."""

    def __init__(self, date: str):
        super().__init__(f"no data for this date: {date}")
        self.date = date


class DataMismatch(Exception):
    """Two data sets disagree; raised by has_same_data."""


class ObservationRepository:
    """
    Read-only view over one fetched BOCData payload.
    The date index is built once here and never mutated afterwards,
    so concurrent readers need no locking.
    """

    def __init__(self, data: BOCData, normalizer: DateNormalizer | None = None):
        self._data = data
        self._normalize = normalizer or get_default_normalizer()
        # Later rows win if the API ever repeats a date
        self._by_date: Dict[str, Observation] = {obs.d: obs for obs in data.observations}
        log.info("indexed %d observations (%d dates)", len(data.observations), len(self._by_date))

    @classmethod
    def from_remote(cls, url: str | None = None, session: requests.Session | None = None,
                    normalizer: DateNormalizer | None = None) -> "ObservationRepository":
        """One blocking fetch, then build the index."""
        return cls(fetch_data(url, session=session), normalizer=normalizer)

    def __len__(self) -> int:
        return len(self._by_date)

    def __contains__(self, date: str) -> bool:
        return date in self._by_date

    def get_observation_for_date(self, date: str) -> Observation:
        """
        Normalize `date` (any accepted convention) and return its observation.
        Raises DateFormatError for unreadable dates, RecordNotFound otherwise.
        """
        key = self._normalize(date)
        obs = self._by_date.get(key)
        if obs is None:
            log.debug("no observation for %s (input %r)", key, date)
            raise RecordNotFound(key)
        return obs

    def dates(self) -> List[str]:
        """Canonical dates held, oldest first."""
        return sorted(self._by_date)

    def observations(self) -> List[Observation]:
        return [self._by_date[d] for d in self.dates()]

    def group_detail(self) -> GroupDetail:
        return self._data.group_detail

    def terms(self) -> Terms:
        return self._data.terms

    def series_detail(self) -> SeriesDetail:
        return self._data.series_detail


# -------------------------------------------------------------------
# Comparing two downloads (e.g. the full group vs. a date-bounded one)
# -------------------------------------------------------------------
def is_same_observation(full: Observation, other: Observation) -> None:
    """
    Every non-empty value in `other` must equal the one in `full`.
    Empty values in `other` are ignored (series not published in that extract).
    """
    full_vals = full.series_values()
    for name, v in other.series_values().items():
        if v != "" and v != full_vals[name]:
            raise DataMismatch(f"vals are not the same for {name}, all: {full_vals[name]} vs {v}")


def has_same_data(full: ObservationRepository, other: ObservationRepository) -> None:
    """Raise DataMismatch unless `other` holds the same dates and agrees with `full`."""
    if len(full) != len(other):
        raise DataMismatch(f"data doesn't have the same count: {len(full)} vs {len(other)}")

    for obs_full in full.observations():
        if obs_full.d not in other:
            raise DataMismatch(f"date missing from compared data: {obs_full.d}")
        obs = other.get_observation_for_date(obs_full.d)
        try:
            is_same_observation(obs_full, obs)
        except DataMismatch as e:
            raise DataMismatch(f"data not the same for date: {obs_full.d}\n {obs_full}\n vs\n {obs}\n, error: {e}") from e

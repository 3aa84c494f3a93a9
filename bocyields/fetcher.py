import logging
import requests
from pydantic import ValidationError

from bocyields.models import BOCData
from bocyields.settings import BOC_DATA_URL, BOC_FETCH_TIMEOUT

log = logging.getLogger(__name__)


class FetchError(RuntimeError):
    """The Valet API could not be reached or returned something unusable."""


def fetch_data(url: str | None = None, session: requests.Session | None = None,
               timeout: float = BOC_FETCH_TIMEOUT) -> BOCData:
    """
    GET the observation group once and decode it into BOCData.
    No retry: any transport error, non-200 answer or bad payload raises FetchError.
    """
    if session is None:
        with requests.Session() as own:
            return fetch_data(url, session=own, timeout=timeout)

    url = url or BOC_DATA_URL
    log.info("fetching bond yields from %s", url)

    try:
        r = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        log.error("bond yield fetch failed: %s", e)
        raise FetchError(f"error fetching data: {e}") from e

    if r.status_code != 200:
        log.error("bond yield fetch returned HTTP %s", r.status_code)
        raise FetchError(f"invalid response code: {r.status_code}\n\nResp data: {r.text}")

    try:
        data = BOCData.model_validate(r.json())
    except (ValueError, ValidationError) as e:
        # r.json() raises a ValueError subclass on bad JSON
        log.exception("bond yield payload could not be decoded")
        raise FetchError("failed to parse json data") from e

    log.info("fetched %d observations", len(data.observations))
    return data

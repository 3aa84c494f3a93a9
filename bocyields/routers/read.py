from typing import Any, Dict, List
from fastapi import APIRouter, Depends, HTTPException, Query

from bocyields.deps import get_repository
from bocyields.models import Observation
from bocyields.normalizers import DateFormatError, normalize_date
from bocyields.repositories import ObservationRepository, RecordNotFound

router = APIRouter(prefix="", tags=["read"])

# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------
def _obs_to_dict(obs: Observation) -> Dict[str, Any]:
    """Observation as the Valet API spells it (series keys, {"v": ...})."""
    return obs.model_dump(by_alias=True)

def _lookup(repo: ObservationRepository, date: str) -> Dict[str, Any]:
    """Map normalizer/lookup failures onto 400/404."""
    try:
        obs = repo.get_observation_for_date(date)
    except DateFormatError as e:
        raise HTTPException(400, e.to_dict())
    except RecordNotFound as e:
        raise HTTPException(404, {"error": "record_not_found", "message": str(e), "date": e.date})
    return _obs_to_dict(obs)

# -------------------------------------------------------------------
# Observation lookup
# -------------------------------------------------------------------
@router.get("/observations")
def get_observation_by_query(
    date: str = Query(..., description="Date in any accepted form, e.g. 2022-05-24, 24/05/2022"),
    repo: ObservationRepository = Depends(get_repository),
) -> Dict[str, Any]:
    return _lookup(repo, date)

@router.get("/observations/{date:path}")
def get_observation(
    date: str,
    repo: ObservationRepository = Depends(get_repository),
) -> Dict[str, Any]:
    """
    Fetch the observation for a date.

    `date` is a path so 2022/05/24 works as well as 2022-05-24.
    Returns 400 with the failure kind when the date cannot be read,
    404 when the Bank published nothing for that day.
    """
    return _lookup(repo, date)

@router.get("/normalize")
def normalize(date: str = Query(..., description="Raw date string")) -> Dict[str, Any]:
    """Show what a raw date string normalizes to (no data needed)."""
    try:
        return {"input": date, "date": normalize_date(date)}
    except DateFormatError as e:
        raise HTTPException(400, e.to_dict())

@router.get("/dates")
def list_dates(repo: ObservationRepository = Depends(get_repository)) -> List[str]:
    return repo.dates()

# -------------------------------------------------------------------
# Group metadata
# -------------------------------------------------------------------
@router.get("/group")
def group_detail(repo: ObservationRepository = Depends(get_repository)) -> Dict[str, Any]:
    return repo.group_detail().model_dump()

@router.get("/terms")
def terms(repo: ObservationRepository = Depends(get_repository)) -> Dict[str, Any]:
    return repo.terms().model_dump()

@router.get("/series")
def series_detail(repo: ObservationRepository = Depends(get_repository)) -> Dict[str, Any]:
    """Label/description of every series, keyed by Valet series key."""
    return repo.series_detail().model_dump(by_alias=True)

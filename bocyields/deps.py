from fastapi import HTTPException, Request

from bocyields.repositories import ObservationRepository


def get_repository(request: Request) -> ObservationRepository:
    """Repository loaded at startup; 503 until the fetch has succeeded."""
    repo = getattr(request.app.state, "repository", None)
    if repo is None:
        err = getattr(request.app.state, "data_error", None)
        raise HTTPException(503, f"Bond yield data not loaded: {err}" if err else "Bond yield data not loaded yet")
    return repo

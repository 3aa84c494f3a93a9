from contextlib import asynccontextmanager
import asyncio
import logging
from fastapi import FastAPI

from .routers.read import router as read_router
from bocyields.fetcher import FetchError
from bocyields.repositories import ObservationRepository
from bocyields.settings import BOC_DATA_URL, LOG_LEVEL, PRELOAD_BLOCKING
from bocyields.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging(LOG_LEVEL) # Init Logging
log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Fetch the bond yield group once at startup and keep the
    read-only repository on app.state for the routers.
    There is no refresh; restart the service to pick up new data.
    """
    app.state.repository = None
    app.state.data_error = None

    async def _load():
        try:
            if PRELOAD_BLOCKING:
                # Blocking: server waits for the data
                repo = ObservationRepository.from_remote(BOC_DATA_URL)
            else:
                # Non-blocking: fetch in a background thread
                repo = await asyncio.to_thread(ObservationRepository.from_remote, BOC_DATA_URL)
            app.state.repository = repo
        except FetchError as e:
            # /healthz reports it, lookups answer 503
            log.error("startup fetch failed: %s", e)
            app.state.data_error = str(e)
        except Exception as e:
            # anything else the loader raises; /healthz reports it too
            log.exception("startup load failed")
            app.state.data_error = str(e)

    if PRELOAD_BLOCKING:
        await _load()
    else:
        # keep a reference so the task is not garbage collected
        app.state.load_task = asyncio.create_task(_load())

    yield

app = FastAPI(title="Bank of Canada bond yields", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Health probe.
    Returns:
      - ok: static True if the app is alive
      - data_ready: True once the startup fetch succeeded
      - data_error: fetch error message (None if healthy)
      - observations: number of dates held
    """
    repo = getattr(app.state, "repository", None)
    return {
        "ok": True,
        "service": "bocyields",
        "data_ready": repo is not None,
        "data_error": getattr(app.state, "data_error", None),
        "observations": len(repo) if repo is not None else 0,
    }

app.include_router(read_router)

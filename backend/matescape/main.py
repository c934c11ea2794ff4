import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from matescape import __version__
from matescape.config import get_settings
from matescape.routes import tournaments
from matescape.store import TournamentStore, get_store

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

APP_NAME = "Matescape Tournaments API"

app = FastAPI(title=APP_NAME, version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Public read-only endpoints (no auth)
app.include_router(tournaments.router, prefix="/api", tags=["tournaments"])


@app.on_event("startup")
def on_startup():
    store = app.dependency_overrides.get(get_store, get_store)()
    snapshot = store.snapshot()
    # Build derived caches for the initial snapshot
    store.search_index(snapshot)
    store.date_facets(snapshot)
    logger.info("%s %s serving %d tournaments", APP_NAME, __version__, len(snapshot.tournaments))


@app.get("/api/health")
def health_check(store: TournamentStore = Depends(get_store)):
    """Diagnostic endpoint to verify the service and its data are up"""
    return {
        "app_name": APP_NAME,
        "version": __version__,
        "status": "healthy",
        "tournament_count": len(store.snapshot().tournaments),
    }

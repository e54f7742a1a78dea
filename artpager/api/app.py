"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from artpager.config import LOG_LEVEL, ensure_data_dir

# Configure logging in the worker process (uvicorn --reload spawns a fresh one)
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(levelname)s: %(name)s: %(message)s",
)

from artpager.api.state import AppState, get_state
from artpager.core.artworks_client import CatalogFetchError

# Import routes after state to avoid circular imports
from artpager.api.routes import artworks, selection

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    state = get_state()
    ensure_data_dir()
    state.controller.load()
    try:
        state.controller.refresh()
    except CatalogFetchError as e:
        logger.warning("Initial fetch failed, starting without rows: %s", e)

    yield

    state.close()


app = FastAPI(
    title="artpager API",
    description="Local REST API for paging the artwork catalog and keeping a cross-page selection",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(artworks.router, prefix="/api/artworks", tags=["artworks"])
app.include_router(selection.router, prefix="/api/selection", tags=["selection"])

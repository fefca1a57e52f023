import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from deckcode.api import catalog_router, decks_router, health_router
from deckcode.config import settings
from deckcode.services.catalog import get_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the catalog once at startup."""
    catalog = get_catalog()
    logger.info("Serving deck codes for %d catalog cards", len(catalog))
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("deckcode"),
    debug=settings.debug,
    lifespan=lifespan,
)

app.include_router(catalog_router)
app.include_router(decks_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

from deckcode.api.catalog import router as catalog_router
from deckcode.api.decks import router as decks_router
from deckcode.api.health import router as health_router

__all__ = [
    "catalog_router",
    "decks_router",
    "health_router",
]

"""
DeckCode services.

Catalog access and the deck state owner.
"""

from deckcode.services.catalog import download_catalog, get_catalog
from deckcode.services.deck_state import CodeListener, DeckState

__all__ = [
    "CodeListener",
    "DeckState",
    "download_catalog",
    "get_catalog",
]

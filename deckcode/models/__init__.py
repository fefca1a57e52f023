from deckcode.models.card import Card, CardType
from deckcode.models.catalog import CardCatalog, CatalogError, UnknownCardError
from deckcode.models.deck import Deck, DeckEntry, deck_counts, display_order

__all__ = [
    "Card",
    "CardCatalog",
    "CardType",
    "CatalogError",
    "Deck",
    "DeckEntry",
    "UnknownCardError",
    "deck_counts",
    "display_order",
]

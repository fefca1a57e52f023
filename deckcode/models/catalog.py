"""
Card catalog.

The catalog is the fixed, ordered universe of cards a deck may draw from.
It is built once at startup and never mutated. Insertion order is the
canonical display order for card browsing.

INVARIANT: Every catalog id fits the two-digit base-35 deck code width,
i.e. 0 <= id <= MAX_CATALOG_ID. Larger catalogs are rejected at load time
rather than producing codes that cannot be decoded.
"""

from collections.abc import Iterable, Iterator

from deckcode.config import MAX_CATALOG_ID
from deckcode.models.card import Card, CardType


class CatalogError(ValueError):
    """Raised when catalog data violates catalog invariants."""


class UnknownCardError(KeyError):
    """Raised when a card id is not present in the catalog."""

    def __init__(self, card_id: int):
        self.card_id = card_id
        super().__init__(card_id)

    def __str__(self) -> str:
        return f"Card id {self.card_id} is not in the catalog"


class CardCatalog:
    """
    An immutable, ordered collection of card definitions.

    Raises:
        CatalogError: If ids are duplicated, negative, or above MAX_CATALOG_ID
    """

    __slots__ = ("_cards", "_by_id")

    def __init__(self, cards: Iterable[Card]):
        ordered = tuple(cards)
        by_id: dict[int, Card] = {}

        for card in ordered:
            if card.index < 0:
                raise CatalogError(f"Card '{card.name}' has negative id {card.index}")
            if card.index > MAX_CATALOG_ID:
                raise CatalogError(
                    f"Card '{card.name}' has id {card.index}; "
                    f"deck codes support ids up to {MAX_CATALOG_ID}"
                )
            if card.index in by_id:
                raise CatalogError(
                    f"Duplicate card id {card.index}: "
                    f"'{by_id[card.index].name}' and '{card.name}'"
                )
            by_id[card.index] = card

        self._cards = ordered
        self._by_id = by_id

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"CardCatalog({len(self._cards)} cards)"

    def lookup(self, card_id: int) -> Card:
        """
        Get a card by catalog id.

        Raises:
            UnknownCardError: If the id is not in the catalog
        """
        try:
            return self._by_id[card_id]
        except KeyError:
            raise UnknownCardError(card_id) from None

    def get(self, card_id: int) -> Card | None:
        """Get a card by catalog id, or None if absent."""
        return self._by_id.get(card_id)

    def ids(self) -> list[int]:
        """All catalog ids in catalog order."""
        return [card.index for card in self._cards]

    def filter(self, card_type: CardType | None = None, search: str = "") -> list[Card]:
        """
        Cards matching a type and a case-insensitive name substring.

        Args:
            card_type: Only include cards of this type (None = all types)
            search: Substring to look for in card names (empty = match all)

        Returns:
            Matching cards in catalog order.
        """
        needle = search.strip().lower()
        return [
            card
            for card in self._cards
            if (card_type is None or card.type == card_type) and needle in card.name.lower()
        ]

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from deckcode.config import MAX_COPIES
from deckcode.models.card import Card


@dataclass(frozen=True, slots=True)
class DeckEntry:
    """
    A card held in a deck together with its copy count.

    Attributes:
        card: The catalog card
        count: Copies held (1 to MAX_COPIES; entries are dropped, never kept at 0)
    """

    card: Card
    count: int

    def __post_init__(self) -> None:
        if not 1 <= self.count <= MAX_COPIES:
            raise ValueError(
                f"Deck entry for '{self.card.name}' has count {self.count}; "
                f"expected 1-{MAX_COPIES}"
            )

    @property
    def card_id(self) -> int:
        return self.card.index


# Card id -> entry. Order carries no meaning; listings and codes sort for themselves.
Deck = Mapping[int, DeckEntry]


def display_order(entries: Iterable[DeckEntry]) -> list[DeckEntry]:
    """Sort entries by card type priority, then catalog id."""
    return sorted(entries, key=lambda e: (e.card.type.priority, e.card.index))


def deck_counts(deck: Deck) -> dict[int, int]:
    """Flatten a deck to {card_id: count}."""
    return {card_id: entry.count for card_id, entry in deck.items()}

"""
Deck state.

DeckState is the single owner of "what is in the deck". Callers mutate it
with add/remove commands; after every change the deck code is recomputed
and pushed to subscribers.

INVARIANTS:
- Every entry count is in 1..MAX_COPIES
- No entry is kept at count 0
- Each card id appears at most once

Mutations build a new mapping and swap it in as one assignment, so a
reader holding `deck` sees either the old state or the new one, never a
half-applied change.
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from deckcode.codec.deck_code import decode_deck, encode_deck
from deckcode.config import MAX_COPIES
from deckcode.models.catalog import CardCatalog
from deckcode.models.deck import DeckEntry, display_order

logger = logging.getLogger(__name__)

CodeListener = Callable[[str], None]


class DeckState:
    """A mutable deck bound to a catalog."""

    def __init__(self, catalog: CardCatalog, deck: Mapping[int, DeckEntry] | None = None):
        entries = dict(deck or {})
        for card_id, entry in entries.items():
            if card_id != entry.card_id:
                raise ValueError(f"Deck key {card_id} does not match card id {entry.card_id}")
            if entry.card != catalog.lookup(card_id):
                raise ValueError(f"Deck entry for card {card_id} does not match the catalog card")

        self._catalog = catalog
        self._entries: Mapping[int, DeckEntry] = MappingProxyType(entries)
        self._code = encode_deck(self._entries.values())
        self._listeners: list[CodeListener] = []

    @classmethod
    def from_code(cls, code: str, catalog: CardCatalog) -> "DeckState":
        """
        Build a deck state from a deck code.

        Raises:
            DecodeError: If the code is malformed or references unknown cards
        """
        return cls(catalog, decode_deck(code, catalog))

    @property
    def catalog(self) -> CardCatalog:
        return self._catalog

    @property
    def deck(self) -> Mapping[int, DeckEntry]:
        """Read-only view of the current deck (card id -> entry)."""
        return self._entries

    @property
    def code(self) -> str:
        """Deck code for the current state."""
        return self._code

    def __len__(self) -> int:
        """Number of distinct cards in the deck."""
        return len(self._entries)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._entries

    def subscribe(self, listener: CodeListener) -> Callable[[], None]:
        """
        Register a callback invoked with the new code after each change.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add_card(self, card_id: int) -> int:
        """
        Add one copy of a card.

        Adding a card already at MAX_COPIES is a no-op.

        Returns:
            The card's count after the call.

        Raises:
            UnknownCardError: If the card id is not in the catalog
        """
        card = self._catalog.lookup(card_id)
        current = self._entries.get(card_id)

        if current is None:
            updated = DeckEntry(card=card, count=1)
        elif current.count < MAX_COPIES:
            updated = DeckEntry(card=card, count=current.count + 1)
        else:
            logger.debug("Card %d already at %d copies", card_id, MAX_COPIES)
            return current.count

        entries = dict(self._entries)
        entries[card_id] = updated
        self._replace(entries)
        return updated.count

    def remove_card(self, card_id: int) -> int:
        """
        Remove one copy of a card.

        The entry is dropped when its last copy is removed. Removing a card
        that is not in the deck is a no-op.

        Returns:
            The card's count after the call (0 if no longer in the deck).
        """
        current = self._entries.get(card_id)
        if current is None:
            return 0

        entries = dict(self._entries)
        if current.count > 1:
            entries[card_id] = DeckEntry(card=current.card, count=current.count - 1)
        else:
            del entries[card_id]
        self._replace(entries)
        return current.count - 1

    def clear(self) -> None:
        """Remove every card from the deck."""
        if self._entries:
            self._replace({})

    def count_of(self, card_id: int) -> int:
        """Copies of a card currently in the deck (0 if absent)."""
        entry = self._entries.get(card_id)
        return entry.count if entry else 0

    def is_capped(self, card_id: int) -> bool:
        """True if the card is already at MAX_COPIES."""
        return self.count_of(card_id) >= MAX_COPIES

    def total_count(self) -> int:
        """Total card instances in the deck."""
        return sum(entry.count for entry in self._entries.values())

    def entries(self) -> list[DeckEntry]:
        """Entries in display order: card type priority, then catalog id."""
        return display_order(self._entries.values())

    def serialize(self) -> str:
        """Encode the current deck as a deck code."""
        return encode_deck(self._entries.values())

    def _replace(self, entries: dict[int, DeckEntry]) -> None:
        self._entries = MappingProxyType(entries)
        self._code = self.serialize()
        logger.debug("Deck updated: %d cards, code=%s", self.total_count(), self._code)

        for listener in list(self._listeners):
            listener(self._code)

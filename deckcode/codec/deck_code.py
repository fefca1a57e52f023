"""
Deck code encoder and decoder.

Deck code format:
    <group>? <group>? <group>?

    group    = marker id_token+
    marker   = "Z" (1 copy) | "ZZ" (2 copies) | "ZZZ" (3 copies)
    id_token = two base-35 digits encoding (catalog id + 1)

Example:
    Z01ZZZ02  ->  card 0 x1, card 1 x3

Groups are emitted in increasing copy order and each appears at most once.
Ids inside a group are ascending. There are no separators: group boundaries
are recoverable only because every id token is exactly two characters and
'Z' is not a base-35 digit.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from deckcode.codec.base35 import (
    MAX_TOKEN_VALUE,
    TOKEN_WIDTH,
    from_base35,
    is_base35_digit,
    to_base35,
)
from deckcode.config import MAX_COPIES
from deckcode.models.catalog import CardCatalog
from deckcode.models.deck import DeckEntry

logger = logging.getLogger(__name__)

MARKER = "Z"


class DecodeErrorReason(str, Enum):
    """Why a deck code was rejected."""

    MISSING_MARKER = "missing_marker"
    INVALID_MARKER = "invalid_marker"
    EMPTY_GROUP = "empty_group"
    DUPLICATE_GROUP = "duplicate_group"
    GROUP_OUT_OF_ORDER = "group_out_of_order"
    INVALID_CHARACTER = "invalid_character"
    TRUNCATED_TOKEN = "truncated_token"
    UNKNOWN_CARD = "unknown_card"
    DUPLICATE_CARD = "duplicate_card"


class DecodeError(ValueError):
    """
    Raised when a deck code cannot be decoded.

    Decoding is all-or-nothing: no partial deck is ever returned.

    Attributes:
        reason: Failure classification
        fragment: The offending substring of the code
        position: Offset of the fragment within the code
    """

    def __init__(self, reason: DecodeErrorReason, message: str, fragment: str, position: int):
        self.reason = reason
        self.message = message
        self.fragment = fragment
        self.position = position
        super().__init__(f"Invalid deck code at position {position} ({fragment!r}): {message}")


def _fail(reason: DecodeErrorReason, message: str, fragment: str, position: int) -> DecodeError:
    logger.debug("Deck code rejected: %s at %d (%r)", reason.value, position, fragment)
    return DecodeError(reason, message, fragment, position)


def encode_deck(entries: Iterable[DeckEntry]) -> str:
    """
    Encode deck entries as a deck code.

    Args:
        entries: Deck entries in any order

    Returns:
        The canonical deck code. Empty string for an empty deck.

    Raises:
        ValueError: If an entry count is outside 1-MAX_COPIES or a card id
            is too large for a two-digit token
    """
    groups: dict[int, list[int]] = {count: [] for count in range(1, MAX_COPIES + 1)}

    for entry in entries:
        if entry.count not in groups:
            raise ValueError(f"Cannot encode count {entry.count} for '{entry.card.name}'")
        display_id = entry.card.display_id
        if display_id > MAX_TOKEN_VALUE:
            raise ValueError(
                f"Card id {entry.card.index} is too large for a deck code "
                f"(max {MAX_TOKEN_VALUE - 1})"
            )
        groups[entry.count].append(display_id)

    parts: list[str] = []
    for count, display_ids in groups.items():
        if not display_ids:
            continue
        parts.append(MARKER * count)
        parts.extend(to_base35(display_id) for display_id in sorted(display_ids))

    return "".join(parts)


def decode_deck(code: str, catalog: CardCatalog) -> dict[int, DeckEntry]:
    """
    Decode a deck code against a catalog.

    Only the empty string decodes to the empty deck. Callers that accept
    pasted input trim it before decoding.

    Args:
        code: Deck code text
        catalog: Catalog used to resolve card ids

    Returns:
        Mapping of card id to DeckEntry.

    Raises:
        DecodeError: If the code is malformed or references unknown cards
    """
    text = code
    deck: dict[int, DeckEntry] = {}

    if not text:
        return deck

    if text[0] != MARKER:
        raise _fail(
            DecodeErrorReason.MISSING_MARKER,
            "Deck code must start with a group marker",
            text[:TOKEN_WIDTH],
            0,
        )

    seen_groups: set[int] = set()
    pos = 0
    end = len(text)

    while pos < end:
        # Marker run
        run_start = pos
        while pos < end and text[pos] == MARKER:
            pos += 1
        copies = pos - run_start
        marker = text[run_start:pos]

        if copies > MAX_COPIES:
            raise _fail(
                DecodeErrorReason.INVALID_MARKER,
                f"Group marker has {copies} 'Z' characters; expected 1-{MAX_COPIES}",
                marker,
                run_start,
            )
        if copies in seen_groups:
            raise _fail(
                DecodeErrorReason.DUPLICATE_GROUP,
                f"The {copies}-copy group appears more than once",
                marker,
                run_start,
            )
        if seen_groups and copies < max(seen_groups):
            raise _fail(
                DecodeErrorReason.GROUP_OUT_OF_ORDER,
                f"The {copies}-copy group must come before the {max(seen_groups)}-copy group",
                marker,
                run_start,
            )
        if pos == end:
            raise _fail(
                DecodeErrorReason.EMPTY_GROUP,
                "Group marker is not followed by any card ids",
                marker,
                run_start,
            )
        seen_groups.add(copies)

        # Id tokens up to the next marker
        while pos < end and text[pos] != MARKER:
            token = text[pos : pos + TOKEN_WIDTH]

            for char in token:
                if char != MARKER and not is_base35_digit(char):
                    raise _fail(
                        DecodeErrorReason.INVALID_CHARACTER,
                        f"Character {char!r} is not a base-35 digit",
                        token,
                        pos,
                    )
            if len(token) < TOKEN_WIDTH or MARKER in token:
                raise _fail(
                    DecodeErrorReason.TRUNCATED_TOKEN,
                    f"Card id token must be {TOKEN_WIDTH} characters",
                    token.rstrip(MARKER),
                    pos,
                )

            card_id = from_base35(token) - 1
            if card_id in deck:
                raise _fail(
                    DecodeErrorReason.DUPLICATE_CARD,
                    f"Card id {card_id} is listed more than once",
                    token,
                    pos,
                )
            card = catalog.get(card_id)
            if card is None:
                raise _fail(
                    DecodeErrorReason.UNKNOWN_CARD,
                    f"Card id {card_id} is not in the catalog",
                    token,
                    pos,
                )

            deck[card_id] = DeckEntry(card=card, count=copies)
            pos += TOKEN_WIDTH

    return deck

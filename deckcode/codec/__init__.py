from deckcode.codec.base35 import BASE35_ALPHABET, from_base35, to_base35
from deckcode.codec.deck_code import (
    MARKER,
    DecodeError,
    DecodeErrorReason,
    decode_deck,
    encode_deck,
)

__all__ = [
    "BASE35_ALPHABET",
    "DecodeError",
    "DecodeErrorReason",
    "MARKER",
    "decode_deck",
    "encode_deck",
    "from_base35",
    "to_base35",
]

"""
Fixed-width base-35 integers.

Digits are 0-9 then A-Y. 'Z' is deliberately absent so it can act as a
structural marker in deck codes.
"""

BASE35_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXY"
BASE = len(BASE35_ALPHABET)
TOKEN_WIDTH = 2

# Largest value representable in TOKEN_WIDTH digits
MAX_TOKEN_VALUE = BASE**TOKEN_WIDTH - 1

_DIGIT_VALUES = {char: value for value, char in enumerate(BASE35_ALPHABET)}


def to_base35(value: int, width: int = TOKEN_WIDTH) -> str:
    """
    Encode a non-negative integer, left-padded with '0' to `width`.

    Zero encodes to all zeros ("00" at the default width).

    Raises:
        ValueError: If value is negative or needs more than `width` digits
    """
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    if value == 0:
        return "0" * width

    digits: list[str] = []
    n = value
    while n > 0:
        n, remainder = divmod(n, BASE)
        digits.append(BASE35_ALPHABET[remainder])

    if len(digits) > width:
        raise ValueError(f"Value {value} needs {len(digits)} base-35 digits; width is {width}")

    return "".join(reversed(digits)).rjust(width, "0")


def from_base35(token: str) -> int:
    """
    Decode a base-35 string.

    Raises:
        ValueError: If the token is empty or contains a non-base-35 character
    """
    if not token:
        raise ValueError("Cannot decode empty token")

    value = 0
    for char in token:
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            raise ValueError(f"Invalid base-35 character {char!r} in {token!r}")
        value = value * BASE + digit
    return value


def is_base35_digit(char: str) -> bool:
    return char in _DIGIT_VALUES

from dataclasses import dataclass
from enum import Enum


class CardType(str, Enum):
    """Card categories, declared in display priority order."""

    UNIT = "unit"
    SUPPORT = "support"
    BUILDING = "building"
    FIELD = "field"

    @property
    def priority(self) -> int:
        """Sort rank used by deck listings (Unit first, Field last)."""
        return _TYPE_PRIORITY[self]


_TYPE_PRIORITY: dict[CardType, int] = {
    CardType.UNIT: 1,
    CardType.SUPPORT: 2,
    CardType.BUILDING: 3,
    CardType.FIELD: 4,
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    A card definition from the catalog.

    Attributes:
        index: Stable catalog identifier (>= 0), used by deck codes
        name: Display name
        type: Card category
        effect: Rules text
        group: Faction or set grouping
        cost: Play cost, if the card has one
        attack: Attack value, if the card has one
        defense: Defense value, if the card has one
    """

    index: int
    name: str
    type: CardType
    effect: str = ""
    group: str = ""
    cost: int | None = None
    attack: int | None = None
    defense: int | None = None

    @property
    def display_id(self) -> int:
        """Catalog id shifted by one, the value written into deck codes."""
        return self.index + 1

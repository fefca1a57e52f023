from pathlib import Path
from typing import Any

import pytest

from deckcode.models.card import Card, CardType
from deckcode.models.catalog import CardCatalog


@pytest.fixture
def catalog() -> CardCatalog:
    """Small catalog with every card type and non-contiguous ids.

    Catalog order deliberately differs from type priority order.
    """
    return CardCatalog(
        [
            Card(index=0, name="Alpha", type=CardType.UNIT, effect="Guard.", group="Iron"),
            Card(index=1, name="Beta", type=CardType.SUPPORT, effect="Draw a card.", group="Iron"),
            Card(index=2, name="Gamma Keep", type=CardType.BUILDING, group="Ash", defense=5),
            Card(index=3, name="Delta Plains", type=CardType.FIELD, group="Neutral"),
            Card(index=4, name="Epsilon", type=CardType.UNIT, group="Ash", attack=2, defense=1),
            Card(index=34, name="Zeta", type=CardType.SUPPORT, group="Deep"),
            Card(index=40, name="Eta Tower", type=CardType.BUILDING, group="Deep"),
            Card(index=1223, name="Omega", type=CardType.UNIT, group="Neutral", cost=9),
        ]
    )


@pytest.fixture
def catalog_records() -> list[dict[str, Any]]:
    """Catalog JSON records as they appear in a catalog file."""
    return [
        {
            "index": 0,
            "name": "Alpha",
            "type": "unit",
            "effect": "Guard.",
            "group": "Iron",
            "cost": 2,
            "attack": 2,
            "defense": 3,
        },
        {"index": 1, "name": "Beta", "type": "Support", "effect": "Draw a card.", "group": "Iron"},
        {"index": 5, "name": "Gamma Keep", "type": "building", "effect": "", "group": "Ash"},
    ]


@pytest.fixture
def bundled_catalog_path() -> Path:
    return Path(__file__).parent.parent / "deckcode" / "data" / "cards.json"

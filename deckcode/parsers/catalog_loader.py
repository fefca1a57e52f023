"""
Parser for card catalog JSON.

Catalog file format: a JSON array of card objects, in display order.

Example:
    [
      {"index": 0, "name": "Alpha", "type": "unit", "effect": "...", "group": "Vanguard",
       "cost": 2, "attack": 3, "defense": 1},
      {"index": 1, "name": "Beta", "type": "support", "effect": "...", "group": "Vanguard"}
    ]

`cost`, `attack` and `defense` are optional. Card type names are
case-insensitive.
"""

import json
import logging
from pathlib import Path
from typing import Any

from deckcode.models.card import Card, CardType
from deckcode.models.catalog import CardCatalog, CatalogError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("index", "name", "type")
OPTIONAL_INT_FIELDS = ("cost", "attack", "defense")


def parse_card(record: dict[str, Any]) -> Card:
    """
    Build a Card from one catalog record.

    Raises:
        CatalogError: If a required field is missing or a value has the wrong type
    """
    if not isinstance(record, dict):
        raise CatalogError(f"Catalog record must be an object, got {type(record).__name__}")

    missing = [name for name in REQUIRED_FIELDS if name not in record]
    if missing:
        raise CatalogError(f"Catalog record {record!r} is missing {', '.join(missing)}")

    index = record["index"]
    # bool is an int subclass; reject it explicitly
    if not isinstance(index, int) or isinstance(index, bool):
        raise CatalogError(f"Card index must be an integer, got {index!r}")

    raw_type = str(record["type"]).lower()
    try:
        card_type = CardType(raw_type)
    except ValueError:
        raise CatalogError(
            f"Card '{record['name']}' has unknown type {record['type']!r}"
        ) from None

    extras: dict[str, int | None] = {}
    for name in OPTIONAL_INT_FIELDS:
        value = record.get(name)
        if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
            raise CatalogError(f"Card '{record['name']}' has non-integer {name}: {value!r}")
        extras[name] = value

    return Card(
        index=index,
        name=str(record["name"]),
        type=card_type,
        effect=str(record.get("effect", "")),
        group=str(record.get("group", "")),
        **extras,
    )


def parse_catalog(records: list[dict[str, Any]]) -> CardCatalog:
    """
    Build a CardCatalog from decoded catalog JSON.

    Raises:
        CatalogError: If the data is not a list of valid card records
    """
    if not isinstance(records, list):
        raise CatalogError(f"Catalog must be a JSON array, got {type(records).__name__}")

    return CardCatalog(parse_card(record) for record in records)


def load_catalog(path: Path) -> CardCatalog:
    """
    Load a catalog from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        CatalogError: If the file contents are not a valid catalog
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Card catalog not found at {path}. "
            "Set CATALOG_PATH or run `python -m deckcode.jobs.download_catalog` first."
        )

    with open(path, encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file {path} is not valid JSON: {e}") from e

    catalog = parse_catalog(records)
    logger.info("Loaded %d cards from %s", len(catalog), path)
    return catalog

from deckcode.parsers.catalog_loader import load_catalog, parse_card, parse_catalog

__all__ = [
    "load_catalog",
    "parse_card",
    "parse_catalog",
]

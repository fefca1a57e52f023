"""
Catalog service.

Loads and caches the configured card catalog for the life of the process.
"""

import json
from functools import lru_cache
from pathlib import Path

import httpx

from deckcode.config import settings
from deckcode.models.catalog import CardCatalog
from deckcode.parsers.catalog_loader import load_catalog, parse_catalog


@lru_cache(maxsize=1)
def get_catalog() -> CardCatalog:
    """
    Get the cached catalog from `settings.catalog_path`.

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        CatalogError: If the catalog file is invalid
    """
    return load_catalog(settings.catalog_path)


async def download_catalog(url: str, output_path: Path | None = None) -> Path:
    """
    Download a catalog JSON file and save it after validation.

    The payload is parsed into a CardCatalog before anything is written,
    so an invalid download never replaces a working catalog.

    Args:
        url: Catalog JSON URL
        output_path: Where to save the file. Defaults to settings.catalog_path

    Returns:
        Path to the saved file.

    Raises:
        httpx.HTTPError: If the download fails
        CatalogError: If the payload is not a valid catalog
    """
    if output_path is None:
        output_path = settings.catalog_path

    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.get(url)
        response.raise_for_status()
        records = response.json()

    parse_catalog(records)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2)

    return output_path

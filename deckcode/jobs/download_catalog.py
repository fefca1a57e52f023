"""
Download the card catalog.

Fetches the catalog JSON from CATALOG_URL and stores it at CATALOG_PATH.
"""

import asyncio
import logging

from deckcode.config import settings
from deckcode.services.catalog import download_catalog

logger = logging.getLogger(__name__)


async def run_download() -> None:
    """Download the configured card catalog."""
    if not settings.catalog_url:
        raise ValueError("CATALOG_URL is not configured")

    logger.info("Downloading card catalog from %s...", settings.catalog_url)

    try:
        path = await download_catalog(settings.catalog_url)
        logger.info("Saved card catalog to %s", path)
    except Exception as e:
        logger.error("Failed to download card catalog: %s", e)
        raise


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_download())


if __name__ == "__main__":
    main()

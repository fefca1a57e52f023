from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "DeckCode"
    debug: bool = False

    log_level: str = "INFO"

    # Catalog JSON read once at startup
    catalog_path: Path = DATA_DIR / "cards.json"

    # Remote catalog source for the download job (empty = not configured)
    catalog_url: str = ""


settings = Settings()


# =============================================================================
# DECK CODE FORMAT LIMITS
# =============================================================================

# Maximum copies of a single card in a deck
MAX_COPIES = 3

# Each display id (catalog id + 1) is written as two base-35 digits,
# so the largest encodable display id is 35**2 - 1 = 1224
MAX_CATALOG_ID = 1223

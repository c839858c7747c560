from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARTMARKET_")

    app_name: str = "ArtMarket"

    api_base_url: str = "http://localhost:5000"
    request_timeout: float = 30.0

    # Local persistence (stands in for browser storage)
    fallback_store_path: Path = Path(".artmarket/local_store.json")
    wishlist_storage_key: str = "wishlist"
    token_storage_key: str = "token"

    currency: str = "usd"

    # Credentials used by the snapshot job only
    api_token: str = ""
    role: str = "Collector"


settings = Settings()


# =============================================================================
# PRICING
# =============================================================================

# Orders with a subtotal strictly above this ship for free
FREE_SHIPPING_THRESHOLD = 500.0

# Flat shipping fee for non-empty carts below the threshold
FLAT_SHIPPING_FEE = 50.0

# Sales tax applied to the subtotal
TAX_RATE = 0.10

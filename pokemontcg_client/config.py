from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


POKEMON_TCG_URL = "https://api.pokemontcg.io/v2"


class Settings(BaseSettings):
    """Client configuration, read from ``POKEMON_TCG_*`` environment variables or .env"""

    # API Settings
    api_key: Optional[str] = None
    base_url: str = POKEMON_TCG_URL
    user_agent: str = "Mozilla/5.0"
    timeout: float = 30.0  # Seconds, applied by the transport

    # Paging Settings
    page_size: int = 250  # Upstream default when no pageSize is sent
    max_pages: Optional[int] = None  # No cap
    fetch_all_pages: bool = True  # False: every collection call is one-shot

    model_config = SettingsConfigDict(
        env_prefix="POKEMON_TCG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()

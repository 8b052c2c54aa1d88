from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_CATALOG = Path(__file__).resolve().parent / "data" / "deals.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Pydantic Settings automatically reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    """

    # JSON array of deals served as the read-only catalog
    catalog_path: Path = BUNDLED_CATALOG

    # Geo filtering, in miles
    default_radius_miles: float = 10.0
    max_radius_miles: float = 500.0

    # Shorter queries are ignored so partial typing doesn't narrow results
    min_search_length: int = 3

    # Frontend origins allowed to call the API from the browser
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

"""Configuration management for vidplayer."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "videos.txt"


class Settings(BaseSettings):
    """Application settings with environment variable overrides.

    All settings can be overridden via environment variables
    prefixed with VIDPLAYER_ (e.g. VIDPLAYER_CATALOG_PATH, VIDPLAYER_LOG_LEVEL).
    """

    model_config = {"env_prefix": "VIDPLAYER_"}

    # Catalog
    catalog_path: Path | None = Field(
        default=None,
        description="Catalog file to load; the bundled videos.txt when unset",
    )

    # Moderation
    default_flag_reason: str = "Not supplied"

    # Playback
    random_seed: int | None = None

    log_level: str = "WARNING"

    @property
    def resolved_catalog_path(self) -> Path:
        """Catalog file that will actually be loaded."""
        return self.catalog_path or DEFAULT_CATALOG_PATH


# Module-level singleton, imported throughout the app
settings = Settings()

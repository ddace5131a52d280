from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings


DEFAULT_TEMPLATES_DIR = str(Path(__file__).resolve().parent / "views" / "templates")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Bird Watching"

    # Database
    database_url: str = "sqlite:///./birdwatch.db"
    seed_on_startup: bool = True

    # Views
    templates_dir: str = DEFAULT_TEMPLATES_DIR

    log_level: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite (needs extra connect args)."""
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

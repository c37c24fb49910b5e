"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default data directory
DATA_DIR = Path.cwd() / "data"


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file), prefixed STRONK_."""

    model_config = SettingsConfigDict(
        env_prefix="STRONK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage
    data_dir: Path = DATA_DIR
    db_file: Path | None = None

    # Routine JSON; the bundled 5/3/1 routine when unset
    routine_file: Path | None = None

    # Web
    host: str = "127.0.0.1"
    port: int = 8080
    frontend_dir: Path | None = None
    # Comma-separated list of allowed CORS origins
    cors_origins: str = "*"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def db_path(self) -> Path:
        """Path to the SQLite database."""
        if self.db_file is not None:
            return self.db_file
        return self.data_dir / "stronk.db"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

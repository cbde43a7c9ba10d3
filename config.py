from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # Field names double as environment variable names (PORT, DATABASE_URL, ...).
    port: int = 3000
    host: str = "0.0.0.0"
    database_url: str = "sqlite:///./store.db"
    public_dir: Path = ROOT_DIR / "public"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()

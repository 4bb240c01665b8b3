"""All settings, loaded from the environment and the .env file."""
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Store
    mongodb_uri: str
    mongodb_database: str = "nba-data"
    mongodb_collection: str = "nba_seasons_v2"
    mongodb_timeout_ms: int = 5000

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    app_env: str = "development"

    @field_validator("mongodb_uri")
    @classmethod
    def _uri_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("MONGODB_URI must not be empty")
        return v

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""
Configuration module - loads all env vars using pydantic-settings.
The Settings object is built once and handed to create_app(); nothing
below the app factory reads the environment on its own.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "minilink"

    # JWT Auth (tokens carry no expiry)
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"

    # Connection requests: also treat B->A as a duplicate of A->B
    symmetric_connection_check: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()

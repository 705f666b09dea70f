from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Banking Transfer API"
    demo_app_name: str = "Middleware Demo"
    database_url: str = "sqlite:///transfer_api.db"
    log_level: str = "INFO"
    auth_token: str = "mysecrettoken"
    seed_on_startup: bool = True
    transfer_max_retries: int = 3
    transfer_deadline_seconds: float = 5.0
    store_timeout_seconds: float = 5.0
    host: str = "127.0.0.1"
    port: int = 3000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRANSFER_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = "LINE Talk Viewer API"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"])
    max_upload_size_mb: int = 15
    rate_limit_per_minute: int = 60

    # Used as the current user when an export contains no messages.
    default_user: str = ""


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

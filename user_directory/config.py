from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "User Directory"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Remote user store
    user_api_base_url: str = "https://user-management-app-6csh.onrender.com/api/v1"
    user_api_timeout: float = 10.0
    user_api_date_format: Literal["MM/DD/YYYY", "YYYY-MM-DD"] = "MM/DD/YYYY"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_user_api: str = "INFO"         # Remote user store client
    log_level_state: str = "INFO"            # Record cache and state store

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()

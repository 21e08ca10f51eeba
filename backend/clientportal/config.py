from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Client Portal API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///data/client_portal.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Record store backend: "sqlalchemy" (database_url) or "memory" (process-local)
    record_store_backend: str = "sqlalchemy"

    # Static admin account (mock authentication)
    admin_user_id: str = "admin-user-01"
    admin_email: str = "admin@example.com"
    admin_password: str = "change-me"
    admin_name: str = "Admin User"

    # Client onboarding
    generated_password_length: int = 10
    avatar_base_url: str = "https://i.pravatar.cc/150?u="

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # record store adapters + entity core
    log_level_cascade: str = "INFO"          # multi-step cascading deletes

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()

"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - sessions_per_page and max_sidebar_sessions are fixed for a controller's lifetime

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SQLite default: the session list works out-of-the-box for a single desktop user;
      PostgreSQL URLs are rewritten to the asyncpg driver
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from session_list.core.domain_types import MAX_SIDEBAR_SESSIONS, SESSIONS_PER_PAGE
from session_list.core.language_strings import Locale


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./sessions.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_tables: bool = True

    # Session list
    sessions_per_page: int = Field(SESSIONS_PER_PAGE, ge=1)
    max_sidebar_sessions: int = Field(MAX_SIDEBAR_SESSIONS, ge=1)
    store_timeout_seconds: float | None = None

    # Localization
    locale: Locale = Locale.EN

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""
config.py: Runtime settings using Pydantic.

Settings are loaded from SHARK_DASH_* environment variables with .env file support.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DB_FILE


class Settings(BaseSettings):
    """Leaderboard backend and diagnostics settings."""

    model_config = SettingsConfigDict(
        env_prefix="SHARK_DASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Supabase store (used when both are set)
    supabase_url: str = ""
    supabase_key: str = ""

    # SQLite store
    db_file: str = DB_FILE

    debug: bool = False

    @property
    def use_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def open_store(settings: Settings):
    """Picks the Supabase store when credentials are configured, SQLite otherwise."""
    if settings.use_supabase:
        from .leaderboard_supabase import SupabaseLeaderboard
        return SupabaseLeaderboard.connect(settings.supabase_url, settings.supabase_key)

    from .leaderboard_db import SQLiteLeaderboard
    return SQLiteLeaderboard(settings.db_file)

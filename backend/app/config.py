"""
Application configuration from environment variables.
Loads .env from the backend directory so settings are found regardless of cwd.
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# .env next to backend/ (parent of app/) — load explicitly so values are set even when run from repo root
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)
else:
    # Fallback: try backend/.env relative to cwd (e.g. when running from repo root)
    import os
    _cwd_env = Path(os.getcwd()) / "backend" / ".env"
    if _cwd_env.exists():
        from dotenv import load_dotenv
        load_dotenv(_cwd_env, override=False)


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database: sqlite for local use without Docker, postgresql for production
    database_url: str = "sqlite:///./biography_dev.db"

    # Subject names longer than this are rejected (matches biography_sessions.subject_name column).
    max_subject_name_chars: int = 255

    # CORS: comma-separated origins
    cors_origins: str = "http://localhost:3000"

    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        s = (v or "INFO").strip().upper() if isinstance(v, str) else "INFO"
        return s if s in _LOG_LEVELS else "INFO"

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.database_url


settings = Settings()

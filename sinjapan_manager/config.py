from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "SIN JAPAN Manager API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./sinjapan_manager.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Upstream REST backend (owns all business data)
    backend_base_url: str = "http://localhost:3000"
    backend_timeout: float = 30.0
    forwarded_headers: list[str] = ["cookie", "authorization"]

    # AI generation: "backend" uses the upstream /api/ai/* collaborator,
    # "openrouter" calls OpenRouter directly
    ai_provider: str = "backend"
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_app_name: str = "SIN JAPAN Manager"
    ai_model: str = "openai/gpt-4o-mini"
    ai_temperature: float = 0.7

    # Polling feeds (seconds)
    chat_poll_interval_seconds: float = 3.0
    unread_poll_interval_seconds: float = 10.0

    # Calendar / greeting timezone
    timezone: str = "Asia/Tokyo"

    # Chat attachments forwarded to the backend
    max_upload_size_mb: int = 20

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_backend: str = "INFO"          # upstream REST backend client
    log_level_ai: str = "INFO"               # AI generators and OpenRouter client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()

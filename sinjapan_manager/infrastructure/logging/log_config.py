"""Per-category log levels, applied once from the FastAPI lifespan."""

import logging
import sys

from sinjapan_manager.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"

# settings field -> loggers it governs
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_backend": ("sinjapan_manager.infrastructure.backend",),
    "log_level_ai": (
        "sinjapan_manager.infrastructure.openrouter",
        "sinjapan_manager.infrastructure.llm",
        "sinjapan_manager.application.services.ai_usage_logger",
    ),
}


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    root = logging.getLogger()
    root.setLevel(level_for(settings.log_level))

    # uvicorn installs its own handler; bare scripts get stderr
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in LOGGER_CATEGORIES.items():
        level = level_for(getattr(settings, field_name, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)


def level_for(name: str) -> int:
    """``"debug"`` -> ``logging.DEBUG``; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO

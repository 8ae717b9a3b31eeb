"""Settings defaults and environment overrides."""

from sinjapan_manager.config import _PROJECT_DIR, Settings, get_settings


def test_env_file_points_at_project_root():
    assert (_PROJECT_DIR / "sinjapan_manager" / "config.py").exists()
    assert Settings.model_config["env_file"][0] == _PROJECT_DIR / ".env"


def test_defaults(monkeypatch):
    for name in ("BACKEND_BASE_URL", "AI_PROVIDER", "TIMEZONE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.backend_base_url == "http://localhost:3000"
    assert settings.ai_provider == "backend"
    assert settings.timezone == "Asia/Tokyo"
    assert settings.forwarded_headers == ["cookie", "authorization"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BACKEND_BASE_URL", "http://crm.internal:8080")
    monkeypatch.setenv("AI_PROVIDER", "openrouter")
    monkeypatch.setenv("CHAT_POLL_INTERVAL_SECONDS", "1.5")

    settings = Settings(_env_file=None)

    assert settings.backend_base_url == "http://crm.internal:8080"
    assert settings.ai_provider == "openrouter"
    assert settings.chat_poll_interval_seconds == 1.5


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

import logging

from todo_app.config import get_settings
from todo_app.logging_setup import setup_logging


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("RELOAD", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.database_url == "sqlite:///./other.db"
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.port == 9001
    assert settings.reload is True
    assert settings.log_level == "DEBUG"


def test_setup_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("warning")
        setup_logging("warning")

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
        assert logging.getLogger("sqlalchemy").level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
        logging.captureWarnings(False)

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from repo root and the package parent (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path(__file__).resolve().parents[2] / ".env")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: str) -> list:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./todo.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
RELOAD = _env_bool("RELOAD", False)
CORS_ORIGINS = _env_list("CORS_ORIGINS", "http://localhost:3000")


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the API and its task store."""

    database_url: str = DATABASE_URL
    log_level: str = LOG_LEVEL
    host: str = HOST
    port: int = PORT
    reload: bool = RELOAD
    cors_origins: tuple = tuple(CORS_ORIGINS)


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        database_url=os.getenv("DATABASE_URL", DATABASE_URL),
        log_level=os.getenv("LOG_LEVEL", LOG_LEVEL).upper(),
        host=os.getenv("HOST", HOST),
        port=int(os.getenv("PORT", str(PORT))),
        reload=_env_bool("RELOAD", RELOAD),
        cors_origins=tuple(_env_list("CORS_ORIGINS", ",".join(CORS_ORIGINS))),
    )

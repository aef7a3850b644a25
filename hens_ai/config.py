"""Startup settings loaded from environment variables and ``.env`` files.

The core client never reads the environment itself. An application calls
``load_settings()`` once at startup, builds its ``CompletionClient`` with
``CompletionClient.from_settings`` and passes that instance around.
"""

from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenRouter configuration
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_referer: str = "https://henotic.space"
    openrouter_app_name: str = "Henotic Technology"
    openrouter_timeout: float | None = None  # seconds; None waits indefinitely

    # Client defaults; unset values fall back to the library defaults
    default_model: str | None = None
    default_system_message: str | None = None
    web_search: bool | None = None
    enable_history: bool | None = None

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_openrouter: str = "INFO"       # OpenRouter client

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_settings() -> Settings:
    """Build a fresh Settings instance (reads .env on every call)."""
    return Settings()

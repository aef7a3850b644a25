"""Logging setup for applications that embed the client.

The package only writes to module loggers. An application calls
``setup_logging(settings)`` once at startup to give them levels and,
when nothing else has, a stderr handler.
"""

import logging

from hens_ai.config import Settings

_LOG_FORMAT = "%(levelname)-8s %(name)s — %(message)s"

# logger name -> Settings field holding its level
_LOGGER_LEVELS: dict[str, str] = {
    "httpx": "log_level_http",
    "httpcore": "log_level_http",
    "hens_ai": "log_level_openrouter",
}


def setup_logging(settings: Settings) -> None:
    """Apply the root level, per-logger levels and a fallback handler."""
    logging.getLogger().setLevel(_parse_level(settings.log_level))
    # No-op when the host application already installed a handler.
    logging.basicConfig(format=_LOG_FORMAT)

    for name, field in _LOGGER_LEVELS.items():
        logging.getLogger(name).setLevel(_parse_level(getattr(settings, field)))


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO

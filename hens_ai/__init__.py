from .application.interfaces import ChatProvider
from .application.schemas import (
    ClientConfig,
    ClientOptions,
    ImageAnalysisOptions,
    TextResponseOptions,
    merge_config,
)
from .client import CompletionClient
from .config import Settings, load_settings
from .domain.entities import ChatTurn
from .domain.exceptions import CompletionError

__all__ = [
    "ChatProvider",
    "ChatTurn",
    "ClientConfig",
    "ClientOptions",
    "CompletionClient",
    "CompletionError",
    "ImageAnalysisOptions",
    "Settings",
    "TextResponseOptions",
    "load_settings",
    "merge_config",
]

from .message_builder import (
    ONLINE_SUFFIX,
    build_conversation,
    build_image_message,
    build_web_plugin,
    history_to_messages,
    resolve_model,
)

__all__ = [
    "ONLINE_SUFFIX",
    "build_conversation",
    "build_image_message",
    "build_web_plugin",
    "history_to_messages",
    "resolve_model",
]

from .chat_message import ChatMessage, ChatTurn, CompletionRequest, ContentPart, WebPlugin

__all__ = [
    "ChatMessage",
    "ChatTurn",
    "CompletionRequest",
    "ContentPart",
    "WebPlugin",
]

"""Message and payload construction for completion requests.

Pure functions only: no I/O, no configuration lookups. The client facade
resolves per-call overrides and passes final values in.
"""

from collections.abc import Sequence
from datetime import date

from hens_ai.domain.entities import ChatMessage, ChatTurn, ContentPart, WebPlugin

ONLINE_SUFFIX = ":online"


def history_to_messages(history: Sequence[ChatTurn]) -> list[ChatMessage]:
    """Map caller history turns to chat messages, oldest first."""
    return [
        ChatMessage(role="assistant" if turn.is_bot else "user", content=turn.text)
        for turn in history
    ]


def build_conversation(
    system_message: str,
    history: Sequence[ChatTurn] | None,
    prompt: str,
    *,
    include_history: bool,
) -> list[ChatMessage]:
    """Build ``[system, *history, user(prompt)]``.

    History is dropped entirely when ``include_history`` is false, even if
    turns were supplied.
    """
    messages = [ChatMessage(role="system", content=system_message)]
    if include_history and history:
        messages.extend(history_to_messages(history))
    messages.append(ChatMessage(role="user", content=prompt))
    return messages


def build_image_message(image_url: str, prompt: str) -> ChatMessage:
    """Single user message: the prompt text followed by the image reference."""
    return ChatMessage(
        role="user",
        content=[
            ContentPart.from_text(prompt),
            ContentPart.from_image_url(image_url),
        ],
    )


def build_web_plugin(max_results: int, today: date | None = None) -> WebPlugin:
    """Web-search plugin block; the search prompt carries the call date."""
    today = today or date.today()
    return WebPlugin(
        max_results=max_results,
        search_prompt=f"Latest web search results ({today.isoformat()})...",
    )


def resolve_model(model: str, web_search: bool) -> str:
    if web_search:
        return f"{model}{ONLINE_SUFFIX}"
    return model

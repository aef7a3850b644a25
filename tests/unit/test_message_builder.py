"""Unit tests for message and payload construction."""

from datetime import date

from hens_ai.application.services.message_builder import (
    ONLINE_SUFFIX,
    build_conversation,
    build_image_message,
    build_web_plugin,
    history_to_messages,
    resolve_model,
)
from hens_ai.domain.entities import ChatMessage, ChatTurn, ContentPart


def test_conversation_without_history():
    messages = build_conversation("sys", None, "Q", include_history=True)

    assert messages == [
        ChatMessage(role="system", content="sys"),
        ChatMessage(role="user", content="Q"),
    ]


def test_conversation_keeps_history_order_and_roles():
    history = [
        ChatTurn(is_bot=False, text="one"),
        ChatTurn(is_bot=True, text="two"),
        ChatTurn(is_bot=False, text="three"),
    ]

    messages = build_conversation("sys", history, "Q", include_history=True)

    assert [(m.role, m.content) for m in messages] == [
        ("system", "sys"),
        ("user", "one"),
        ("assistant", "two"),
        ("user", "three"),
        ("user", "Q"),
    ]


def test_conversation_drops_history_when_excluded():
    history = [ChatTurn(is_bot=True, text="ignored")]

    messages = build_conversation("sys", history, "Q", include_history=False)

    assert [m.role for m in messages] == ["system", "user"]
    assert messages[-1].content == "Q"


def test_history_to_messages_empty():
    assert history_to_messages([]) == []


def test_image_message_parts():
    message = build_image_message("https://example.com/x.jpg", "What is this?")

    assert message.role == "user"
    assert message.content == [
        ContentPart(type="text", text="What is this?"),
        ContentPart(type="image_url", image_url={"url": "https://example.com/x.jpg"}),
    ]


def test_web_plugin_embeds_date():
    plugin = build_web_plugin(7, today=date(2026, 10, 19))

    assert plugin.to_dict() == {
        "id": "web",
        "max_results": 7,
        "search_prompt": "Latest web search results (2026-10-19)...",
    }


def test_web_plugin_defaults_to_today():
    plugin = build_web_plugin(5)

    assert date.today().isoformat() in plugin.search_prompt


def test_resolve_model():
    assert resolve_model("deepseek/deepseek-chat", True) == f"deepseek/deepseek-chat{ONLINE_SUFFIX}"
    assert resolve_model("deepseek/deepseek-chat", False) == "deepseek/deepseek-chat"

"""Domain entities for chat messages — framework-independent, multimodal."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ChatTurn:
    """One prior exchange unit supplied by the caller as conversation history."""

    is_bot: bool
    text: str


@dataclass
class ContentPart:
    """A single content part within a multimodal message.

    Follows the OpenAI-compatible multimodal format used by OpenRouter.
    """

    type: str  # "text" | "image_url"
    text: str | None = None
    image_url: dict[str, str] | None = None  # {"url": "..."}

    @classmethod
    def from_text(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    @classmethod
    def from_image_url(cls, url: str) -> "ContentPart":
        return cls(type="image_url", image_url={"url": url})

    def to_dict(self) -> dict[str, Any]:
        if self.type == "image_url":
            return {"type": "image_url", "image_url": dict(self.image_url or {})}
        return {"type": "text", "text": self.text or ""}


@dataclass
class ChatMessage:
    """A single message in a chat conversation.

    Content can be a plain string (text-only) or a list of ContentPart
    objects for multimodal input (text + images).
    """

    role: str  # "system" | "user" | "assistant"
    content: str | list[ContentPart] = ""

    def to_dict(self) -> dict[str, Any]:
        if isinstance(self.content, str):
            return {"role": self.role, "content": self.content}
        return {"role": self.role, "content": [part.to_dict() for part in self.content]}


@dataclass
class WebPlugin:
    """Directive asking OpenRouter to augment generation with web results."""

    max_results: int
    search_prompt: str
    id: str = "web"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "max_results": self.max_results,
            "search_prompt": self.search_prompt,
        }


@dataclass
class CompletionRequest:
    """Everything sent to the completion endpoint for one call."""

    model: str
    messages: list[ChatMessage]
    temperature: float
    plugins: list[WebPlugin] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body expected by ``/chat/completions``."""
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
        }
        if self.plugins is not None:
            payload["plugins"] = [p.to_dict() for p in self.plugins]
        return payload

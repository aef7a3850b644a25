"""Pydantic v2 schemas for client configuration and per-call options.

The stored ``ClientConfig`` is produced once by ``merge_config`` from the
caller's partial ``ClientOptions`` and the ``ClientDefaults`` record, then
never mutated. Per-call option records only shadow fields for one call.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hens_ai.domain.entities import ChatTurn

DEFAULT_VISION_MODEL = "anthropic/claude-3.5-sonnet"
DEFAULT_IMAGE_PROMPT = "Describe this image"


@dataclass(frozen=True)
class ClientDefaults:
    """Values used for every ClientConfig field the caller leaves unset."""

    model: str = "deepseek/deepseek-chat:free"
    temperature: float = 1.0
    web_search: bool = False
    max_web_results: int = 5
    system_message: str = "You are an AI assistant that helps answer questions."
    enable_history: bool = False


DEFAULTS = ClientDefaults()


# ── Stored configuration ──


class ClientConfig(BaseModel):
    """Fully-populated, immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., repr=False, description="OpenRouter API key (secret)")
    model: str
    temperature: float = Field(..., ge=0.0, le=2.0, description="Sampling temperature")
    web_search: bool
    max_web_results: int = Field(..., ge=0)
    system_message: str
    enable_history: bool


class ClientOptions(BaseModel):
    """Caller-supplied partial configuration; ``None`` means 'use the default'."""

    api_key: str = Field(..., repr=False)
    model: str | None = None
    temperature: float | None = None
    web_search: bool | None = None
    max_web_results: int | None = None
    system_message: str | None = None
    enable_history: bool | None = None


def _pick(value: Any, default: Any) -> Any:
    return default if value is None else value


def merge_config(
    overrides: ClientOptions, defaults: ClientDefaults = DEFAULTS
) -> ClientConfig:
    """Resolve every field from ``overrides`` when set, else from ``defaults``.

    Raises:
        pydantic.ValidationError: If a resolved value is out of range.
    """
    return ClientConfig(
        api_key=overrides.api_key,
        model=_pick(overrides.model, defaults.model),
        temperature=_pick(overrides.temperature, defaults.temperature),
        web_search=_pick(overrides.web_search, defaults.web_search),
        max_web_results=_pick(overrides.max_web_results, defaults.max_web_results),
        system_message=_pick(overrides.system_message, defaults.system_message),
        enable_history=_pick(overrides.enable_history, defaults.enable_history),
    )


# ── Per-call options ──


class TextResponseOptions(BaseModel):
    """Overrides accepted by ``CompletionClient.text_response`` for one call."""

    model_config = ConfigDict(extra="forbid")

    system_message: str | None = None
    chat_history: list[ChatTurn] | None = None
    web_search: bool | None = None
    enable_history: bool | None = None


class ImageAnalysisOptions(BaseModel):
    """Normalized options for ``CompletionClient.image_analysis``."""

    model_config = ConfigDict(extra="forbid")

    model: str = DEFAULT_VISION_MODEL
    prompt: str = DEFAULT_IMAGE_PROMPT
    temperature: float = Field(default=1.0, ge=0.0, le=2.0)


ImageOptionsInput = str | ImageAnalysisOptions | Mapping[str, Any] | None


def normalize_image_options(options: ImageOptionsInput) -> ImageAnalysisOptions:
    """Collapse the accepted option shapes into one ImageAnalysisOptions.

    A bare string is the prompt. Mapping entries set to ``None`` fall back to
    the defaults, the same as leaving them out.
    """
    if options is None:
        return ImageAnalysisOptions()
    if isinstance(options, str):
        return ImageAnalysisOptions(prompt=options)
    if isinstance(options, ImageAnalysisOptions):
        return options
    if isinstance(options, Mapping):
        return ImageAnalysisOptions.model_validate(
            {
                k: v
                for k, v in options.items()
                if v is not None or k not in ImageAnalysisOptions.model_fields
            }
        )
    raise TypeError(
        f"image options must be a str, mapping or ImageAnalysisOptions, got {type(options).__name__}"
    )

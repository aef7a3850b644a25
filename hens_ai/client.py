"""Public client facade — text completion and image analysis over OpenRouter.

Usage:
    ai = CompletionClient(api_key="sk-or-v1-...", web_search=True)
    answer = await ai.text_response("What is the capital of Indonesia?")
    caption = await ai.image_analysis("https://example.com/cat.jpg", "What is happening here?")
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from hens_ai.application.interfaces.chat_provider import ChatProvider
from hens_ai.application.schemas.options import (
    ClientConfig,
    ClientOptions,
    ImageOptionsInput,
    TextResponseOptions,
    merge_config,
    normalize_image_options,
)
from hens_ai.application.services.message_builder import (
    build_conversation,
    build_image_message,
    build_web_plugin,
    resolve_model,
)
from hens_ai.config import Settings
from hens_ai.domain.entities import CompletionRequest
from hens_ai.infrastructure.openrouter import OpenRouterClient

logger = logging.getLogger(__name__)


class CompletionClient:
    """Formats chat requests, sends them through a ChatProvider and returns text.

    The merged configuration is frozen at construction. Per-call options
    shadow individual fields for that call only, so one instance can be
    shared by concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        *,
        model: str | None = None,
        temperature: float | None = None,
        web_search: bool | None = None,
        max_web_results: int | None = None,
        system_message: str | None = None,
        enable_history: bool | None = None,
        provider: ChatProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._config = merge_config(
            ClientOptions(
                api_key=api_key,
                model=model,
                temperature=temperature,
                web_search=web_search,
                max_web_results=max_web_results,
                system_message=system_message,
                enable_history=enable_history,
            )
        )
        self._provider = provider or OpenRouterClient(
            api_key=self._config.api_key, http_client=http_client
        )

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> "CompletionClient":
        """Build a client from startup settings; keyword overrides win.

        Raises:
            ValueError: If both ``provider`` and ``http_client`` are given.
        """
        options: dict[str, Any] = {
            "model": settings.default_model,
            "system_message": settings.default_system_message,
            "web_search": settings.web_search,
            "enable_history": settings.enable_history,
        }
        options.update(overrides)
        api_key = options.pop("api_key", settings.openrouter_api_key)
        http_client = options.pop("http_client", None)

        if options.get("provider") is None:
            options["provider"] = OpenRouterClient(
                api_key=api_key,
                base_url=settings.openrouter_base_url,
                referer=settings.openrouter_referer,
                app_name=settings.openrouter_app_name,
                timeout=settings.openrouter_timeout,
                http_client=http_client,
            )
        elif http_client is not None:
            raise ValueError("pass either provider or http_client, not both")
        return cls(api_key, **options)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def provider(self) -> ChatProvider:
        return self._provider

    async def text_response(
        self,
        prompt: str,
        options: TextResponseOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> str:
        """Answer ``prompt`` in the context of the system message and history.

        Args:
            prompt: The user's current question.
            options: Per-call overrides for system_message, chat_history,
                web_search and enable_history. Keyword arguments are merged
                on top.

        Raises:
            CompletionError: If the request fails.
        """
        opts = _resolve_text_options(options, overrides)
        config = self._config

        include_history = (
            opts.enable_history if opts.enable_history is not None else config.enable_history
        )
        # An empty per-call system message falls back to the stored one.
        system_message = opts.system_message or config.system_message

        request = CompletionRequest(
            # The per-call flag only switches the model; the stored flag only adds the plugin.
            model=resolve_model(config.model, bool(opts.web_search)),
            messages=build_conversation(
                system_message,
                opts.chat_history,
                prompt,
                include_history=include_history,
            ),
            temperature=config.temperature,
            plugins=[build_web_plugin(config.max_web_results)] if config.web_search else None,
        )
        logger.debug(
            "text_response model=%s history=%s", request.model, include_history
        )
        return await self._provider.complete(request)

    async def image_analysis(
        self,
        image_url: str,
        options: ImageOptionsInput = None,
    ) -> str:
        """Describe the image at ``image_url``.

        ``options`` may be a bare prompt string, an ImageAnalysisOptions or a
        mapping of its fields. The stored system message, history and
        web-search settings are never applied.

        Raises:
            CompletionError: If the request fails.
        """
        opts = normalize_image_options(options)
        request = CompletionRequest(
            model=opts.model,
            messages=[build_image_message(image_url, opts.prompt)],
            temperature=opts.temperature,
        )
        logger.debug("image_analysis model=%s", request.model)
        return await self._provider.complete(request)


def _resolve_text_options(
    options: TextResponseOptions | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> TextResponseOptions:
    if options is None and not overrides:
        return TextResponseOptions()
    if isinstance(options, TextResponseOptions):
        if not overrides:
            return options
        base = options.model_dump(exclude_unset=True)
    else:
        base = dict(options or {})
    base.update(overrides)
    return TextResponseOptions.model_validate(base)

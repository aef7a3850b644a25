"""OpenRouter API client — implements the ChatProvider interface.

Sends one non-streaming chat completion to the OpenRouter API
(https://openrouter.ai/api/v1) per call using httpx, and reduces the
response to the first choice's message content.
"""

import logging

import httpx

from hens_ai.application.interfaces.chat_provider import ChatProvider
from hens_ai.domain.entities import CompletionRequest
from hens_ai.domain.exceptions import CompletionError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_REFERER = "https://henotic.space"
DEFAULT_APP_NAME = "Henotic Technology"

GENERIC_FAILURE_MESSAGE = "Failed to process the request"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class OpenRouterClient(ChatProvider):
    """Infrastructure adapter — connects to the OpenRouter API.

    An injected ``httpx.AsyncClient`` is reused and left open for its owner;
    otherwise a client is created and closed around every call. ``timeout``
    defaults to ``None``, so a stalled connection blocks until the transport
    gives up.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        referer: str = DEFAULT_REFERER,
        app_name: str = DEFAULT_APP_NAME,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._referer = referer
        self._app_name = app_name
        self._timeout = timeout
        self._http_client = http_client

    @property
    def provider_name(self) -> str:
        return "openrouter"

    def _get_headers(self) -> dict[str, str]:
        """Standard headers for OpenRouter requests."""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "HTTP-Referer": self._referer,
            "X-Title": self._app_name,
            "Content-Type": "application/json",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def complete(self, request: CompletionRequest) -> str:
        """Send a non-streaming chat completion to OpenRouter."""
        payload = request.to_payload()
        url = f"{self._base_url}/chat/completions"
        logger.debug(
            "POST %s model=%s messages=%d plugins=%s",
            url,
            request.model,
            len(request.messages),
            "yes" if request.plugins else "no",
        )

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(
                    url, headers=self._get_headers(), json=payload
                )
            except httpx.HTTPError as exc:
                raise CompletionError(
                    str(exc) or UNEXPECTED_ERROR_MESSAGE,
                    code=CompletionError.NETWORK_ERROR,
                ) from exc

            if not response.is_success:
                self._raise_provider_error(response)

            return self._parse_completion_response(response)

        except CompletionError as exc:
            logger.error("[OpenRouter Error] %s (code=%s)", exc.message, exc.code)
            raise

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_completion_response(response: httpx.Response) -> str:
        """Extract ``choices[0].message.content`` from a successful response."""
        try:
            data = response.json()
        except ValueError as exc:
            raise CompletionError(
                "OpenRouter returned a response that is not valid JSON",
                code=CompletionError.RESPONSE_ERROR,
                status_code=response.status_code,
            ) from exc

        choices = data.get("choices") if isinstance(data, dict) else None
        if isinstance(choices, list) and not choices:
            raise CompletionError(
                "No choices in response",
                code=CompletionError.RESPONSE_ERROR,
                status_code=response.status_code,
            )

        message = None
        if isinstance(choices, list) and isinstance(choices[0], dict):
            message = choices[0].get("message")
        content = message.get("content") if isinstance(message, dict) else None

        if not isinstance(message, dict) or not isinstance(content, (str, type(None))):
            raise CompletionError(
                "OpenRouter returned an unexpected response shape",
                code=CompletionError.RESPONSE_ERROR,
                status_code=response.status_code,
            )
        return content or ""

    @staticmethod
    def _raise_provider_error(response: httpx.Response) -> None:
        """Raise CompletionError from a non-2xx httpx Response."""
        try:
            error = response.json().get("error") or {}
            message = error.get("message")
        except (ValueError, AttributeError):
            message = None

        if not isinstance(message, str) or not message:
            message = GENERIC_FAILURE_MESSAGE

        raise CompletionError(
            message,
            code=CompletionError.API_ERROR,
            status_code=response.status_code,
        )

"""Abstract chat provider interface — port for the request sender.

The client facade builds a CompletionRequest and hands it to a ChatProvider.
OpenRouterClient is the production adapter; tests substitute in-memory fakes.
"""

from abc import ABC, abstractmethod

from hens_ai.domain.entities import CompletionRequest


class ChatProvider(ABC):
    """Port — defines what the client needs from a completion backend."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'openrouter')."""
        ...

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> str:
        """Send a non-streaming chat completion request.

        Args:
            request: Model, messages, temperature and optional plugins.

        Returns:
            The content of the first response choice.

        Raises:
            CompletionError: If the request fails for any reason.
        """
        ...

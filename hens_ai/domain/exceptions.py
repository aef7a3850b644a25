"""Domain-specific exceptions — framework-independent."""


class CompletionError(Exception):
    """Raised when a completion request cannot produce a response.

    Network failures, non-2xx responses and undecodable bodies all surface
    as this single type. ``message`` is always human-readable; ``code``
    tells the three failure paths apart.
    """

    NETWORK_ERROR = "NETWORK_ERROR"
    API_ERROR = "API_ERROR"
    RESPONSE_ERROR = "RESPONSE_ERROR"

    def __init__(self, message: str, *, code: str, status_code: int | None = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)

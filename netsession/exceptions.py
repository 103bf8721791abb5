"""Public exceptions for netsession."""


class NetworkSessionError(Exception):
    """Base exception for all netsession errors."""


class NetworkSessionConfigError(NetworkSessionError):
    """Configuration error (missing env vars, invalid config)."""


class MalformedURLError(NetworkSessionError):
    """Endpoint or base URL cannot be turned into an absolute URL."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(NetworkSessionError):
    """Connection, timeout, TLS or other network-layer failure.

    The underlying httpx exception is available as ``__cause__``.
    """


class DecodeError(NetworkSessionError):
    """Response body is not JSON or does not match the expected model."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

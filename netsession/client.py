"""Network session: sends requests and decodes their responses."""

import asyncio
import concurrent.futures
import os
from collections.abc import Callable
from typing import Any

import httpx

from netsession._internal.debug import log_debug
from netsession._internal.decoding import NetworkResponseData, decode_response
from netsession._internal.http import (
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_RESOURCE_TIMEOUT,
    create_http_client,
)
from netsession._internal.resolver import ResolvedRequest, parse_base_url, resolve_request
from netsession._internal.scheduling import get_default_loop
from netsession.exceptions import (
    DecodeError,
    NetworkSessionConfigError,
    TransportError,
)
from netsession.models.request import Request, ResponseT

Completion = Callable[[Any, BaseException | None], None]


class NetworkSession:
    """Client for a JSON HTTP API rooted at a fixed base URL.

    Each call resolves a ``Request`` against the base URL, sends it once and
    decodes the body into the request's ``response_type``. There are no
    retries; every failure is final for that call.

    Use ``await session.send(request)`` from async code, or
    ``session.send_request(request, completion)`` for callback delivery.
    """

    def __init__(
        self,
        base_url: str,
        *,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        resource_timeout: float = DEFAULT_RESOURCE_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the session.

        Args:
            base_url: Absolute URL that request endpoints resolve against.
            request_timeout: Per-operation timeout in seconds.
            resource_timeout: Total time allowed for one exchange, in seconds.
            transport: Optional httpx transport override. It is closed with
                the per-request client, so it must be reusable after close,
                like httpx.MockTransport.
            debug: Enable debug logging to stderr.

        Raises:
            MalformedURLError: If ``base_url`` is not a valid absolute URL.
        """
        self._base_url = parse_base_url(base_url)
        self._request_timeout = request_timeout
        self._resource_timeout = resource_timeout
        self._transport = transport
        self._debug = debug

    @classmethod
    def from_env(cls) -> "NetworkSession":
        """Create a session from environment variables.

        Required environment variables:
            NETSESSION_BASE_URL: The API base URL.

        Optional environment variables:
            NETSESSION_REQUEST_TIMEOUT: Per-operation timeout in seconds.
            NETSESSION_RESOURCE_TIMEOUT: Total exchange timeout in seconds.
            NETSESSION_DEBUG: Set to "1" to enable debug logging.

        Returns:
            A configured NetworkSession.

        Raises:
            NetworkSessionConfigError: If NETSESSION_BASE_URL is missing.
            ValueError: If a timeout is not a valid number.
        """
        base_url = os.environ.get("NETSESSION_BASE_URL")
        if not base_url:
            raise NetworkSessionConfigError("NETSESSION_BASE_URL is not set")

        request_timeout = float(
            os.environ.get("NETSESSION_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))
        )
        resource_timeout = float(
            os.environ.get("NETSESSION_RESOURCE_TIMEOUT", str(DEFAULT_RESOURCE_TIMEOUT))
        )
        debug = os.environ.get("NETSESSION_DEBUG", "") == "1"

        return cls(
            base_url,
            request_timeout=request_timeout,
            resource_timeout=resource_timeout,
            debug=debug,
        )

    @property
    def base_url(self) -> str:
        """The base URL requests resolve against."""
        return str(self._base_url)

    async def send(self, request: Request[ResponseT]) -> ResponseT:
        """Send a request and decode its response.

        Args:
            request: The logical request to send.

        Returns:
            The decoded response model.

        Raises:
            MalformedURLError: If the URL cannot be resolved (nothing is sent).
            TransportError: On connection, TLS or timeout failures.
            DecodeError: If the body does not decode into the response type.
        """
        resolved = resolve_request(request, self._base_url, debug=self._debug)
        response = await self._perform(resolved)
        return self._process_response_data(response, request)

    def send_request(
        self,
        request: Request[ResponseT],
        completion: Completion,
    ) -> "asyncio.Task[None] | concurrent.futures.Future[None]":
        """Send a request and report the outcome through a callback.

        Returns immediately. ``completion(result, error)`` is called once,
        with exactly one of the two set, on the caller's running event loop.
        Errors that are not ``NetworkSessionError`` are delivered as-is.
        Without a running loop it is called on the default loop thread.

        Args:
            request: The logical request to send.
            completion: Callback receiving ``(result, error)``.

        Returns:
            A task or future for the call; cancelling it skips ``completion``.
            Keep a reference to the returned task until it finishes: the
            event loop only holds a weak reference to it.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        async def run() -> None:
            try:
                result = await self.send(request)
            except Exception as e:
                completion(None, e)
            else:
                completion(result, None)

        if loop is not None:
            return loop.create_task(run())
        return asyncio.run_coroutine_threadsafe(run(), get_default_loop())

    async def _perform(self, resolved: ResolvedRequest) -> NetworkResponseData:
        """Run one exchange, capturing transport failures instead of raising."""
        log_debug(f"Sending {resolved.method} {resolved.url}", enabled=self._debug)
        try:
            async with asyncio.timeout(self._resource_timeout):
                async with create_http_client(
                    timeout=self._request_timeout, transport=self._transport
                ) as client:
                    response = await client.request(
                        resolved.method,
                        resolved.url,
                        content=resolved.body,
                        headers=resolved.headers,
                    )
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError, TimeoutError) as e:
            # Header values httpx cannot encode fail here, before anything is sent
            return NetworkResponseData(error=e)
        return NetworkResponseData(data=response.content, status_code=response.status_code)

    def _process_response_data(
        self, response: NetworkResponseData, request: Request[ResponseT]
    ) -> ResponseT:
        error = response.error
        if error is not None:
            log_debug(f"Network request failed with error: {error!r}", enabled=self._debug)
            raise TransportError(
                f"Network request failed: {type(error).__name__}: {error}"
            ) from error

        try:
            return decode_response(request.response_type, response)
        except DecodeError as e:
            log_debug(f"Decoding failed: {e}", enabled=self._debug)
            raise

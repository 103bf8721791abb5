"""Turn logical requests into transport-ready requests."""

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict

from netsession._internal.debug import log_debug
from netsession.exceptions import MalformedURLError
from netsession.models.request import Get, HttpMethod, Post, Put, Request

DEFAULT_CONTENT_TYPE = "application/json"


class ResolvedRequest(BaseModel):
    """A fully-formed request, ready to hand to the transport."""

    url: str
    method: str
    body: bytes | None = None
    headers: dict[str, str]

    model_config = ConfigDict(frozen=True)


def parse_base_url(base_url: str) -> httpx.URL:
    """Parse and validate a session base URL.

    Raises:
        MalformedURLError: If the URL is unparseable or not absolute.
    """
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise MalformedURLError(f"Invalid base URL: {e}", url=base_url) from e
    if not url.is_absolute_url:
        raise MalformedURLError("Base URL must be absolute", url=base_url)
    return url


def complete_url(request: Request[Any], base_url: httpx.URL) -> str:
    """Resolve the request endpoint against the base URL.

    GET query items replace any query already present in the endpoint.

    Raises:
        MalformedURLError: If the endpoint cannot be parsed or the result
            is not an absolute URL.
    """
    try:
        url = httpx.URL(request.endpoint)
        if isinstance(request.method, Get):
            url = url.copy_with(params=request.method.query_items or None)
        resolved = base_url.join(url)
    except httpx.InvalidURL as e:
        raise MalformedURLError(f"Invalid endpoint: {e}", url=request.endpoint) from e

    if not resolved.is_absolute_url:
        raise MalformedURLError("Resolved URL is not absolute", url=str(resolved))
    return str(resolved)


def method_name_and_body(method: HttpMethod) -> tuple[str, bytes | None]:
    """Map a method variant to its HTTP verb and body."""
    match method:
        case Get():
            return "GET", None
        case Post(body=body):
            return "POST", body
        case Put(body=body):
            return "PUT", body
    raise TypeError(f"Unsupported HTTP method: {method!r}")


def resolve_headers(headers: dict[str, str] | None, *, debug: bool = False) -> dict[str, str]:
    """Apply caller headers, defaulting Content-Type to JSON when absent."""
    resolved = dict(headers) if headers else {}

    content_type = next(
        (value for key, value in resolved.items() if key.lower() == "content-type"),
        None,
    )
    if content_type is not None:
        log_debug(f"Using request's value: Content-Type: {content_type}", enabled=debug)
    else:
        log_debug(f"Defaulting request to Content-Type: {DEFAULT_CONTENT_TYPE}", enabled=debug)
        resolved["Content-Type"] = DEFAULT_CONTENT_TYPE
    return resolved


def resolve_request(
    request: Request[Any], base_url: httpx.URL, *, debug: bool = False
) -> ResolvedRequest:
    """Build a ResolvedRequest from a logical request.

    Pure and synchronous: no network I/O happens here.

    Args:
        request: The logical request.
        base_url: Absolute URL the endpoint is resolved against.
        debug: Log header decisions to stderr.

    Returns:
        The transport-ready request.

    Raises:
        MalformedURLError: If the URL cannot be resolved.
    """
    url = complete_url(request, base_url)
    name, body = method_name_and_body(request.method)
    return ResolvedRequest(
        url=url,
        method=name,
        body=body,
        headers=resolve_headers(request.headers, debug=debug),
    )

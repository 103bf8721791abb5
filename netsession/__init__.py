"""netsession: a thin typed client for JSON HTTP APIs.

Public API:
    NetworkSession - Sends requests and decodes responses
    Request, Get, Post, Put - Request description
    Response - Base model for decoded bodies
    MultipartFormValueParameter, MultipartFormFileParameter - Upload parts

Internal (not for direct use):
    _internal - URL resolution, multipart encoding, decoding, HTTP config
"""

from netsession._version import __version__
from netsession.client import NetworkSession
from netsession.exceptions import (
    DecodeError,
    MalformedURLError,
    NetworkSessionConfigError,
    NetworkSessionError,
    TransportError,
)
from netsession.models import (
    Get,
    HeadersDict,
    HttpMethod,
    MultipartFormFileParameter,
    MultipartFormValueParameter,
    Post,
    Put,
    Request,
    Response,
)

__all__ = [
    "__version__",
    "NetworkSession",
    "Request",
    "Response",
    "Get",
    "Post",
    "Put",
    "HttpMethod",
    "HeadersDict",
    "MultipartFormValueParameter",
    "MultipartFormFileParameter",
    "NetworkSessionError",
    "NetworkSessionConfigError",
    "MalformedURLError",
    "TransportError",
    "DecodeError",
]

"""Public models for netsession."""

from netsession.models.multipart import (
    MultipartFormFileParameter,
    MultipartFormValueParameter,
)
from netsession.models.request import (
    Get,
    HeadersDict,
    HttpMethod,
    Post,
    Put,
    Request,
    ResponseT,
)
from netsession.models.response import Response

__all__ = [
    "Get",
    "Post",
    "Put",
    "HttpMethod",
    "HeadersDict",
    "Request",
    "ResponseT",
    "Response",
    "MultipartFormValueParameter",
    "MultipartFormFileParameter",
]

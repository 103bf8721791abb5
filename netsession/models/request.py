"""Request protocol and HTTP method variants."""

from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from netsession._internal.multipart import encode_multipart_form_data
from netsession.models.multipart import (
    MultipartFormFileParameter,
    MultipartFormValueParameter,
)
from netsession.models.response import Response

HeadersDict = dict[str, str]

ResponseT = TypeVar("ResponseT", bound=Response)


# =============================================================================
# HTTP Methods
# =============================================================================


class Get(BaseModel):
    """GET with optional query items, sent in the given order."""

    query_items: list[tuple[str, str]] | None = None

    model_config = ConfigDict(frozen=True)


class Post(BaseModel):
    """POST with an optional raw body."""

    body: bytes | None = None

    model_config = ConfigDict(frozen=True)


class Put(BaseModel):
    """PUT with an optional raw body."""

    body: bytes | None = None

    model_config = ConfigDict(frozen=True)


HttpMethod = Get | Post | Put


# =============================================================================
# Request
# =============================================================================


class Request(Generic[ResponseT]):
    """A logical API request.

    Subclasses provide ``method``, ``endpoint`` and optionally ``headers``,
    either as fields or as properties, and set ``response_type`` to the
    ``Response`` model the body decodes into. Requests should be immutable;
    a frozen dataclass is the usual shape.

    Example:
        @dataclass(frozen=True)
        class GetUser(Request[User]):
            response_type = User

            user_id: int

            @property
            def method(self) -> HttpMethod:
                return Get()

            @property
            def endpoint(self) -> str:
                return f"/users/{self.user_id}"
    """

    response_type: ClassVar[type[Response]]

    method: HttpMethod
    endpoint: str
    headers: HeadersDict | None = None

    def multipart_form_data(
        self,
        file: MultipartFormFileParameter | None = None,
        params: list[MultipartFormValueParameter] | None = None,
    ) -> tuple[bytes, HeadersDict]:
        """Encode a multipart/form-data body on top of this request's headers.

        Args:
            file: Optional file attachment, read from disk now.
            params: Optional form fields, encoded in order.

        Returns:
            The body bytes and the merged headers to send with it.

        Raises:
            OSError: If the file cannot be read.
        """
        return encode_multipart_form_data(file, params, headers=self.headers)

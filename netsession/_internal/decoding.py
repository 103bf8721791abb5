"""Response decoding."""

from pydantic import BaseModel, ConfigDict, ValidationError

from netsession.exceptions import DecodeError
from netsession.models.request import ResponseT


class NetworkResponseData(BaseModel):
    """Raw outcome of one transport exchange."""

    data: bytes | None = None
    status_code: int | None = None
    error: BaseException | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def decode_response(response_type: type[ResponseT], response: NetworkResponseData) -> ResponseT:
    """Decode a response body into the given model.

    Raises:
        DecodeError: If there is no body, or it is not valid JSON for the model.
    """
    if not response.data:
        raise DecodeError(
            "Response has no body to decode",
            status_code=response.status_code,
            body=response.data,
        )
    try:
        return response_type.model_validate_json(response.data)
    except ValidationError as e:
        raise DecodeError(
            f"Failed to decode {response_type.__name__}: {e}",
            status_code=response.status_code,
            body=response.data,
        ) from e

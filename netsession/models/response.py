"""Base model for decoded JSON responses."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_snake


class Response(BaseModel):
    """Decode shape for a JSON response body.

    Subclasses declare their fields in either camelCase or snake_case; JSON
    keys are expected in snake_case (``user_id`` fills ``userId``). Numeric
    values for ``datetime`` fields, including those inside lists and dicts,
    are milliseconds since the Unix epoch.

    Example:
        class User(Response):
            userId: int
            createdAt: datetime

        User.model_validate_json(b'{"user_id": 7, "created_at": 1000}')
    """

    model_config = ConfigDict(
        alias_generator=to_snake,
        populate_by_name=True,
        val_temporal_unit="milliseconds",
    )

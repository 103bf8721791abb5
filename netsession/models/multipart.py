"""Multipart form-data parameter models."""

from pathlib import Path
from urllib.parse import unquote, urlparse

from pydantic import BaseModel, ConfigDict, field_validator


class MultipartFormValueParameter(BaseModel):
    """A plain form field."""

    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class MultipartFormFileParameter(BaseModel):
    """A single file attachment.

    Only the location is stored; the file contents are read when the body is
    encoded. ``path`` accepts a filesystem path or a ``file://`` URI.
    """

    name: str
    path: Path
    content_type: str

    model_config = ConfigDict(frozen=True)

    @field_validator("path", mode="before")
    @classmethod
    def path_from_file_uri(cls, v: object) -> object:
        if isinstance(v, str) and v.startswith("file://"):
            return Path(unquote(urlparse(v).path))
        return v

    @property
    def filename(self) -> str:
        """Last path component, sent as the part's ``filename``."""
        return self.path.name

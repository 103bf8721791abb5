"""multipart/form-data body encoding.

Wire format follows HTML 4.01 section 17.13.4.2:
https://www.w3.org/TR/html401/interact/forms.html#h-17.13.4.2
"""

from __future__ import annotations

import random
import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from netsession.models.multipart import (
        MultipartFormFileParameter,
        MultipartFormValueParameter,
    )

BOUNDARY_LENGTH = 16
BOUNDARY_ALPHABET = string.ascii_letters


def random_boundary(length: int = BOUNDARY_LENGTH) -> str:
    """Generate a boundary token of ASCII letters."""
    return "".join(random.choices(BOUNDARY_ALPHABET, k=length))


def encode_multipart_form_data(
    file: MultipartFormFileParameter | None = None,
    params: list[MultipartFormValueParameter] | None = None,
    *,
    headers: dict[str, str] | None = None,
) -> tuple[bytes, dict[str, str]]:
    """Build a multipart/form-data body and the headers describing it.

    The caller's headers are copied, never mutated. ``Content-Type`` is
    always replaced since the body is framed by the generated boundary.

    Args:
        file: Optional file attachment; its bytes are read here.
        params: Optional form fields, emitted in order before the file.
        headers: Existing request headers to merge into.

    Returns:
        Tuple of (body bytes, merged headers).

    Raises:
        OSError: If the file cannot be read.
    """
    boundary = random_boundary()
    content_type = f"multipart/form-data; boundary={boundary}"

    merged = dict(headers) if headers else {}
    merged["Content-Type"] = content_type
    merged["Cache-Control"] = "no-cache"

    # The leading Content-Type block is part of the legacy wire format
    head = f"Content-Type: {content_type}\r\n\r\n"

    for param in params or []:
        head += f"--{boundary}\r\n"
        head += f'Content-Disposition: form-data; name="{param.name}"\r\n\r\n'
        head += f"{param.value}\r\n"

    contents = b""
    if file is not None:
        head += f"--{boundary}\r\n"
        head += (
            f'Content-Disposition: form-data; name="{file.name}"; '
            f'filename="{file.filename}"\r\n'
        )
        head += f"Content-Type: {file.content_type}\r\n\r\n"
        contents = file.path.read_bytes()

    foot = f"\r\n--{boundary}--"

    return head.encode("utf-8") + contents + foot.encode("utf-8"), merged

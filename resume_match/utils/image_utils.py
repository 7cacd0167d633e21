"""Helpers for moving uploaded images through base64 data URIs."""

import base64
import binascii
import re
from typing import Optional, Tuple

from resume_match.constants.config_constants import ConfigConstants

_DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^,]*)?),(?P<data>.*)$", re.DOTALL)


def is_image_mime_type(mime_type: Optional[str]) -> bool:
    """Check whether a declared MIME type names an image."""
    return bool(mime_type) and mime_type.lower().startswith("image/")


def encode_data_uri(content: bytes, mime_type: str) -> str:
    """Encode raw file bytes as a base64 data URI."""
    payload = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def split_data_uri(data_uri: str) -> Tuple[str, bytes]:
    """Split a base64 data URI into its MIME type and decoded bytes.

    Args:
        data_uri: A string of the form ``data:<mime>;base64,<payload>``

    Returns:
        Tuple of (mime_type, raw bytes). The MIME type defaults to
        ``image/jpeg`` when the URI does not declare one.

    Raises:
        ValueError: If the string is not a base64 data URI
    """
    match = _DATA_URI_PATTERN.match(data_uri or "")
    if not match or ";base64" not in match.group("params"):
        raise ValueError("Image is not a base64 data URI")

    mime_type = match.group("mime") or ConfigConstants.DEFAULT_IMAGE_MIME_TYPE
    try:
        content = base64.b64decode(match.group("data"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Image payload is not valid base64: {e}") from e
    return mime_type, content

"""
Checks for uploaded images (plant and post photos).

``validate_image`` works with Starlette's ``UploadFile`` or anything exposing
``content_type`` and ``size``.
"""

import os
from typing import Any, Optional

from plantcare.validation.result import Ok, Result, invalid

ALLOWED_IMAGE_TYPES = frozenset({"image/jpeg", "image/png", "image/webp", "image/gif"})
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
MAX_IMAGE_SIZE = 5 * 1024 * 1024


def _file_size(file: Any) -> Optional[int]:
    """Declared size, else the length of the underlying stream; None when neither is usable."""
    size = getattr(file, "size", None)
    if size is not None:
        if isinstance(size, bool) or not isinstance(size, int):
            return None
        return size
    stream = getattr(file, "file", None)
    if stream is None or not hasattr(stream, "seek"):
        return None
    try:
        position = stream.tell()
        stream.seek(0, os.SEEK_END)
        size = stream.tell()
        stream.seek(position)
    except (OSError, ValueError):
        return None
    return size


def validate_image(file: Any) -> Result[Any]:
    """Return the same file object wrapped in ``Ok`` when it is an acceptable image."""
    if not file:
        return invalid("No file provided")

    if getattr(file, "content_type", None) not in ALLOWED_IMAGE_TYPES:
        return invalid("Only JPEG, PNG, WebP and GIF images are allowed")

    size = _file_size(file)
    if size is None or size > MAX_IMAGE_SIZE:
        return invalid("File size must be less than 5MB")

    return Ok(file)


def validate_file_extension(filename: str) -> bool:
    """Extension allow-list used by the upload form. GIF is not offered there."""
    _, extension = os.path.splitext(filename)
    return extension.lower() in ALLOWED_IMAGE_EXTENSIONS

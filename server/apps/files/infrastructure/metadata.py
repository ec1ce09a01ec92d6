"""Metadata helpers for uploaded files."""

import mimetypes
from typing import Final

_DEFAULT_MIME_TYPE: Final = 'application/octet-stream'


def detect_mime_type(filename: str, declared: str | None = None) -> str:
    """Resolve the MIME type recorded for an upload.

    The content type declared by the client wins. Without one, the type
    is guessed from the filename extension.

    Args:
        filename: Uploaded filename with extension.
        declared: Content type sent by the client, if any.

    Returns:
        MIME type string (e.g., 'image/jpeg', 'application/pdf').
        Returns 'application/octet-stream' if type cannot be determined.
    """
    if declared:
        return declared
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type is None:
        return _DEFAULT_MIME_TYPE
    return mime_type


def content_disposition(filename: str) -> str:
    """Build an inline Content-Disposition header value.

    Args:
        filename: Name to present to the client.

    Returns:
        Header value, e.g. 'inline; filename="report.pdf"'.
    """
    escaped = filename.replace('\\', '\\\\').replace('"', r'\"')
    return f'inline; filename="{escaped}"'

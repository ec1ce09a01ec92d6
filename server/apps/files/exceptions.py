"""Exceptions for files app.

Every failure of the ingest and retrieval pipelines is raised as a
``FileTransferError`` subclass. The HTTP layer turns them into a JSON
``{message}`` body with the subclass' ``status_code``.
"""

from http import HTTPStatus
from typing import ClassVar


class FileTransferError(Exception):
    """Base error for the packed files pipelines."""

    status_code: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        """Initialize FileTransferError.

        Args:
            message: Human-readable description, safe to show to clients.
        """
        self.message = message
        super().__init__(message)


class ValidationError(FileTransferError):
    """Raised when request input is missing or malformed."""

    status_code = HTTPStatus.BAD_REQUEST


class NotFoundError(FileTransferError):
    """Raised when no stored file matches the requested name."""

    status_code = HTTPStatus.NOT_FOUND


class FramingError(FileTransferError):
    """Raised when a stored blob is shorter than its prefix and suffix."""


class DecompressionError(FileTransferError):
    """Raised when a compressed payload is malformed or truncated."""


class StoreError(FileTransferError):
    """Raised when the underlying persistence layer fails."""


def as_transfer_error(error: Exception) -> FileTransferError:
    """Normalize any exception into a FileTransferError.

    Args:
        error: Exception raised while handling a request.

    Returns:
        The error itself if it already is a FileTransferError, otherwise
        a generic one carrying the error's message.
    """
    if isinstance(error, FileTransferError):
        return error
    return FileTransferError(str(error) or 'Unknown error')

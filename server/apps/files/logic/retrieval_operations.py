"""Business logic for reading stored files back."""

import logging
from dataclasses import dataclass

from server.apps.files.exceptions import NotFoundError
from server.apps.files.infrastructure import compression, framing
from server.apps.files.infrastructure.store import FileMetadata, FileStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RetrievedFile:
    """Restored file content with its recorded content type."""

    content: bytes
    mime_type: str


def restore_content(framed: bytes) -> bytes:
    """Strip framing and decompress a stored blob.

    Args:
        framed: Framed blob as persisted.

    Returns:
        Original uploaded bytes.

    Raises:
        FramingError: If the blob is shorter than its padding.
        DecompressionError: If the payload is not a valid gzip stream.
    """
    compressed = framing.decode(framed)
    return compression.decompress(compressed)


def retrieve_file(store: FileStore, filename: str) -> RetrievedFile:
    """Load a stored file by name and restore its original content.

    Every call re-reads the store; nothing is cached.

    Args:
        store: Store gateway to read from.
        filename: Name the file was uploaded with.

    Returns:
        RetrievedFile with the original bytes and MIME type.

    Raises:
        NotFoundError: If no record has this name.
        FramingError: If the stored blob is too short.
        DecompressionError: If the stored payload is corrupt.
        StoreError: If the store read fails.
    """
    stored_file = store.find_by_name(filename)
    if stored_file is None:
        raise NotFoundError('File not found')

    framed = bytes(stored_file.data)
    logger.info(
        'Restoring file: %s (ID: %s, %d stored bytes)',
        filename,
        stored_file.id,
        len(framed),
    )

    return RetrievedFile(
        content=restore_content(framed),
        mime_type=stored_file.mime_type,
    )


def list_files(store: FileStore) -> list[FileMetadata]:
    """List stored file metadata, newest first."""
    files = store.list_metadata()
    logger.debug('Listed %d stored files', len(files))
    return files

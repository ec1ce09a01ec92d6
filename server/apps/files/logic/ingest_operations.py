"""Business logic for storing uploaded files."""

import logging

from server.apps.files.exceptions import ValidationError
from server.apps.files.infrastructure import compression, framing
from server.apps.files.infrastructure.store import FileStore
from server.apps.files.models import StoredFile

logger = logging.getLogger(__name__)


def ingest_file(
    store: FileStore,
    filename: str,
    raw_bytes: bytes | None,
    mime_type: str,
) -> StoredFile:
    """Compress, frame and persist an uploaded file.

    The store write is the last step and the only side effect: if
    compression or framing fails, nothing is persisted.

    Args:
        store: Store gateway to persist the record with.
        filename: Original filename.
        raw_bytes: Uploaded content. An empty buffer is a valid upload.
        mime_type: Content type to record.

    Returns:
        Created StoredFile instance.

    Raises:
        ValidationError: If no content was supplied.
        StoreError: If persisting the record fails.
    """
    if raw_bytes is None:
        raise ValidationError('No file uploaded')

    logger.info('Compressing file: %s (%d bytes)', filename, len(raw_bytes))
    compressed = compression.compress(raw_bytes)

    framed = framing.encode(compressed)
    logger.debug(
        'Framed file: %s (%d compressed, %d stored bytes)',
        filename,
        len(compressed),
        len(framed),
    )

    stored_file = store.create(filename, framed, mime_type)
    logger.info('File ingested: %s (ID: %s)', filename, stored_file.id)
    return stored_file

"""Store gateway persisting framed blobs in the database."""

import functools
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, final, override
from uuid import UUID

from django.db import DatabaseError

from server.apps.files.exceptions import StoreError
from server.apps.files.models import StoredFile

logger = logging.getLogger(__name__)

# Newest record wins when names collide. Records created in the same
# instant are ordered by their random UUID: arbitrary but stable.
_NEWEST_FIRST = ('-created_at', '-pk')


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Stored file description without its payload."""

    id: UUID
    name: str
    mime_type: str
    created_at: datetime


class FileStore(Protocol):
    """Persistence contract used by the ingest and retrieval pipelines."""

    def create(self, name: str, data: bytes, mime_type: str) -> StoredFile:
        """Persist a new record and return it."""

    def find_by_name(self, name: str) -> StoredFile | None:
        """Return the newest record with this name, if any."""

    def list_metadata(self) -> list[FileMetadata]:
        """Return metadata of every record, newest first."""


@final
class DatabaseFileStore(FileStore):
    """Store gateway backed by the ``StoredFile`` model.

    Holds no state of its own, so a single instance is shared by all
    requests. Connection handling is left to Django.
    """

    @override
    def create(self, name: str, data: bytes, mime_type: str) -> StoredFile:
        """Insert a new stored file.

        Args:
            name: Original filename.
            data: Framed blob to persist.
            mime_type: Uploader supplied content type.

        Returns:
            Created StoredFile instance.

        Raises:
            StoreError: If the database write fails.
        """
        try:
            stored_file = StoredFile.objects.create(
                name=name,
                data=data,
                mime_type=mime_type,
            )
        except DatabaseError as error:
            logger.exception('Failed to store file: %s', name)
            raise StoreError(f'Could not save file: {error}') from error

        logger.info(
            'Stored file %s (ID: %s, %d bytes)',
            name,
            stored_file.id,
            len(data),
        )
        return stored_file

    @override
    def find_by_name(self, name: str) -> StoredFile | None:
        """Find the most recently created record with the given name.

        Args:
            name: Filename to look up.

        Returns:
            Matching StoredFile, or None if nothing matches.

        Raises:
            StoreError: If the database read fails.
        """
        try:
            return StoredFile.objects.filter(
                name=name,
            ).order_by(*_NEWEST_FIRST).first()
        except DatabaseError as error:
            logger.exception('Failed to look up file: %s', name)
            raise StoreError(f'Could not read file: {error}') from error

    @override
    def list_metadata(self) -> list[FileMetadata]:
        """List metadata of all stored files, newest first.

        The blob column is never loaded.

        Returns:
            List of FileMetadata.

        Raises:
            StoreError: If the database read fails.
        """
        try:
            rows = StoredFile.objects.order_by(*_NEWEST_FIRST).values_list(
                'id',
                'name',
                'mime_type',
                'created_at',
            )
            return [FileMetadata(*row) for row in rows]
        except DatabaseError as error:
            logger.exception('Failed to list files')
            raise StoreError(f'Could not list files: {error}') from error


@functools.cache
def get_file_store() -> FileStore:
    """Get the process-wide store gateway.

    Returns:
        Shared DatabaseFileStore instance.
    """
    return DatabaseFileStore()

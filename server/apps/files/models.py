"""Database models for files app."""

import uuid
from typing import Final, final, override

from django.db import models

# Constants for field max lengths
_NAME_MAX_LENGTH: Final = 255
_MIME_TYPE_MAX_LENGTH: Final = 255


@final
class StoredFile(models.Model):
    """Uploaded file kept as a framed, gzip-compressed blob.

    The ``data`` column holds random prefix bytes, the compressed
    payload and random suffix bytes. See
    ``server.apps.files.infrastructure.framing`` for the layout.

    Names are not unique: uploading the same filename twice creates
    two records.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
    )

    name = models.CharField(
        max_length=_NAME_MAX_LENGTH,
        db_index=True,
        help_text='Original filename as uploaded',
    )

    data = models.BinaryField(
        help_text='Framed blob: prefix + gzip payload + suffix',
    )

    mime_type = models.CharField(
        max_length=_MIME_TYPE_MAX_LENGTH,
        help_text='Content type supplied by the uploader',
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Stored file'  # type: ignore[mutable-override]
        verbose_name_plural = 'Stored files'  # type: ignore[mutable-override]
        ordering = ['-created_at']

        indexes = [
            # Optimize lookup of the newest record for a name
            models.Index(
                fields=['name', '-created_at'],
                name='files_name_recent_idx',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.name} ({self.id})'

    def get_stored_size(self) -> int:
        """Size of the framed blob in bytes.

        Returns:
            Number of bytes persisted in ``data``.
        """
        return len(self.data)

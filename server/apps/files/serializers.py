"""Serializers for the packed files API."""

from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from rest_framework import serializers


class FileUploadSerializer(serializers.Serializer):
    """Multipart upload with a single ``file`` field.

    Empty files are accepted: a zero-byte upload is stored like any other.
    """

    file = serializers.FileField(
        write_only=True,
        allow_empty_file=True,
        error_messages={
            'required': 'No file uploaded',
            'null': 'No file uploaded',
            'invalid': 'No file uploaded',
        },
    )

    def validate_file(self, upload: UploadedFile) -> UploadedFile:
        """Reject uploads over the configured size cap.

        Args:
            upload: Uploaded file.

        Returns:
            The same upload if it fits.

        Raises:
            ValidationError: If upload exceeds FILES_MAX_UPLOAD_BYTES.
        """
        max_bytes = settings.FILES_MAX_UPLOAD_BYTES
        if upload.size is not None and upload.size > max_bytes:
            raise serializers.ValidationError(
                f'File too large: {upload.size} bytes, '
                f'limit is {max_bytes} bytes',
            )
        return upload


class FileMetadataSerializer(serializers.Serializer):
    """Stored file listing entry."""

    id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(read_only=True)
    mimeType = serializers.CharField(  # noqa: N815
        source='mime_type',
        read_only=True,
    )
    createdAt = serializers.DateTimeField(  # noqa: N815
        source='created_at',
        read_only=True,
    )

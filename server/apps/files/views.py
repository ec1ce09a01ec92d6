"""HTTP endpoints for uploading, restoring and listing files."""

import logging
from http import HTTPStatus
from typing import Any, final

from django.http import HttpResponse
from rest_framework.parsers import MultiPartParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView, exception_handler

from server.apps.files.exceptions import NotFoundError, as_transfer_error
from server.apps.files.infrastructure.metadata import (
    content_disposition,
    detect_mime_type,
)
from server.apps.files.infrastructure.store import get_file_store
from server.apps.files.logic.ingest_operations import ingest_file
from server.apps.files.logic.retrieval_operations import (
    list_files,
    retrieve_file,
)
from server.apps.files.serializers import (
    FileMetadataSerializer,
    FileUploadSerializer,
)

logger = logging.getLogger(__name__)


def _message(message: str, status: int) -> Response:
    return Response({'message': message}, status=status)


def _first_error(errors: dict[str, Any]) -> str:
    """Pick the first validation message from serializer errors."""
    for field_errors in errors.values():
        if field_errors:
            return str(field_errors[0])
    return 'Invalid request'


@final
class FileUploadAPIView(APIView):
    """Store an uploaded file compressed and framed."""

    parser_classes = [MultiPartParser]

    def post(self, request: Request) -> Response:
        """Handle ``POST /api/upload-axios``.

        Args:
            request: Multipart request with a ``file`` field.

        Returns:
            Upload confirmation with the new file ID.
        """
        serializer = FileUploadSerializer(data=request.data)
        if not serializer.is_valid():
            return _message(
                _first_error(serializer.errors),
                HTTPStatus.BAD_REQUEST,
            )

        upload = serializer.validated_data['file']
        try:
            stored_file = ingest_file(
                get_file_store(),
                upload.name,
                upload.read(),
                detect_mime_type(upload.name, upload.content_type),
            )
        except Exception as error:
            failure = as_transfer_error(error)
            logger.exception('Error processing file: %s', upload.name)
            return _message(
                f'Error processing file: {failure.message}',
                failure.status_code,
            )

        return Response({
            'message': 'File uploaded and compressed successfully',
            'filename': upload.name,
            'fileId': str(stored_file.id),
        })


@final
class FileDecompressAPIView(APIView):
    """Return the original content of a stored file."""

    def get(self, request: Request) -> HttpResponse:
        """Handle ``GET /api/decompress?filename=<name>``.

        Args:
            request: Request with a ``filename`` query parameter.

        Returns:
            Raw file content with the stored content type.
        """
        filename = request.query_params.get('filename')
        if not filename:
            return _message('No filename provided', HTTPStatus.BAD_REQUEST)

        try:
            retrieved = retrieve_file(get_file_store(), filename)
        except NotFoundError as error:
            logger.warning('File not found: %s', filename)
            return _message(error.message, error.status_code)
        except Exception as error:
            failure = as_transfer_error(error)
            logger.exception('Error decompressing file: %s', filename)
            return _message(
                f'Error decompressing file: {failure.message}',
                failure.status_code,
            )

        response = HttpResponse(
            retrieved.content,
            content_type=retrieved.mime_type,
        )
        response['Content-Disposition'] = content_disposition(filename)
        response['Content-Length'] = str(len(retrieved.content))
        return response


@final
class FileListAPIView(APIView):
    """List stored file metadata, newest first."""

    def get(self, request: Request) -> Response:
        """Handle ``GET /api/files``.

        Args:
            request: Incoming request.

        Returns:
            JSON array of ``{id, name, mimeType, createdAt}``.
        """
        try:
            files = list_files(get_file_store())
        except Exception:
            logger.exception('Error fetching files')
            return _message(
                'Error fetching files',
                HTTPStatus.INTERNAL_SERVER_ERROR,
            )
        return Response(FileMetadataSerializer(files, many=True).data)


def api_exception_handler(
    exc: Exception,
    context: dict[str, Any],
) -> Response:
    """Render every API error as a JSON ``{message}`` body.

    Errors DRF knows about (bad method, parse errors) keep their status.
    Anything else becomes a generic 500 and is logged with its traceback.

    Args:
        exc: Exception raised by the view.
        context: DRF handler context.

    Returns:
        Error response.
    """
    response = exception_handler(exc, context)
    if response is None:
        logger.error(
            'Unhandled error in %s',
            context.get('view').__class__.__name__,
            exc_info=exc,
        )
        return _message(
            'Something broke!',
            HTTPStatus.INTERNAL_SERVER_ERROR,
        )

    if isinstance(response.data, dict) and 'detail' in response.data:
        response.data = {'message': str(response.data['detail'])}
    return response

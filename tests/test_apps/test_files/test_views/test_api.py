"""Tests for the packed files HTTP API."""

from unittest import mock

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.urls import reverse
from rest_framework.exceptions import MethodNotAllowed

from server.apps.files.exceptions import StoreError
from server.apps.files.logic.retrieval_operations import RetrievedFile
from server.apps.files.models import StoredFile
from server.apps.files.views import api_exception_handler

_UPLOAD_URL = '/api/upload-axios'
_DECOMPRESS_URL = '/api/decompress'
_LIST_URL = '/api/files'


def _upload(api_client, upload):
    return api_client.post(_UPLOAD_URL, {'file': upload}, format='multipart')


def test_routes():
    """Test URL names resolve to the public paths."""
    assert reverse('files:upload') == _UPLOAD_URL
    assert reverse('files:decompress') == _DECOMPRESS_URL
    assert reverse('files:list') == _LIST_URL


@pytest.mark.django_db
class TestUploadEndpoint:
    """Tests for POST /api/upload-axios."""

    def test_upload_success(self, api_client, sample_upload):
        """Test upload stores the file and returns its ID."""
        response = _upload(api_client, sample_upload)

        assert response.status_code == 200
        body = response.json()
        assert body['message'] == 'File uploaded and compressed successfully'
        assert body['filename'] == 'report.txt'
        stored_file = StoredFile.objects.get()
        assert body['fileId'] == str(stored_file.id)
        assert stored_file.mime_type == 'text/plain'

    def test_upload_without_file(self, api_client):
        """Test missing file field is a 400."""
        response = api_client.post(_UPLOAD_URL, {}, format='multipart')

        assert response.status_code == 400
        assert response.json() == {'message': 'No file uploaded'}
        assert StoredFile.objects.count() == 0

    def test_upload_empty_file(self, api_client):
        """Test a zero-byte file is accepted."""
        upload = SimpleUploadedFile('empty.txt', b'', content_type='text/plain')

        response = _upload(api_client, upload)

        assert response.status_code == 200
        assert StoredFile.objects.get().name == 'empty.txt'

    @override_settings(FILES_MAX_UPLOAD_BYTES=10)
    def test_upload_too_large(self, api_client, sample_upload):
        """Test uploads over the cap are rejected."""
        response = _upload(api_client, sample_upload)

        assert response.status_code == 400
        assert response.json()['message'].startswith('File too large')
        assert StoredFile.objects.count() == 0

    def test_upload_store_failure(self, api_client, sample_upload):
        """Test pipeline failures become a 500 with the error message."""
        with mock.patch(
            'server.apps.files.infrastructure.store.DatabaseFileStore.create',
            side_effect=StoreError('Could not save file: locked'),
        ):
            response = _upload(api_client, sample_upload)

        assert response.status_code == 500
        assert response.json() == {
            'message': 'Error processing file: Could not save file: locked',
        }

    def test_upload_unexpected_failure(self, api_client, sample_upload):
        """Test non-pipeline errors are normalized to the same shape."""
        with mock.patch(
            'server.apps.files.infrastructure.compression.compress',
            side_effect=RuntimeError('boom'),
        ):
            response = _upload(api_client, sample_upload)

        assert response.status_code == 500
        assert response.json() == {'message': 'Error processing file: boom'}

    def test_upload_method_not_allowed(self, api_client):
        """Test only POST is served on the upload route."""
        response = api_client.get(_UPLOAD_URL)

        assert response.status_code == 405
        assert 'message' in response.json()


@pytest.mark.django_db
class TestDecompressEndpoint:
    """Tests for GET /api/decompress."""

    def test_roundtrip(self, api_client, sample_upload, sample_content):
        """Test uploaded content comes back byte for byte."""
        _upload(api_client, sample_upload)

        response = api_client.get(_DECOMPRESS_URL, {'filename': 'report.txt'})

        assert response.status_code == 200
        assert response.content == sample_content
        assert response['Content-Type'] == 'text/plain'
        assert response['Content-Disposition'] == (
            'inline; filename="report.txt"'
        )
        assert response['Content-Length'] == str(len(sample_content))

    def test_empty_file_roundtrip(self, api_client):
        """Test a 0-byte text file is served back empty."""
        upload = SimpleUploadedFile('empty.txt', b'', content_type='text/plain')
        _upload(api_client, upload)

        response = api_client.get(_DECOMPRESS_URL, {'filename': 'empty.txt'})

        assert response.status_code == 200
        assert response.content == b''
        assert response['Content-Type'] == 'text/plain'
        assert response['Content-Length'] == '0'

    def test_binary_roundtrip(self, api_client):
        """Test arbitrary bytes and content type survive."""
        content = bytes(range(256)) * 64
        upload = SimpleUploadedFile(
            'blob.bin',
            content,
            content_type='application/octet-stream',
        )
        _upload(api_client, upload)

        response = api_client.get(_DECOMPRESS_URL, {'filename': 'blob.bin'})

        assert response.content == content
        assert response['Content-Type'] == 'application/octet-stream'

    def test_repeated_retrieval(self, api_client, sample_upload):
        """Test two retrievals return identical bytes."""
        _upload(api_client, sample_upload)

        first = api_client.get(_DECOMPRESS_URL, {'filename': 'report.txt'})
        second = api_client.get(_DECOMPRESS_URL, {'filename': 'report.txt'})

        assert first.content == second.content

    def test_missing_filename(self, api_client):
        """Test request without filename is a 400."""
        response = api_client.get(_DECOMPRESS_URL)

        assert response.status_code == 400
        assert response.json() == {'message': 'No filename provided'}

    def test_missing_file(self, api_client):
        """Test unknown filename is a 404."""
        response = api_client.get(_DECOMPRESS_URL, {'filename': 'missing.txt'})

        assert response.status_code == 404
        assert response.json() == {'message': 'File not found'}

    def test_truncated_blob(self, api_client, sample_upload):
        """Test a blob truncated to 40 bytes is a 500."""
        _upload(api_client, sample_upload)
        stored_file = StoredFile.objects.get()
        StoredFile.objects.filter(id=stored_file.id).update(
            data=bytes(stored_file.data)[:40],
        )

        response = api_client.get(_DECOMPRESS_URL, {'filename': 'report.txt'})

        assert response.status_code == 500
        assert response.json()['message'].startswith(
            'Error decompressing file: Stored data is 40 bytes',
        )

    def test_corrupt_payload(self, api_client, sample_upload):
        """Test a damaged gzip payload is a 500."""
        _upload(api_client, sample_upload)
        stored_file = StoredFile.objects.get()
        data = bytearray(stored_file.data)
        data[32:34] = b'\x00\x00'  # gzip magic bytes after the prefix
        StoredFile.objects.filter(id=stored_file.id).update(data=bytes(data))

        response = api_client.get(_DECOMPRESS_URL, {'filename': 'report.txt'})

        assert response.status_code == 500
        assert response.json()['message'].startswith(
            'Error decompressing file: Invalid compressed data',
        )


@pytest.mark.django_db
class TestListEndpoint:
    """Tests for GET /api/files."""

    def test_list_newest_first(self, api_client):
        """Test listing shows metadata in reverse upload order."""
        for name in ('a.txt', 'b.txt', 'c.txt'):
            upload = SimpleUploadedFile(name, b'x', content_type='text/plain')
            _upload(api_client, upload)

        response = api_client.get(_LIST_URL)

        assert response.status_code == 200
        body = response.json()
        assert [item['name'] for item in body] == ['c.txt', 'b.txt', 'a.txt']
        assert set(body[0]) == {'id', 'name', 'mimeType', 'createdAt'}
        assert body[0]['mimeType'] == 'text/plain'

    def test_list_empty(self, api_client):
        """Test listing with no files."""
        response = api_client.get(_LIST_URL)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_store_failure(self, api_client):
        """Test store failures are a 500 with a generic message."""
        with mock.patch(
            'server.apps.files.infrastructure.store.DatabaseFileStore'
            '.list_metadata',
            side_effect=StoreError('Could not list files'),
        ):
            response = api_client.get(_LIST_URL)

        assert response.status_code == 500
        assert response.json() == {'message': 'Error fetching files'}


def test_cors_allows_any_origin_by_default(api_client, db):
    """Test cross-origin reads are allowed without credentials."""
    response = api_client.get(_LIST_URL, HTTP_ORIGIN='http://localhost:5173')

    assert response['Access-Control-Allow-Origin'] == '*'
    assert 'Access-Control-Allow-Credentials' not in response


@pytest.mark.django_db
def test_unhandled_view_error_is_generic_500(api_client):
    """Test errors outside the pipelines are rendered as Something broke!."""
    broken = RetrievedFile(content=b'x', mime_type='text/plain\nX-Bad: 1')

    with mock.patch(
        'server.apps.files.views.retrieve_file',
        return_value=broken,
    ):
        response = api_client.get(_DECOMPRESS_URL, {'filename': 'any.txt'})

    assert response.status_code == 500
    assert response.json() == {'message': 'Something broke!'}


def test_api_exception_handler_unknown_error():
    """Test the handler turns unknown exceptions into a 500."""
    response = api_exception_handler(RuntimeError('boom'), {'view': None})

    assert response.status_code == 500
    assert response.data == {'message': 'Something broke!'}


def test_api_exception_handler_keeps_drf_status():
    """Test known DRF errors keep their status with a message body."""
    response = api_exception_handler(
        MethodNotAllowed('DELETE'),
        {'view': None},
    )

    assert response.status_code == 405
    assert response.data == {'message': 'Method "DELETE" not allowed.'}

"""Shared fixtures for files app tests."""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from server.apps.files.infrastructure.store import DatabaseFileStore


@pytest.fixture
def store(db):
    """Database-backed store gateway.

    Returns:
        DatabaseFileStore instance.
    """
    return DatabaseFileStore()


@pytest.fixture
def api_client():
    """DRF test client.

    Returns:
        APIClient instance.
    """
    return APIClient()


@pytest.fixture
def sample_content():
    """Sample file content that compresses well.

    Returns:
        Bytes of repeated text.
    """
    return b'test file content\n' * 200


@pytest.fixture
def sample_upload(sample_content):
    """Sample multipart upload.

    Returns:
        SimpleUploadedFile named report.txt.
    """
    return SimpleUploadedFile(
        'report.txt',
        sample_content,
        content_type='text/plain',
    )

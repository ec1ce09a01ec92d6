"""URL routes for files app."""

from django.urls import path

from server.apps.files.views import (
    FileDecompressAPIView,
    FileListAPIView,
    FileUploadAPIView,
)

app_name = 'files'

urlpatterns = [
    path('upload-axios', FileUploadAPIView.as_view(), name='upload'),
    path('decompress', FileDecompressAPIView.as_view(), name='decompress'),
    path('files', FileListAPIView.as_view(), name='list'),
]

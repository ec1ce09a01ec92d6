"""Django admin configuration for files app."""

from django.contrib import admin
from django.db.models import QuerySet
from django.db.models.functions import Length
from django.http import HttpRequest

from server.apps.files.models import StoredFile


def _format_bytes(size_bytes: int) -> str:
    """Format bytes in human-readable format.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Formatted size string (e.g., '1.5 MB', '234 KB').
    """
    if size_bytes < 1024:
        return f'{size_bytes} B'
    if size_bytes < 1024 * 1024:  # noqa: WPS531
        return f'{size_bytes / 1024:.1f} KB'
    if size_bytes < 1024 * 1024 * 1024:  # noqa: WPS531
        return f'{size_bytes / (1024 * 1024):.1f} MB'
    return f'{size_bytes / (1024 * 1024 * 1024):.1f} GB'


@admin.register(StoredFile)
class StoredFileAdmin(admin.ModelAdmin[StoredFile]):
    """Admin interface for StoredFile model.

    The framed blob is never rendered; only its size is shown.
    """

    list_display = [
        'name',
        'mime_type',
        'stored_size_display',
        'created_at',
    ]

    list_filter = [
        'mime_type',
        'created_at',
    ]

    search_fields = [
        'name',
    ]

    fields = [
        'id',
        'name',
        'mime_type',
        'stored_size_display',
        'created_at',
    ]

    readonly_fields = fields

    def stored_size_display(self, obj: StoredFile) -> str:
        """Display stored blob size in human-readable format.

        Args:
            obj: StoredFile instance annotated with ``stored_size``.

        Returns:
            Formatted size string.
        """
        return _format_bytes(obj.stored_size)  # type: ignore[attr-defined]
    stored_size_display.short_description = 'Stored size'  # type: ignore[attr-defined]

    def has_add_permission(self, request: HttpRequest) -> bool:
        """Files are only created through the upload endpoint."""
        return False

    def get_queryset(self, request: HttpRequest) -> QuerySet[StoredFile]:
        """Compute blob size in the database instead of loading blobs.

        Args:
            request: HTTP request.

        Returns:
            QuerySet with ``stored_size`` annotation and deferred data.
        """
        return super().get_queryset(request).defer('data').annotate(
            stored_size=Length('data'),
        )

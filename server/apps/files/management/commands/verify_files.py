"""Management command to check that stored files can be restored."""

import logging
from typing import Any, Final

from django.core.management.base import BaseCommand

from server.apps.files.exceptions import DecompressionError, FramingError
from server.apps.files.logic.retrieval_operations import restore_content
from server.apps.files.models import StoredFile

_DEFAULT_BATCH_SIZE: Final = 1000

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Unframe and decompress every stored file without changing it."""

    help = 'Verify that stored files can be unframed and decompressed'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--batch-size',
            type=int,
            default=_DEFAULT_BATCH_SIZE,
            help=f'Max files to check (default: {_DEFAULT_BATCH_SIZE})',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the verification command.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        batch_size = options['batch_size']

        stored_files = StoredFile.objects.order_by(
            'created_at',
        )[:batch_size].iterator()

        checked = 0
        corrupt = 0

        for stored_file in stored_files:
            checked += 1
            try:
                content = restore_content(bytes(stored_file.data))
            except (FramingError, DecompressionError) as exc:
                corrupt += 1
                self.stdout.write(
                    f'CORRUPT {stored_file.name} ({stored_file.id}): '
                    f'{exc.message}',
                )
                logger.warning(
                    'Stored file failed verification: %s (%s)',
                    stored_file.id,
                    exc.message,
                )
                continue

            self.stdout.write(
                f'OK {stored_file.name} ({stored_file.id}): '
                f'{stored_file.get_stored_size()} -> {len(content)} bytes',
            )

        summary = f'Checked {checked} files, {corrupt} corrupt'
        if corrupt:
            self.stdout.write(self.style.ERROR(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))

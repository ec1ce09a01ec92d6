"""Django management command to run the HTTP API server."""

import logging
from typing import Any, Final, final, override

from cheroot.wsgi import Server as WSGIServer
from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import connections

from server.wsgi import application

logger = logging.getLogger(__name__)

_DEFAULT_THREADS: Final = 10


@final
class Command(BaseCommand):
    """Run the packed files API using cheroot WSGI server."""

    help = 'Run the packed files HTTP API server'

    @override
    def add_arguments(self, parser: Any) -> None:
        """Add command arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--host',
            type=str,
            default=None,
            help='Host to bind to (default: from settings)',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to bind to (default: from settings)',
        )
        parser.add_argument(
            '--threads',
            type=int,
            default=_DEFAULT_THREADS,
            help=f'Worker threads (default: {_DEFAULT_THREADS})',
        )

    @override
    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        Django keeps one database connection per thread. On shutdown only
        the main thread's connection is closed here; connections opened
        by cheroot worker threads are released when the process exits.

        Args:
            args: Positional arguments.
            options: Keyword arguments from command line.
        """
        host = options['host'] or settings.SERVER_HOST
        port = options['port'] or settings.SERVER_PORT

        server = WSGIServer(
            bind_addr=(host, port),
            wsgi_app=application,
            numthreads=options['threads'],
            max_request_body_size=settings.FILES_MAX_UPLOAD_BYTES * 2,
        )
        server.server_name = 'PackedFiles'

        self.stdout.write(
            self.style.SUCCESS(f'Server running on {host}:{port}'),
        )
        try:
            logger.info('HTTP server starting on %s:%d', host, port)
            server.start()
        except KeyboardInterrupt:
            self.stdout.write(self.style.WARNING('\nShutting down...'))
        finally:
            server.stop()
            # Main thread only, see handle docstring
            connections.close_all()
            self.stdout.write(self.style.SUCCESS('Server stopped'))

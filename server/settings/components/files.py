"""Packed files service settings: server binding, CORS and upload limits."""

from decouple import Csv

from server.settings.components import config

# HTTP server host and port
SERVER_HOST = config('HOST', default='0.0.0.0')  # noqa: S104
SERVER_PORT = config('PORT', cast=int, default=3001)

# Uploads are buffered fully in memory, so they are capped
FILES_MAX_UPLOAD_BYTES = config(
    'FILES_MAX_UPLOAD_BYTES',
    cast=int,
    default=100 * 1024 * 1024,
)

# Multipart bodies up to the upload cap stay in memory
FILE_UPLOAD_MAX_MEMORY_SIZE = FILES_MAX_UPLOAD_BYTES

# Cross-origin access for the frontend.
# Without an explicit origin list any origin is allowed and credentialed
# requests are refused.
_FRONTEND_ORIGINS = config('FRONTEND_URL', cast=Csv(), default='')

CORS_ALLOWED_ORIGINS = _FRONTEND_ORIGINS
CORS_ALLOW_ALL_ORIGINS = not _FRONTEND_ORIGINS
CORS_ALLOW_CREDENTIALS = bool(_FRONTEND_ORIGINS)
CORS_ALLOW_METHODS = ('GET', 'POST')
CORS_URLS_REGEX = r'^/api/.*$'

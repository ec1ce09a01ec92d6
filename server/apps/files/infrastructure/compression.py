"""Whole-buffer gzip compression built on streaming zlib objects."""

import zlib
from collections.abc import Iterator
from typing import Final

from server.apps.files.exceptions import DecompressionError

_CHUNK_SIZE: Final = 64 * 1024  # 64KB chunks fed to the stream
_GZIP_WBITS: Final = 16 + zlib.MAX_WBITS  # gzip header and trailer
_COMPRESS_LEVEL: Final = 6


def _chunks(data: bytes) -> Iterator[memoryview]:
    view = memoryview(data)
    for offset in range(0, len(view), _CHUNK_SIZE):
        yield view[offset:offset + _CHUNK_SIZE]


def compress(raw: bytes) -> bytes:
    """Compress the complete buffer into a gzip stream.

    The stream is flushed and closed before returning, so the result is
    always a complete gzip member.

    Args:
        raw: Bytes to compress, may be empty.

    Returns:
        Gzip-compressed bytes.
    """
    compressor = zlib.compressobj(_COMPRESS_LEVEL, zlib.DEFLATED, _GZIP_WBITS)
    parts = [compressor.compress(chunk) for chunk in _chunks(raw)]
    parts.append(compressor.flush(zlib.Z_FINISH))
    return b''.join(parts)


def decompress(compressed: bytes) -> bytes:
    """Decompress a complete gzip stream.

    Args:
        compressed: Gzip-compressed bytes.

    Returns:
        Original uncompressed bytes.

    Raises:
        DecompressionError: If the stream is malformed, truncated,
            fails its checksum or has trailing data.
    """
    decompressor = zlib.decompressobj(_GZIP_WBITS)
    parts = []
    try:
        for chunk in _chunks(compressed):
            parts.append(decompressor.decompress(chunk))
        parts.append(decompressor.flush())
    except zlib.error as error:
        raise DecompressionError(f'Invalid compressed data: {error}') from error

    if not decompressor.eof:
        raise DecompressionError('Compressed data is truncated')
    if decompressor.unused_data:
        raise DecompressionError(
            'Unexpected {0} bytes after end of compressed data'.format(
                len(decompressor.unused_data),
            ),
        )
    return b''.join(parts)

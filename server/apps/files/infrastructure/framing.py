"""Fixed-size framing of stored payloads.

Layout of a framed blob::

    [ PREFIX_BYTES random ][ payload ][ SUFFIX_BYTES random ]

The sizes are not persisted with the blob, so changing them makes every
previously stored record unreadable.
"""

import secrets
from typing import Final

from server.apps.files.exceptions import FramingError

PREFIX_BYTES: Final = 32
SUFFIX_BYTES: Final = 48
FRAME_OVERHEAD: Final = PREFIX_BYTES + SUFFIX_BYTES


def encode(payload: bytes) -> bytes:
    """Wrap payload with random prefix and suffix bytes.

    Args:
        payload: Compressed payload to frame.

    Returns:
        Framed blob, exactly ``FRAME_OVERHEAD`` bytes longer than payload.
    """
    prefix = secrets.token_bytes(PREFIX_BYTES)
    suffix = secrets.token_bytes(SUFFIX_BYTES)
    return b''.join((prefix, payload, suffix))


def decode(framed: bytes) -> bytes:
    """Strip prefix and suffix bytes from a framed blob.

    Padding content is discarded without validation.

    Args:
        framed: Framed blob as stored.

    Returns:
        The payload between prefix and suffix.

    Raises:
        FramingError: If blob is shorter than prefix and suffix combined.
    """
    if len(framed) < FRAME_OVERHEAD:
        raise FramingError(
            f'Stored data is {len(framed)} bytes, '
            f'expected at least {FRAME_OVERHEAD}',
        )
    return bytes(framed[PREFIX_BYTES:len(framed) - SUFFIX_BYTES])

"""Split a binary screen dump into character/attribute cells."""
from __future__ import annotations

import logging
from typing import Final, Iterator, NamedTuple, Protocol

from .errors import MissingInputError, StreamReadError

LOGGER = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE: Final[int] = 64 * 1024


class ByteSource(Protocol):
    """Minimal pull interface accepted as decoder input."""

    def read(self, size: int = -1, /) -> bytes:
        ...


class VideoCell(NamedTuple):
    """One character byte and its video attribute byte."""

    character: int
    attribute: int


def iter_cells(
    stream: ByteSource | None, *, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[VideoCell]:
    """Yield cells from ``stream`` two bytes at a time.

    The stream is read in ``chunk_size`` blocks.  A single unpaired byte left
    at the end of the stream is discarded.
    """

    if stream is None:
        raise MissingInputError("input stream is None")
    if chunk_size < 2:
        raise ValueError("chunk_size must be at least two bytes")

    carry = b""
    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as exc:
            raise StreamReadError(f"screen dump read failed: {exc}") from exc
        if not chunk:
            break
        data = carry + bytes(chunk) if carry else bytes(chunk)
        paired = len(data) & ~1
        for offset in range(0, paired, 2):
            yield VideoCell(data[offset], data[offset + 1])
        carry = data[paired:]

    if carry:
        LOGGER.debug("discarding unpaired trailing byte $%02X", carry[0])


__all__ = ["ByteSource", "DEFAULT_CHUNK_SIZE", "VideoCell", "iter_cells"]

"""Exception hierarchy raised while transcoding binary screen dumps."""
from __future__ import annotations


class ScreenDumpError(Exception):
    """Base class for every failure surfaced by :mod:`screendump`."""


class MissingInputError(ScreenDumpError):
    """Raised when a decode operation is called without an input stream."""


class InvalidAttributeError(ScreenDumpError, ValueError):
    """Raised when a decoded colour index falls outside the 16 colour range."""

    def __init__(self, attribute: int, index: int, plane: str) -> None:
        super().__init__(
            f"data is not a video binary dump: attribute ${attribute:02X} "
            f"yields {plane} colour {index} > 15"
        )
        self.attribute = attribute
        self.index = index
        self.plane = plane


class StreamReadError(ScreenDumpError, OSError):
    """Raised when the input stream faults mid-read."""


class StreamWriteError(ScreenDumpError, OSError):
    """Raised when the output sink rejects a write."""


class CodePageError(ScreenDumpError, ValueError):
    """Raised when a code page cannot decode single bytes."""


class DecoderConfigError(ScreenDumpError, ValueError):
    """Raised when a decoder configuration file fails validation."""


__all__ = [
    "CodePageError",
    "DecoderConfigError",
    "InvalidAttributeError",
    "MissingInputError",
    "ScreenDumpError",
    "StreamReadError",
    "StreamWriteError",
]

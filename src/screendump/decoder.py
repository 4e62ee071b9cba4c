"""Public entry points that transcode screen dumps into HTML fragments."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field

from .assembler import DEFAULT_WIDTH, Document, assemble
from .charset import CharacterMapper
from .config import DecoderOptions
from .errors import MissingInputError
from .palette import Colors, Palette, colors_for
from .tokenizer import ByteSource, iter_cells
from .writer import ByteSink, render_document, write_document

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decoder:
    """Immutable decode settings; every call builds its own row state.

    ``width`` values of zero or less fall back to 160 columns.  ``max_rows``
    should normally stay at 0 and is meant for dumps carrying trailing NUL
    padding or corrupt metadata that must be ignored.  ``code_page`` defaults
    to IBM code page 437.
    """

    width: int = DEFAULT_WIDTH
    max_rows: int = 0
    palette: Palette = Palette.STANDARD_CGA
    code_page: str | None = None
    debug: bool = False
    mapper: CharacterMapper = field(init=False, repr=False, compare=False)
    colors: Colors = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0:
            object.__setattr__(self, "width", DEFAULT_WIDTH)
        if self.max_rows < 0:
            object.__setattr__(self, "max_rows", 0)
        mapper = CharacterMapper(self.code_page)
        object.__setattr__(self, "code_page", mapper.code_page)
        object.__setattr__(self, "mapper", mapper)
        object.__setattr__(self, "colors", colors_for(self.palette))

    @classmethod
    def from_options(cls, options: DecoderOptions) -> "Decoder":
        return cls(
            width=options.width,
            max_rows=options.max_rows,
            palette=options.palette,
            code_page=options.code_page,
            debug=options.debug,
        )

    def decode(self, stream: ByteSource | None) -> Document:
        """Read every cell of ``stream`` and return the assembled document."""

        if stream is None:
            raise MissingInputError("input stream is None")
        document = assemble(
            iter_cells(stream),
            width=self.width,
            max_rows=self.max_rows,
            colors=self.colors,
            mapper=self.mapper,
            debug=self.debug,
        )
        LOGGER.debug(
            "decoded %d rows at %d columns using %s/%s",
            len(document),
            self.width,
            self.palette.value,
            self.code_page,
        )
        return document

    def render(self, stream: ByteSource | None) -> str:
        """Return the HTML fragment for ``stream``."""

        return render_document(self.decode(stream))

    def write(self, stream: ByteSource | None, sink: ByteSink | None) -> int:
        """Write the HTML fragment for ``stream`` to ``sink``."""

        return write_document(self.decode(stream), sink)


def decode_to_buffer(
    stream: ByteSource | None,
    width: int = DEFAULT_WIDTH,
    max_rows: int = 0,
    palette: Palette = Palette.STANDARD_CGA,
    code_page: str | None = None,
    *,
    debug: bool = False,
) -> io.BytesIO:
    """Return a buffer holding the HTML fragment decoded from ``stream``."""

    if stream is None:
        raise MissingInputError("input stream is None")
    decoder = Decoder(width, max_rows, palette, code_page, debug=debug)
    buffer = io.BytesIO()
    write_document(decoder.decode(stream), buffer)
    buffer.seek(0)
    return buffer


def decode_to_bytes(stream: ByteSource | None) -> bytes:
    """Return the UTF-8 HTML fragment using code page 437 and standard CGA."""

    return decode_to_buffer(stream).getvalue()


def decode_to_text(stream: ByteSource | None) -> str:
    """Return the HTML fragment using code page 437 and standard CGA."""

    return decode_to_bytes(stream).decode("utf-8")


def decode_and_write(stream: ByteSource | None, sink: ByteSink | None) -> int:
    """Write the HTML fragment to ``sink`` and return the bytes written."""

    return Decoder().write(stream, sink)


__all__ = [
    "Decoder",
    "decode_and_write",
    "decode_to_buffer",
    "decode_to_bytes",
    "decode_to_text",
]

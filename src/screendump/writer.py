"""Serialise assembled rows into the HTML fragment."""
from __future__ import annotations

from typing import Iterator, Protocol

from .assembler import Document, Row, TaggedCell, Unit
from .errors import StreamWriteError

ROW_SEPARATOR = "\n"


class ByteSink(Protocol):
    """Minimal push interface accepted as decoder output."""

    def write(self, data: bytes, /) -> object:
        ...


def render_unit(unit: Unit) -> str:
    """Return the ``<span>`` element for a run or tagged cell."""

    style = unit.foreground.fg() + unit.background.bg()
    if isinstance(unit, TaggedCell):
        return (
            f'<span data-xy="{unit.row}x{unit.column}" style="{style}">'
            f"{unit.text}</span>"
        )
    return f'<span style="{style}">{unit.text}</span>'


def render_row(row: Row) -> str:
    return "".join(render_unit(unit) for unit in row) + ROW_SEPARATOR


def iter_fragments(document: Document) -> Iterator[str]:
    """Yield the container tags and each rendered row in order."""

    yield "<div>"
    for row in document:
        yield render_row(row)
    yield "</div>"


def render_document(document: Document) -> str:
    """Return ``document`` as one HTML fragment wrapped in a ``<div>``."""

    return "".join(iter_fragments(document))


def write_document(
    document: Document, sink: ByteSink | None, *, encoding: str = "utf-8"
) -> int:
    """Write ``document`` to ``sink`` and return the number of bytes written.

    A ``None`` sink discards the output; the encoded length is still returned.
    """

    payload = render_document(document).encode(encoding)
    if sink is None:
        return len(payload)
    return write_all(payload, sink)


def write_all(payload: bytes, sink: ByteSink) -> int:
    """Write every byte of ``payload``, retrying after short writes."""

    view = memoryview(payload)
    written = 0
    while written < len(payload):
        try:
            count = sink.write(view[written:])
        except OSError as exc:
            raise StreamWriteError(f"screen dump write failed: {exc}") from exc
        if not count:
            raise StreamWriteError(
                f"screen dump write stalled after {written} of {len(payload)} bytes"
            )
        written += int(count)
    return written


__all__ = [
    "ByteSink",
    "ROW_SEPARATOR",
    "iter_fragments",
    "render_document",
    "render_row",
    "render_unit",
    "write_all",
    "write_document",
]

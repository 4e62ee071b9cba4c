from __future__ import annotations

import io

import pytest

from screendump import (
    Decoder,
    MissingInputError,
    Palette,
    StreamReadError,
    decode_and_write,
    decode_to_buffer,
    decode_to_bytes,
    decode_to_text,
)
from screendump.config import DecoderOptions

SAMPLE = bytes([0x41, 0x00, 0x42, 0x08])
EXPECTED = (
    '<div><span style="color:#000;background-color:#000;">A</span>'
    '<span style="color:#555;background-color:#000;">B</span>\n</div>'
)


class FailingStream:
    def read(self, size: int = -1) -> bytes:
        raise OSError("disk unplugged")


def test_decode_to_buffer_standard_palette() -> None:
    buffer = decode_to_buffer(io.BytesIO(SAMPLE), 160, 0, Palette.STANDARD_CGA, "cp437")

    assert buffer.tell() == 0
    assert buffer.read().decode("utf-8") == EXPECTED


def test_decode_to_buffer_revised_palette() -> None:
    buffer = decode_to_buffer(io.BytesIO(SAMPLE), 160, 0, Palette.REVISED_CGA, None)

    assert buffer.getvalue().decode("utf-8") == EXPECTED.replace("#555", "#4e4e4e")


def test_decode_to_bytes_uses_defaults() -> None:
    assert decode_to_bytes(io.BytesIO(SAMPLE)) == EXPECTED.encode("utf-8")


def test_decode_to_text_uses_defaults() -> None:
    assert decode_to_text(io.BytesIO(SAMPLE)) == EXPECTED


def test_decode_and_write_reports_byte_count() -> None:
    sink = io.BytesIO()

    count = decode_and_write(io.BytesIO(SAMPLE), sink)

    assert count == 124
    assert sink.getvalue().decode("utf-8") == EXPECTED


def test_truncated_trailing_byte_is_ignored() -> None:
    assert decode_to_text(io.BytesIO(b"\x41\x00\x42")) == decode_to_text(io.BytesIO(b"\x41\x00"))


def test_empty_stream_renders_empty_container() -> None:
    assert decode_to_text(io.BytesIO(b"")) == "<div></div>"


def test_two_full_rows_leave_no_partial_row() -> None:
    width = 80
    data = bytes([0x20, 0x17]) * (width * 2)

    document = Decoder(width=width).decode(io.BytesIO(data))

    assert len(document) == 2
    assert all(row.cell_count == width for row in document)
    assert all(len(row) == 1 for row in document)


def test_default_width_is_160_columns() -> None:
    data = bytes([0x20, 0x07]) * 161

    document = Decoder().decode(io.BytesIO(data))

    assert [row.cell_count for row in document] == [160, 1]


@pytest.mark.parametrize("width", [0, -5])
def test_non_positive_width_falls_back_to_default(width: int) -> None:
    assert Decoder(width=width).width == 160


def test_negative_max_rows_means_unlimited() -> None:
    assert Decoder(max_rows=-1).max_rows == 0


def test_max_rows_ignores_trailing_garbage() -> None:
    data = bytes([0x41, 0x07]) * 4 + b"\x00" * 64

    html = Decoder(width=2, max_rows=2).render(io.BytesIO(data))

    assert html.count("\n") == 2
    assert "\x00" not in html


def test_debug_decoder_tags_each_cell() -> None:
    html = Decoder(debug=True).render(io.BytesIO(SAMPLE))

    assert html == (
        '<div><span data-xy="1x1" style="color:#000;background-color:#000;">A</span>'
        '<span data-xy="1x2" style="color:#555;background-color:#000;">B</span>\n</div>'
    )


def test_decoder_from_options() -> None:
    options = DecoderOptions(width=40, max_rows=25, palette=Palette.REVISED_CGA, code_page="IBM850")

    decoder = Decoder.from_options(options)

    assert decoder.width == 40
    assert decoder.max_rows == 25
    assert decoder.palette is Palette.REVISED_CGA
    assert decoder.code_page == "cp850"


def test_decoder_is_reusable_between_streams() -> None:
    decoder = Decoder()

    first = decoder.render(io.BytesIO(SAMPLE))
    second = decoder.render(io.BytesIO(SAMPLE))

    assert first == second == EXPECTED


@pytest.mark.parametrize(
    "operation",
    [
        lambda: decode_to_buffer(None),
        lambda: decode_to_bytes(None),
        lambda: decode_to_text(None),
        lambda: decode_and_write(None, io.BytesIO()),
        lambda: Decoder().decode(None),
    ],
)
def test_missing_input_is_rejected(operation) -> None:
    with pytest.raises(MissingInputError):
        operation()


def test_read_failure_aborts_decode() -> None:
    sink = io.BytesIO()

    with pytest.raises(StreamReadError, match="disk unplugged"):
        decode_and_write(FailingStream(), sink)

    assert sink.getvalue() == b""

"""Transcode PC text-mode binary screen dumps into styled HTML fragments."""
from __future__ import annotations

from .assembler import Document, Row, RowAssembler, Run, TaggedCell, assemble
from .attributes import AttributeIndex, check_attribute, decode_attribute
from .charset import DEFAULT_CODE_PAGE, CharacterMapper
from .config import DecoderOptions, load_decoder_options
from .decoder import (
    Decoder,
    decode_and_write,
    decode_to_buffer,
    decode_to_bytes,
    decode_to_text,
)
from .errors import (
    CodePageError,
    DecoderConfigError,
    InvalidAttributeError,
    MissingInputError,
    ScreenDumpError,
    StreamReadError,
    StreamWriteError,
)
from .palette import Color, Palette, cga_colors, color_for, colors_for, revised_cga_colors
from .tokenizer import VideoCell, iter_cells
from .writer import render_document, write_document

__all__ = [
    "AttributeIndex",
    "CharacterMapper",
    "CodePageError",
    "Color",
    "DEFAULT_CODE_PAGE",
    "Decoder",
    "DecoderConfigError",
    "DecoderOptions",
    "Document",
    "InvalidAttributeError",
    "MissingInputError",
    "Palette",
    "Row",
    "RowAssembler",
    "Run",
    "ScreenDumpError",
    "StreamReadError",
    "StreamWriteError",
    "TaggedCell",
    "VideoCell",
    "assemble",
    "cga_colors",
    "check_attribute",
    "color_for",
    "colors_for",
    "decode_and_write",
    "decode_attribute",
    "decode_to_buffer",
    "decode_to_bytes",
    "decode_to_text",
    "iter_cells",
    "load_decoder_options",
    "render_document",
    "revised_cga_colors",
    "write_document",
]

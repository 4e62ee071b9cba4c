"""Single-byte code page translation for screen dump characters."""
from __future__ import annotations

import codecs
import html
from typing import Final

from .errors import CodePageError

DEFAULT_CODE_PAGE: Final[str] = "cp437"


def _build_glyph_table(code_page: str) -> tuple[str, tuple[str, ...]]:
    """Return the canonical codec name and the 256 glyphs of ``code_page``.

    Bytes the code page leaves undefined decode to U+FFFD.  Codecs that do not
    map every byte to exactly one character are rejected; an incremental
    decoder that holds a byte back waiting for more input marks a multi-byte
    encoding such as UTF-8.
    """

    try:
        info = codecs.lookup(code_page)
    except LookupError as exc:
        raise CodePageError(f"unknown code page {code_page!r}") from exc
    if info.incrementaldecoder is None:
        raise CodePageError(f"code page {code_page!r} cannot decode bytes")

    try:
        glyphs = tuple(
            info.incrementaldecoder("replace").decode(bytes((byte,)), final=False)
            for byte in range(256)
        )
        whole, _ = info.decode(bytes(range(256)), "replace")
    except (TypeError, ValueError) as exc:
        raise CodePageError(f"code page {code_page!r} cannot decode bytes") from exc

    single_byte = all(isinstance(glyph, str) and len(glyph) == 1 for glyph in glyphs)
    if not single_byte or whole != "".join(glyphs):
        raise CodePageError(
            f"code page {code_page!r} is not a single-byte character set"
        )
    return info.name, glyphs


class CharacterMapper:
    """Translate screen bytes into escaped glyphs under one code page."""

    def __init__(self, code_page: str | None = None) -> None:
        self.code_page, self._glyphs = _build_glyph_table(code_page or DEFAULT_CODE_PAGE)
        self._escaped = tuple(html.escape(glyph, quote=True) for glyph in self._glyphs)

    def glyph(self, byte: int) -> str:
        """Return the unescaped glyph for ``byte``."""

        return self._glyphs[int(byte) & 0xFF]

    def map(self, byte: int) -> str:
        """Return the glyph for ``byte`` escaped for embedding in HTML."""

        return self._escaped[int(byte) & 0xFF]


__all__ = ["CharacterMapper", "DEFAULT_CODE_PAGE"]

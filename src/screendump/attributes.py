"""Decode PC text-mode video attribute bytes into colour indices."""
from __future__ import annotations

from typing import Final, NamedTuple

from .errors import InvalidAttributeError

LAST_COLOR_INDEX: Final[int] = 15


class AttributeIndex(NamedTuple):
    """Foreground and background palette indices of one attribute byte."""

    foreground: int
    background: int


def decode_attribute(attribute: int) -> AttributeIndex:
    """Split ``attribute`` into its foreground and background indices.

    Bits 0-2 hold the base foreground colour and bit 3 the intensity flag,
    giving a foreground index of 0-15.  Bits 4-6 hold the background colour
    (0-7); bit 7 is the blink flag and is ignored.
    """

    raw = int(attribute) & 0xFF
    foreground = (raw & 0x07) | (((raw >> 3) & 0x01) << 3)
    background = (raw >> 4) & 0x07
    return AttributeIndex(foreground, background)


def check_attribute(attribute: int, index: AttributeIndex) -> AttributeIndex:
    """Return ``index`` after confirming both components address the palette."""

    if index.foreground > LAST_COLOR_INDEX:
        raise InvalidAttributeError(attribute, index.foreground, "foreground")
    if index.background > LAST_COLOR_INDEX:
        raise InvalidAttributeError(attribute, index.background, "background")
    return index


__all__ = ["AttributeIndex", "LAST_COLOR_INDEX", "check_attribute", "decode_attribute"]

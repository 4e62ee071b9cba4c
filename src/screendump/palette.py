"""CGA colour tables used to style decoded screen cells."""
from __future__ import annotations

from enum import Enum
from typing import Final, Tuple


class Palette(Enum):
    """Selectable 16 colour tables indexed by a decoded attribute component."""

    STANDARD_CGA = "standard"
    REVISED_CGA = "revised"

    @classmethod
    def from_name(cls, name: str) -> "Palette":
        """Resolve ``name`` from either a member value or a member name."""

        normalized = str(name).strip().lower()
        for member in cls:
            if normalized in (member.value, member.name.lower()):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"unknown palette {name!r} (expected one of: {choices})")


class Color(str):
    """Hexadecimal RGB triplet or sextet rendered as CSS declarations."""

    __slots__ = ()

    def fg(self) -> str:
        """Return the CSS ``color`` declaration or ``""`` when unset."""

        if not self:
            return ""
        return f"color:#{self};"

    def bg(self) -> str:
        """Return the CSS ``background-color`` declaration or ``""`` when unset."""

        if not self:
            return ""
        return f"background-color:#{self};"


Colors = Tuple[Color, ...]

PALETTE_SIZE: Final[int] = 16

_STANDARD_CGA: Final[Colors] = tuple(
    Color(value)
    for value in (
        "000",  # 00 black
        "00a",  # 01 blue
        "0a0",  # 02 green
        "0aa",  # 03 cyan
        "a00",  # 04 red
        "a0a",  # 05 magenta
        "a50",  # 06 brown
        "aaa",  # 07 gray
        "555",  # 08 intense black
        "55f",  # 09 intense blue
        "5f5",  # 10 intense green
        "5ff",  # 11 intense cyan
        "f55",  # 12 intense red
        "f5f",  # 13 intense magenta
        "ff5",  # 14 yellow
        "fff",  # 15 white
    )
)

# Measured IBM 5153 monitor output; black and white are unchanged.
_REVISED_CGA: Final[Colors] = tuple(
    Color(value)
    for value in (
        "000",
        "0000c4",
        "00c400",
        "00c4c4",
        "c40000",
        "c400c4",
        "c47e00",
        "c4c4c4",
        "4e4e4e",
        "4e4edc",
        "4edc4e",
        "4ef3f3",
        "dc4e4e",
        "f34ef3",
        "f3f34e",
        "fff",
    )
)


def cga_colors() -> Colors:
    """Return the colour set IBM defined for the 1981 Color Graphics Adapter."""

    return _STANDARD_CGA


def revised_cga_colors() -> Colors:
    """Return the revised CGA colour set."""

    return _REVISED_CGA


def colors_for(palette: Palette) -> Colors:
    """Return the 16 entry colour table for ``palette``."""

    if palette is Palette.REVISED_CGA:
        return revised_cga_colors()
    return cga_colors()


def color_for(index: int, palette: Palette = Palette.STANDARD_CGA) -> Color:
    """Return the colour at ``index`` within ``palette``."""

    if not 0 <= index < PALETTE_SIZE:
        raise IndexError(f"colour index {index} outside 0-{PALETTE_SIZE - 1}")
    return colors_for(palette)[index]


__all__ = [
    "Color",
    "Colors",
    "PALETTE_SIZE",
    "Palette",
    "color_for",
    "colors_for",
    "cga_colors",
    "revised_cga_colors",
]

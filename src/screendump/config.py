"""Decoder option defaults and TOML configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import tomllib

from .assembler import DEFAULT_WIDTH
from .charset import DEFAULT_CODE_PAGE, CharacterMapper
from .errors import CodePageError, DecoderConfigError
from .palette import Palette


@dataclass(frozen=True)
class DecoderOptions:
    """Settings applied to every decode run by a :class:`Decoder`."""

    width: int = DEFAULT_WIDTH
    max_rows: int = 0
    palette: Palette = Palette.STANDARD_CGA
    code_page: str = DEFAULT_CODE_PAGE
    debug: bool = False

    def with_overrides(self, **overrides: Any) -> "DecoderOptions":
        """Return a copy with ``overrides`` applied, skipping ``None`` values."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)


_KNOWN_KEYS = frozenset(option.name for option in fields(DecoderOptions))


def load_decoder_options(config_path: Path) -> DecoderOptions:
    """Parse and validate the ``[decoder]`` table of ``config_path``."""

    with config_path.open("rb") as stream:
        try:
            raw_data = tomllib.load(stream)
        except tomllib.TOMLDecodeError as exc:
            raise DecoderConfigError(f"{config_path}: {exc}") from exc

    return parse_decoder_options(raw_data)


def parse_decoder_options(data: Mapping[str, Any]) -> DecoderOptions:
    """Build :class:`DecoderOptions` from already parsed TOML ``data``."""

    section = data.get("decoder")
    if section is None:
        raise DecoderConfigError("decoder configuration requires a [decoder] table")
    if not isinstance(section, Mapping):
        raise DecoderConfigError("[decoder] section must be a mapping")

    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        raise DecoderConfigError(f"unknown [decoder] keys: {', '.join(unknown)}")

    defaults = DecoderOptions()
    return DecoderOptions(
        width=_coerce_count(section.get("width", defaults.width), "width", minimum=1),
        max_rows=_coerce_count(section.get("max_rows", defaults.max_rows), "max_rows"),
        palette=_coerce_palette(section.get("palette", defaults.palette)),
        code_page=_coerce_code_page(section.get("code_page", defaults.code_page)),
        debug=_coerce_flag(section.get("debug", defaults.debug), "debug"),
    )


def _coerce_count(raw: Any, name: str, *, minimum: int = 0) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise DecoderConfigError(f"{name} must be an integer")
    if raw < minimum:
        raise DecoderConfigError(f"{name} must be at least {minimum}, received {raw}")
    return raw


def _coerce_palette(raw: Any) -> Palette:
    if isinstance(raw, Palette):
        return raw
    if not isinstance(raw, str):
        raise DecoderConfigError("palette must be a string")
    try:
        return Palette.from_name(raw)
    except ValueError as exc:
        raise DecoderConfigError(str(exc)) from exc


def _coerce_code_page(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise DecoderConfigError("code_page must be a non-empty string")
    try:
        return CharacterMapper(raw.strip()).code_page
    except CodePageError as exc:
        raise DecoderConfigError(str(exc)) from exc


def _coerce_flag(raw: Any, name: str) -> bool:
    if not isinstance(raw, bool):
        raise DecoderConfigError(f"{name} must be a boolean")
    return raw


__all__ = ["DecoderOptions", "load_decoder_options", "parse_decoder_options"]

"""Run-merging row assembler for decoded screen cells."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Iterable, Iterator, List, Tuple, Union

from .attributes import check_attribute, decode_attribute
from .charset import CharacterMapper
from .palette import Color, Colors, Palette, colors_for
from .tokenizer import VideoCell

LOGGER = logging.getLogger(__name__)

DEFAULT_WIDTH: Final[int] = 160


@dataclass(frozen=True)
class Run:
    """Consecutive cells of one row sharing a raw attribute byte."""

    attribute: int
    foreground: Color
    background: Color
    text: str = ""
    length: int = 0


@dataclass
class _OpenRun:
    """Run still accepting cells; frozen into a :class:`Run` when closed."""

    attribute: int
    foreground: Color
    background: Color
    glyphs: List[str] = field(default_factory=list)

    def freeze(self) -> Run:
        return Run(
            self.attribute,
            self.foreground,
            self.background,
            "".join(self.glyphs),
            len(self.glyphs),
        )


@dataclass(frozen=True)
class TaggedCell:
    """A single cell tagged with its 1-based row and column."""

    row: int
    column: int
    foreground: Color
    background: Color
    text: str

    @property
    def length(self) -> int:
        return 1


Unit = Union[Run, TaggedCell]


@dataclass(frozen=True)
class Row:
    """A closed row of runs or tagged cells."""

    units: Tuple[Unit, ...]

    @property
    def cell_count(self) -> int:
        return sum(unit.length for unit in self.units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)


@dataclass
class Document:
    """Ordered rows produced by a single decode."""

    rows: List[Row] = field(default_factory=list)
    truncated: bool = False

    @property
    def cell_count(self) -> int:
        return sum(row.cell_count for row in self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


class RowAssembler:
    """Accumulate cells into rows, merging same-attribute runs.

    An assembler owns the state of exactly one decode.  Rows close once
    ``width`` cells were written; when ``max_rows`` is positive the assembler
    stops accepting cells after that many rows have closed.
    """

    def __init__(
        self,
        *,
        width: int = DEFAULT_WIDTH,
        max_rows: int = 0,
        colors: Colors | None = None,
        mapper: CharacterMapper | None = None,
        debug: bool = False,
    ) -> None:
        if width <= 0:
            raise ValueError("width must be a positive number of columns")
        self.width = width
        self.max_rows = max(0, max_rows)
        self.colors = colors if colors is not None else colors_for(Palette.STANDARD_CGA)
        self.mapper = mapper or CharacterMapper()
        self.debug = debug
        self.column = 1
        self.row = 1
        self.truncated = False
        self._units: List[Unit] = []
        self._run: _OpenRun | None = None
        self._rows: List[Row] = []
        self._finished = False

    @property
    def rows(self) -> Tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def accepting(self) -> bool:
        """Return ``False`` once a row limit stopped the decode."""

        return not (self.truncated or self._finished)

    def push(self, cell: VideoCell) -> bool:
        """Append ``cell`` and return whether further cells are accepted."""

        if not self.accepting:
            return False
        character, attribute = cell
        index = check_attribute(attribute, decode_attribute(attribute))
        text = self.mapper.map(character)
        foreground = self.colors[index.foreground]
        background = self.colors[index.background]

        if self.debug:
            self._units.append(
                TaggedCell(self.row, self.column, foreground, background, text)
            )
        elif self._run is not None and self._run.attribute == attribute:
            self._run.glyphs.append(text)
        else:
            self._close_run()
            self._run = _OpenRun(attribute, foreground, background, [text])

        if self.column >= self.width:
            self._close_row()
            if self.max_rows and self.row > self.max_rows:
                LOGGER.debug("row limit %d reached; ignoring remaining input", self.max_rows)
                self.truncated = True
                return False
            return True
        self.column += 1
        return True

    def finish(self) -> Document:
        """Flush any partial row and return the assembled document."""

        if not self._finished:
            # column only moves past 1 once a cell landed in the open row
            if not self.truncated and self.column > 1:
                self._close_row()
            self._finished = True
        return Document(rows=list(self._rows), truncated=self.truncated)

    def _close_run(self) -> None:
        if self._run is not None:
            self._units.append(self._run.freeze())
            self._run = None

    def _close_row(self) -> None:
        self._close_run()
        self._rows.append(Row(tuple(self._units)))
        self._units = []
        self.row += 1
        self.column = 1


def assemble(
    cells: Iterable[VideoCell],
    *,
    width: int = DEFAULT_WIDTH,
    max_rows: int = 0,
    colors: Colors | None = None,
    mapper: CharacterMapper | None = None,
    debug: bool = False,
) -> Document:
    """Assemble ``cells`` into a :class:`Document` with a fresh assembler."""

    assembler = RowAssembler(
        width=width, max_rows=max_rows, colors=colors, mapper=mapper, debug=debug
    )
    for cell in cells:
        if not assembler.push(cell):
            break
    document = assembler.finish()
    LOGGER.debug(
        "assembled %d rows (%d cells, truncated=%s)",
        len(document),
        document.cell_count,
        document.truncated,
    )
    return document


__all__ = [
    "DEFAULT_WIDTH",
    "Document",
    "Row",
    "RowAssembler",
    "Run",
    "TaggedCell",
    "Unit",
    "assemble",
]

"""Command line front end that converts a screen dump file into HTML."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Sequence

from .config import DecoderOptions, load_decoder_options
from .decoder import Decoder
from .errors import ScreenDumpError
from .palette import Palette
from .writer import write_document

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return parsed command-line arguments for the converter."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "input",
        help="Binary screen dump to convert ('-' reads standard input)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Where to write the HTML fragment (defaults to standard output)",
    )
    parser.add_argument("--width", type=int, help="Columns per row (default 160)")
    parser.add_argument(
        "--max-rows",
        type=int,
        help="Stop after this many rows; 0 reads to the end of the dump",
    )
    parser.add_argument(
        "--palette",
        choices=[member.value for member in Palette],
        help="CGA colour table used for the attribute colours",
    )
    parser.add_argument("--code-page", help="Python codec name for the character set")
    parser.add_argument(
        "--debug",
        action="store_const",
        const=True,
        help="Wrap every cell in its own span tagged with its coordinates",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="TOML file with a [decoder] table; command-line options take precedence",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity for the converter.",
    )
    return parser.parse_args(argv)


def resolve_options(args: argparse.Namespace) -> DecoderOptions:
    """Merge the optional configuration file with command-line overrides."""

    options = DecoderOptions()
    if args.config is not None:
        if not args.config.is_file():
            raise SystemExit(f"configuration file not found: {args.config}")
        options = load_decoder_options(args.config)
    return options.with_overrides(
        width=args.width,
        max_rows=args.max_rows,
        palette=Palette.from_name(args.palette) if args.palette else None,
        code_page=args.code_page,
        debug=args.debug,
    )


def _convert(decoder: Decoder, source: BinaryIO, output: Path | None) -> int:
    # decode completely before the output file is opened and truncated
    document = decoder.decode(source)
    if output is None:
        count = write_document(document, sys.stdout.buffer)
        sys.stdout.buffer.flush()
        return count
    with output.open("wb") as sink:
        return write_document(document, sink)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``screendump`` command."""

    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        decoder = Decoder.from_options(resolve_options(args))
        if args.input == "-":
            count = _convert(decoder, sys.stdin.buffer, args.output)
        else:
            input_path = Path(args.input)
            if not input_path.is_file():
                raise SystemExit(f"screen dump not found: {input_path}")
            with input_path.open("rb") as source:
                count = _convert(decoder, source, args.output)
    except ScreenDumpError as exc:
        raise SystemExit(f"error: {exc}") from exc

    LOGGER.info("wrote %d bytes to %s", count, args.output or "<stdout>")
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    raise SystemExit(main())

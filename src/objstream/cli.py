"""Command line entry point.

Usage::

    # Vertex / face / error counts for one or more files
    python -m objstream stats model.obj other.obj --show-errors

    # Dump the lexer token stream
    python -m objstream tokens model.obj
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from objstream.builders import MeshBuilder
from objstream.config import LOG_FORMAT, ParserConfig
from objstream.errors import ObjReadError
from objstream.formats.lexer import Lexer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="objstream",
        description="Inspect Wavefront OBJ files."
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--encoding",
        default=ParserConfig().encoding,
        help="Text encoding of the input files (default: %(default)s).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    stats = subparsers.add_parser("stats", help="Print record counts per file.")
    stats.add_argument("files", nargs="+", type=Path, help="OBJ files to read")
    stats.add_argument(
        "--max-errors",
        type=int,
        default=None,
        help="Stop reading a file after this many line errors.",
    )
    stats.add_argument(
        "--show-errors",
        action="store_true",
        help="Print every line error.",
    )

    tokens = subparsers.add_parser("tokens", help="Print the token stream of a file.")
    tokens.add_argument("file", type=Path, help="OBJ file to tokenize")

    return parser


def _stats(files: list[Path], config: ParserConfig, max_errors: Optional[int], show_errors: bool) -> int:
    status = 0
    for path in tqdm(files, desc="Reading", disable=len(files) < 2):
        builder = MeshBuilder(name=path.stem, max_errors=max_errors)
        try:
            with open(path, "rb") as f:
                summary = builder.read(f, config)
        except (OSError, ObjReadError) as e:
            logger.error(f"{path}: {e}")
            status = 1
            continue

        stopped = " (stopped)" if summary.stopped else ""
        print(f"{path}: {summary.lines} lines{stopped}, "
              f"{len(builder.vertices)} vertices, {len(builder.texcoords)} texcoords, "
              f"{len(builder.polygons)} faces, {len(builder.comments)} comments, "
              f"{len(builder.errors)} errors")
        if show_errors:
            for error in builder.errors:
                print(f"  {error}")
    return status


def _tokens(path: Path, config: ParserConfig) -> int:
    try:
        with open(path, "rb") as f:
            for token in Lexer(f, chunk_size=config.chunk_size, encoding=config.encoding):
                print(f"{token.line}\t{token.type.name}\t{token.text}")
    except (OSError, ObjReadError) as e:
        logger.error(f"{path}: {e}")
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "max_errors", None) is not None and args.max_errors < 1:
        parser.error("--max-errors must be a positive integer")
    logging.basicConfig(format=LOG_FORMAT, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = ParserConfig(encoding=args.encoding)
    except ValueError as e:
        logger.error(str(e))
        return 2

    if args.command == "stats":
        return _stats(args.files, config, args.max_errors, args.show_errors)
    return _tokens(args.file, config)


if __name__ == "__main__":
    sys.exit(main())

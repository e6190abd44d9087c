"""Command-line interface for carbon2html.

Usage::

    carbon2html document.json                 # HTML to stdout
    carbon2html document.json -o page.html    # write to a file
    cat document.json | carbon2html -         # read stdin
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from carbon2html import __version__
from carbon2html.converter import Converter
from carbon2html.exceptions import Carbon2htmlError
from carbon2html.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carbon2html",
        description="Render Carbon editor JSON documents as HTML.",
    )
    parser.add_argument("input", help="Path to the Carbon JSON file, or '-' for stdin.")
    parser.add_argument("-o", "--output", help="Output HTML path. Defaults to stdout.")
    parser.add_argument(
        "--min-chars",
        type=int,
        default=None,
        help="Paragraph length threshold for custom inserts.",
    )
    parser.add_argument("-e", "--encoding", default="utf-8", help="Input file encoding (default: %(default)s).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = _build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        if args.input == "-":
            json_text = sys.stdin.read()
        else:
            input_path = Path(args.input)
            if not input_path.is_file():
                print(f"Error: file not found: {input_path}", file=sys.stderr)
                return 1
            json_text = input_path.read_text(encoding=args.encoding)
    except UnicodeDecodeError as exc:
        print(f"Error: input is not valid {args.encoding}: {exc}", file=sys.stderr)
        return 1

    try:
        html = Converter(insert_min_chars=args.min_chars).convert(json_text)
    except Carbon2htmlError as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html + "\n", encoding="utf-8")
    else:
        print(html)
    return 0


if __name__ == "__main__":
    sys.exit(main())

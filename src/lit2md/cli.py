"""Command line interface for lit2md.

Usage:
    lit2md --input=main.go --output=main.md
    lit2md --input=top.vhd --output=top.md --fence-label=vhdl
    lit2md --input=notes.txt --output=notes.md --comment="#" --delimiter="!"

The comment style and fence label come from the input file extension
(or --lang); --comment and --fence-label override them.

Exit status is 0 on success, 1 when the conversion fails and 2 for usage
errors such as a missing --input or --output.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from lit2md import __version__
from lit2md.config import DEFAULT_DELIMITER, ConvertConfig
from lit2md.errors import Lit2MdError
from lit2md.files import convert_file
from lit2md.profiling import profiled_convert
from lit2md.utils.logger import get_logger

logger = get_logger("cli")

LOG_FORMAT = "lit2md: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lit2md",
        description="Convert a literate source file to Markdown",
    )
    parser.add_argument("--input", required=True, help="input filename (code)")
    parser.add_argument("--output", required=True, help="output filename (markdown)")
    parser.add_argument(
        "--lang",
        metavar="EXT",
        help="pick the language by this extension instead of the input's (e.g. go, .vhd)",
    )
    parser.add_argument("--comment", metavar="STR", help="comment start, e.g. '--' or '//'")
    parser.add_argument(
        "--delimiter",
        metavar="STR",
        default=DEFAULT_DELIMITER,
        help=f"marker after the comment start that flags doc lines (default: {DEFAULT_DELIMITER!r})",
    )
    parser.add_argument("--fence-label", metavar="STR", help="label for opening code fences")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more (-vv for debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> None:
    """Convert ``args.input`` into ``args.output``.

    Raises:
        Lit2MdError: On configuration or open failures.
        OSError: On read or write failures.
    """
    config = ConvertConfig.for_path(
        args.input,
        extension=args.lang,
        comment_start=args.comment,
        delimiter=args.delimiter,
        fence_label=args.fence_label,
    )
    with profiled_convert() as metrics:
        convert_file(args.input, args.output, config)
    logger.info("wrote %s: %s", args.output, metrics.summary())


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        run(args)
    except (Lit2MdError, OSError) as e:
        logger.error("error: %s", e)
        return 1
    return 0

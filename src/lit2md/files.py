"""File handling around the converter.

Opens the literate source and the Markdown destination, and wraps open
failures in SourceFileError so the command line can report which path
was at fault. Once both files are open, read and write errors propagate
unchanged.

Example:
    >>> from lit2md.config import ConvertConfig
    >>> from lit2md.files import convert_file
    >>> convert_file("rtl/top.vhd", "docs/top.md", ConvertConfig.for_path("rtl/top.vhd"))

"""

from __future__ import annotations

from contextlib import ExitStack
from os import PathLike, fspath
from typing import TextIO

from lit2md.config import ConvertConfig
from lit2md.errors import SourceFileError
from lit2md.utils.logger import get_logger

logger = get_logger(__name__)

ENCODING = "utf-8"


def open_source(path: str | PathLike[str]) -> TextIO:
    """Open a literate source for reading.

    Lines are split on "\\n" only and carriage returns are left in place;
    the scanner drops the one before each line break.

    Raises:
        SourceFileError: If the file cannot be opened.
    """
    try:
        return open(path, encoding=ENCODING, newline="\n")
    except OSError as e:
        raise SourceFileError(fspath(path), e.strerror or str(e)) from e


def open_destination(path: str | PathLike[str]) -> TextIO:
    """Create (or truncate) the Markdown destination.

    Raises:
        SourceFileError: If the file cannot be created.
    """
    try:
        return open(path, "w", encoding=ENCODING, newline="\n")
    except OSError as e:
        raise SourceFileError(fspath(path), e.strerror or str(e)) from e


def convert_file(
    input_path: str | PathLike[str],
    output_path: str | PathLike[str],
    config: ConvertConfig,
) -> None:
    """Convert a literate source file into a Markdown file.

    The source is opened before the destination, so a missing source never
    truncates an existing destination.

    Args:
        input_path: Literate source to read
        output_path: Markdown file to create or overwrite
        config: Comment style and fence label

    Raises:
        SourceFileError: If either file cannot be opened.
        OSError: If reading or writing fails after opening.
    """
    from lit2md import convert_lines

    logger.debug("converting %s -> %s", fspath(input_path), fspath(output_path))
    with ExitStack() as stack:
        src = stack.enter_context(open_source(input_path))
        dst = stack.enter_context(open_destination(output_path))
        convert_lines(src, dst, config, source_file=fspath(input_path))


__all__ = [
    "ENCODING",
    "convert_file",
    "open_destination",
    "open_source",
]

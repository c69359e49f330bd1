"""
lit2md — Literate source to Markdown

Turns source files whose documentation is written in specially marked
comment lines into Markdown: the comments become prose, everything else
becomes fenced code. No tangling, no reordering, one streaming pass.

Quick Start:
    >>> from lit2md import convert_string
    >>> print(convert_string("--] # Hello\\nreport \\"hi\\";", "--", "vhdl"), end="")
    # Hello
    <BLANKLINE>
    ```vhdl
    report "hi";
    ```

    >>> # Stream between files
    >>> import sys
    >>> from lit2md import convert
    >>> with open("top.vhd") as src:
    ...     convert(src, sys.stdout, "--", "vhdl")

    >>> # Pick the comment style from the file name
    >>> from lit2md import ConvertConfig, convert_file
    >>> convert_file("main.go", "main.md", ConvertConfig.for_path("main.go"))

Installation:
    pip install lit2md              # Library and `lit2md` command (zero deps)
"""

from collections.abc import Iterable
from io import StringIO
from typing import TextIO

from lit2md.config import DEFAULT_DELIMITER, ConvertConfig
from lit2md.errors import (
    ConfigError,
    Lit2MdError,
    SourceFileError,
    UnknownLanguageError,
)
from lit2md.files import convert_file
from lit2md.languages import (
    LANGUAGES,
    LanguageSpec,
    language_for_extension,
    language_for_path,
)
from lit2md.location import SourceLocation
from lit2md.profiling import ConvertAccumulator, get_convert_accumulator, profiled_convert
from lit2md.renderers import LineRenderer, MarkdownRenderer
from lit2md.scanner import DocComment, Scanner, ScannerState
from lit2md.tokens import LineType, OutputLine
from lit2md.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def convert_lines(
    lines: Iterable[str],
    out: TextIO,
    config: ConvertConfig,
    *,
    source_file: str | None = None,
    renderer: LineRenderer | None = None,
) -> int:
    """Convert a stream of literate source lines, writing Markdown to ``out``.

    Args:
        lines: Line source (an open text file, a list of strings, ...)
        out: Writable text sink
        config: Comment style and fence label
        source_file: Optional source file path for locations and logs
        renderer: Output renderer (MarkdownRenderer if None)

    Returns:
        Number of output lines written.

    Errors raised while reading ``lines`` or writing ``out`` propagate
    unchanged; output written before the failure is left as is.
    """
    scanner = Scanner(lines, config, source_file=source_file)
    written = (renderer or MarkdownRenderer()).write(scanner.scan(), out)
    logger.debug(
        "converted %s: %d lines in, %d lines out",
        source_file or "<stream>",
        scanner.lineno,
        written,
    )
    return written


def convert(
    lines: Iterable[str],
    out: TextIO,
    comment_start: str,
    fence_label: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> None:
    """Convert literate source lines to Markdown.

    Args:
        lines: Line source, consumed front to back exactly once
        out: Writable text sink
        comment_start: Line comment opener ("--", "//", "#", or empty)
        fence_label: Label for opening fences (empty for a plain fence)
        delimiter: Marker after comment_start that flags doc lines

    Example:
        >>> out = StringIO()
        >>> convert(["Code"], out, "--", "vhdl")
        >>> out.getvalue()
        '```vhdl\\nCode\\n```\\n'
    """
    config = ConvertConfig(
        comment_start=comment_start,
        delimiter=delimiter,
        fence_label=fence_label,
    )
    convert_lines(lines, out, config)


def convert_string(
    source: str,
    comment_start: str = "",
    fence_label: str = "",
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Convert a literate source string to a Markdown string.

    The source is split on "\\n" only.

    Example:
        >>> convert_string("")
        ''
    """
    out = StringIO()
    convert(
        StringIO(source, newline="\n"),
        out,
        comment_start,
        fence_label,
        delimiter=delimiter,
    )
    return out.getvalue()


__all__ = [
    # Main API
    "convert",
    "convert_file",
    "convert_lines",
    "convert_string",
    # Configuration
    "ConvertConfig",
    "DEFAULT_DELIMITER",
    "LANGUAGES",
    "LanguageSpec",
    "language_for_extension",
    "language_for_path",
    # Scanner
    "DocComment",
    "Scanner",
    "ScannerState",
    "LineType",
    "OutputLine",
    "SourceLocation",
    # Rendering
    "LineRenderer",
    "MarkdownRenderer",
    # Profiling
    "ConvertAccumulator",
    "get_convert_accumulator",
    "profiled_convert",
    # Errors
    "ConfigError",
    "Lit2MdError",
    "SourceFileError",
    "UnknownLanguageError",
]

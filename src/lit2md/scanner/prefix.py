"""Doc comment prefix recognizer.

A doc line is a line whose first non-indent characters are the comment
start followed by the delimiter, e.g. ``--]`` for VHDL or ``//]`` for Go.
One space after the delimiter belongs to the prefix; any further spaces
are part of the text.

Example:
    >>> doc = DocComment("--")
    >>> doc.is_doc_line("  --] # Title")
    True
    >>> doc.strip_prefix("  --] # Title")
    '# Title'
    >>> doc.strip_prefix("--]   indented")
    '  indented'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lit2md.config import DEFAULT_DELIMITER
from lit2md.scanner.modes import INDENT_CHARS, LINE_END_CHARS

if TYPE_CHECKING:
    from lit2md.config import ConvertConfig


class DocComment:
    """Recognizes and strips the doc comment prefix.

    Holds the two accepted prefix forms, ``comment_start + delimiter`` and
    the same followed by a space. Pure logic, no mutable state; one
    instance can serve a whole run or be shared between runs.

    """

    __slots__ = ("_prefix", "_prefix_space")

    def __init__(self, comment_start: str, delimiter: str = DEFAULT_DELIMITER) -> None:
        self._prefix = comment_start + delimiter
        self._prefix_space = self._prefix + " "

    @classmethod
    def from_config(cls, config: ConvertConfig) -> DocComment:
        return cls(config.comment_start, config.delimiter)

    def is_doc_line(self, line: str) -> bool:
        """Check if ``line`` is a doc line.

        Leading spaces and tabs are ignored, so indented doc comments
        are recognized.
        """
        # The long form starts with the short one, so one check covers both
        return line.lstrip(INDENT_CHARS).startswith(self._prefix)

    def strip_prefix(self, line: str) -> str:
        """Remove the doc prefix from ``line``.

        Args:
            line: Raw input line

        Returns:
            The text after the longest matching prefix form. For lines that
            are not doc lines, the line with its indent and trailing line
            break characters removed.
        """
        trimmed = line.lstrip(INDENT_CHARS)
        if trimmed.startswith(self._prefix_space):
            return trimmed[len(self._prefix_space) :]
        if trimmed.startswith(self._prefix):
            return trimmed[len(self._prefix) :]
        return trimmed.rstrip(LINE_END_CHARS)

    def __repr__(self) -> str:
        return f"DocComment({self._prefix!r})"

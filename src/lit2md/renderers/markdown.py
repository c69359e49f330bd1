"""Markdown renderer for scanner output.

Turns OutputLine objects into Markdown text: doc text and code lines as-is,
code regions wrapped in triple-backtick fences, the opening fence tagged
with the language label when there is one.

Lines are written to the sink as soon as the scanner produces them; nothing
is buffered, and the sink is never seeked.

Thread Safety:
MarkdownRenderer holds no state and can be shared.

"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from lit2md.scanner.modes import FENCE
from lit2md.tokens import LineType, OutputLine


class MarkdownRenderer:
    """Render OutputLine streams as Markdown.

    Usage:
            >>> renderer = MarkdownRenderer()
            >>> renderer.render_line(OutputLine(LineType.FENCE_OPEN, "go", 1))
            '```go\\n'

    """

    __slots__ = ()

    def render_line(self, line: OutputLine) -> str:
        if line.type is LineType.FENCE_OPEN:
            return f"{FENCE}{line.value}\n"
        if line.type is LineType.FENCE_CLOSE:
            return f"{FENCE}\n"
        if line.type is LineType.SEPARATOR:
            return "\n"
        return f"{line.value}\n"

    def write(self, lines: Iterable[OutputLine], out: TextIO) -> int:
        """Write each line to ``out`` as it arrives.

        Write errors propagate unchanged and stop the run.

        Returns:
            Number of lines written.
        """
        count = 0
        for line in lines:
            out.write(self.render_line(line))
            count += 1
        return count

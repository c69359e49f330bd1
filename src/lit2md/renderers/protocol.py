"""LineRenderer protocol — stable interface for output renderers.

Any renderer that implements ``render_line(line) -> str`` and
``write(lines, out) -> int`` conforms to this protocol.
The built-in ``MarkdownRenderer`` is the reference implementation.

Example:
    from lit2md.renderers.protocol import LineRenderer

    def emit(renderer: LineRenderer, scanner: Scanner, out: TextIO) -> int:
        return renderer.write(scanner.scan(), out)

"""

from collections.abc import Iterable
from typing import Protocol, TextIO

from lit2md.tokens import OutputLine


class LineRenderer(Protocol):
    """Protocol for output line renderers."""

    def render_line(self, line: OutputLine) -> str:
        """Render one OutputLine, including its trailing newline."""
        ...

    def write(self, lines: Iterable[OutputLine], out: TextIO) -> int:
        """Render ``lines`` to ``out`` as they arrive.

        Returns:
            Number of lines written.

        """
        ...

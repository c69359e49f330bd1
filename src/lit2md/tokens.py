"""OutputLine and LineType definitions for the lit2md scanner.

The scanner produces a stream of OutputLine objects that a renderer
turns into text. Each OutputLine has a type, a value, and the number of the
source line that produced it.

Thread Safety:
OutputLine is frozen (immutable) and safe to share across threads.
LineType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from lit2md.location import SourceLocation


class LineType(Enum):
    """Kinds of lines the scanner emits."""

    FENCE_OPEN = auto()  # ```label
    FENCE_CLOSE = auto()  # ```
    TEXT = auto()  # Doc line with its prefix removed
    CODE = auto()  # Line inside a code region
    SEPARATOR = auto()  # Blank line between text and a following fence


@dataclass(frozen=True, slots=True)
class OutputLine:
    """A line produced by the scanner.

    Attributes:
        type: The line type (from LineType enum)
        value: Text of the line without its newline. For FENCE_OPEN this is
            the fence label; empty for FENCE_CLOSE and SEPARATOR.
        lineno: Source line that produced this output (1-indexed). The fence
            closed at end of input carries the last line read.
        source_file: Optional source file path

    """

    type: LineType
    value: str
    lineno: int
    source_file: str | None = None

    @property
    def location(self) -> SourceLocation:
        """Source location of the line that produced this output."""
        return SourceLocation(lineno=self.lineno, source_file=self.source_file)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"OutputLine({self.type.name}, {val!r}, {self.lineno})"

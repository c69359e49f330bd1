"""Source location tracking for diagnostics.

Provides SourceLocation for pointing at a line of the literate source,
carried by every line the scanner emits.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line-level location in a literate source file.

    The scanner is line oriented, so only the line number is tracked.
    Line numbers are 1-indexed.

    Attributes:
        lineno: Line number (1-indexed)
        source_file: Source file path (optional)

    Examples:
            >>> SourceLocation(3, "main.go")
        SourceLocation(lineno=3, source_file='main.go')
            >>> str(SourceLocation(3, "main.go"))
            'main.go:3'

    """

    lineno: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "main.go:10" or "10"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return str(self.lineno)

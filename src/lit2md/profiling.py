"""lit2md ConvertAccumulator — opt-in profiling for conversions.

This module provides accumulated metrics during conversion:
- Total conversion time
- Input lines read, output lines written
- Code fences opened

Zero overhead when disabled (get_convert_accumulator() returns None).

Example:
    from lit2md import convert_string
    from lit2md.profiling import profiled_convert

    with profiled_convert() as metrics:
        convert_string("--] Hello\\ncode", "--", "vhdl")

    print(metrics.summary())
    # {"total_ms": 0.1, "lines_read": 2, "lines_written": 5, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from lit2md.tokens import LineType, OutputLine


@dataclass
class ConvertAccumulator:
    """Accumulated metrics during conversion.

    Attributes:
        start_time: Profiling start timestamp.
        lines_read: Input lines consumed.
        lines_written: Output lines produced.
        fences_opened: Code fences opened (each one is also closed).
        doc_lines: Documentation lines emitted.
        conversions: Number of completed scans recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    lines_read: int = 0
    lines_written: int = 0
    fences_opened: int = 0
    doc_lines: int = 0
    conversions: int = 0

    def record_line(self, line: OutputLine) -> None:
        """Record one emitted output line."""
        self.lines_written += 1
        if line.type is LineType.FENCE_OPEN:
            self.fences_opened += 1
        elif line.type is LineType.TEXT:
            self.doc_lines += 1

    def record_scan(self, lines_read: int) -> None:
        """Record a finished scan.

        Args:
            lines_read: Number of input lines the scan consumed.

        """
        self.conversions += 1
        self.lines_read += lines_read

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of conversion metrics.

        Returns:
            Dict with total_ms, lines_read, lines_written, fences_opened,
            doc_lines, conversions.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "lines_read": self.lines_read,
            "lines_written": self.lines_written,
            "fences_opened": self.fences_opened,
            "doc_lines": self.doc_lines,
            "conversions": self.conversions,
        }


_accumulator: ContextVar[ConvertAccumulator | None] = ContextVar(
    "convert_accumulator",
    default=None,
)


def get_convert_accumulator() -> ConvertAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_convert() -> Iterator[ConvertAccumulator]:
    """Context manager for profiled conversion.

    Creates a ConvertAccumulator and makes it available via
    get_convert_accumulator() for the duration of the with block.

    Yields:
        ConvertAccumulator that will be populated during conversions.

    """
    acc = ConvertAccumulator()
    token: Token[ConvertAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "ConvertAccumulator",
    "get_convert_accumulator",
    "profiled_convert",
]

"""Three-state streaming scanner.

Classifies each input line as code or documentation and emits the
Markdown lines for it, opening and closing code fences on state changes.

The scanner pulls one line, fully processes it, then pulls the next, so
memory use does not depend on the input size.

Thread Safety:
Scanner instances are single-use. Create one per input stream.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from lit2md.config import ConvertConfig
from lit2md.profiling import get_convert_accumulator
from lit2md.scanner.modes import BLANK_CHARS, ScannerState
from lit2md.scanner.prefix import DocComment
from lit2md.tokens import LineType, OutputLine
from lit2md.utils.logger import get_logger

logger = get_logger(__name__)


def _is_blank(line: str) -> bool:
    return not line.strip(BLANK_CHARS)


class Scanner:
    """Streaming literate-source scanner.

    State machine, starting in NONE:

    ======  ========================  =====================================  =====
    State   Line                      Emits                                  Next
    ======  ========================  =====================================  =====
    NONE    blank                     nothing                                NONE
    NONE    doc line                  (same line handled as TEXT)            TEXT
    NONE    other                     open fence, (line handled as CODE)     CODE
    CODE    doc line                  close fence, stripped text             TEXT
    CODE    other                     line verbatim                          CODE
    TEXT    doc line                  stripped text                          TEXT
    TEXT    blank                     nothing                                TEXT
    TEXT    other                     separator, open fence, stripped line   CODE
    ======  ========================  =====================================  =====

    At end of input a CODE state closes its fence.

    Usage:
            >>> scanner = Scanner(["--] Title", "x := 1"], ConvertConfig("--"))
            >>> for line in scanner.scan():
            ...     print(line)
        OutputLine(TEXT, 'Title', 1)
        OutputLine(SEPARATOR, '', 2)
        OutputLine(FENCE_OPEN, '', 2)
        OutputLine(CODE, 'x := 1', 2)
        OutputLine(FENCE_CLOSE, '', 2)

    """

    __slots__ = (
        "_lines",
        "_config",
        "_doc",
        "_state",
        "_lineno",
        "_source_file",
        "_fences_opened",
        "_fences_closed",
    )

    def __init__(
        self,
        lines: Iterable[str],
        config: ConvertConfig,
        source_file: str | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            lines: Line source. A trailing "\\n" and then "\\r" is removed
                from each line, so open text files can be passed directly.
            config: Comment style and fence label for this run
            source_file: Optional source file path for locations
        """
        self._lines = lines
        self._config = config
        self._doc = DocComment.from_config(config)
        self._state = ScannerState.NONE
        self._lineno = 0
        self._source_file = source_file
        self._fences_opened = 0
        self._fences_closed = 0

    @property
    def state(self) -> ScannerState:
        return self._state

    @property
    def lineno(self) -> int:
        """Number of input lines consumed so far."""
        return self._lineno

    @property
    def open_fences(self) -> int:
        """Fences opened but not yet closed (0 or 1)."""
        return self._fences_opened - self._fences_closed

    def scan(self) -> Iterator[OutputLine]:
        """Scan the line source into output lines.

        Yields:
            OutputLine objects one at a time

        Exceptions raised by the line source propagate unchanged.
        """
        logger.debug("scan started: %r, label=%r", self._doc, self._config.fence_label)
        acc = get_convert_accumulator()

        for raw in self._lines:
            self._lineno += 1
            line = raw.removesuffix("\n").removesuffix("\r")
            if acc is None:
                yield from self._dispatch_state(line)
            else:
                for out in self._dispatch_state(line):
                    acc.record_line(out)
                    yield out

        if self._state is ScannerState.CODE:
            close = self._close_fence()
            if acc is not None:
                acc.record_line(close)
            yield close

        if acc is not None:
            acc.record_scan(self._lineno)
        logger.debug("scan finished: %d lines, final state %s", self._lineno, self._state.name)

    def _dispatch_state(self, line: str) -> Iterator[OutputLine]:
        """Dispatch to the handler for the current state."""
        if self._state is ScannerState.NONE:
            yield from self._scan_start(line)
        elif self._state is ScannerState.CODE:
            yield from self._scan_code(line)
        else:
            yield from self._scan_text(line)

    def _scan_start(self, line: str) -> Iterator[OutputLine]:
        if _is_blank(line):
            return
        if self._doc.is_doc_line(line):
            self._set_state(ScannerState.TEXT)
        else:
            yield self._open_fence()
            self._set_state(ScannerState.CODE)
        # Same line again, now in a non-NONE state
        yield from self._dispatch_state(line)

    def _scan_code(self, line: str) -> Iterator[OutputLine]:
        if self._doc.is_doc_line(line):
            yield self._close_fence()
            yield self._emit(LineType.TEXT, self._doc.strip_prefix(line))
            self._set_state(ScannerState.TEXT)
        else:
            yield self._emit(LineType.CODE, line)

    def _scan_text(self, line: str) -> Iterator[OutputLine]:
        if self._doc.is_doc_line(line):
            yield self._emit(LineType.TEXT, self._doc.strip_prefix(line))
        elif not _is_blank(line):
            yield self._emit(LineType.SEPARATOR, "")
            yield self._open_fence()
            yield self._emit(LineType.CODE, self._doc.strip_prefix(line))
            self._set_state(ScannerState.CODE)

    def _open_fence(self) -> OutputLine:
        self._fences_opened += 1
        return self._emit(LineType.FENCE_OPEN, self._config.fence_label)

    def _close_fence(self) -> OutputLine:
        self._fences_closed += 1
        return self._emit(LineType.FENCE_CLOSE, "")

    def _set_state(self, state: ScannerState) -> None:
        logger.debug("line %d: %s -> %s", self._lineno, self._state.name, state.name)
        self._state = state

    def _emit(self, line_type: LineType, value: str) -> OutputLine:
        return OutputLine(
            type=line_type,
            value=value,
            lineno=self._lineno,
            source_file=self._source_file,
        )


__all__ = ["Scanner"]

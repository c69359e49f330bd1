"""Streaming scanner for literate sources.

This package turns a stream of source lines into a stream of typed
Markdown output lines. It never looks ahead and never buffers the input.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner, ScannerState, DocComment
├── core.py              # Scanner class (state machine + dispatch)
├── modes.py             # ScannerState enum, character constants
└── prefix.py            # DocComment prefix recognizer

Usage:
    >>> from lit2md.config import ConvertConfig
    >>> from lit2md.scanner import Scanner
    >>> scanner = Scanner(["--] Hello", "Code"], ConvertConfig("--", fence_label="vhdl"))
    >>> [line.type.name for line in scanner.scan()]
    ['TEXT', 'SEPARATOR', 'FENCE_OPEN', 'CODE', 'FENCE_CLOSE']

"""

from lit2md.scanner.core import Scanner
from lit2md.scanner.modes import ScannerState
from lit2md.scanner.prefix import DocComment

__all__ = ["DocComment", "Scanner", "ScannerState"]

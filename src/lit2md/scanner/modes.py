"""Scanner states and constants.

This module defines the finite state machine states for the scanner
and the characters it treats as insignificant.
"""

from __future__ import annotations

from enum import Enum, auto


class ScannerState(Enum):
    """Scanner states.

    The scanner switches between states based on the line kind:
    - NONE: Start of input, nothing but blank lines seen so far
    - CODE: Inside a code region (a fence is open)
    - TEXT: Inside a documentation region

    NONE is only ever left, never re-entered.

    """

    NONE = auto()  # Before the first non-blank line
    CODE = auto()  # Inside fenced code
    TEXT = auto()  # Inside documentation


# Stripped from the left of a line before prefix matching
INDENT_CHARS = " \t"

# A line made only of these is blank
BLANK_CHARS = " \t\r\n"

# Stripped from the right of non-doc lines by the recognizer
LINE_END_CHARS = "\r\n"

FENCE = "```"

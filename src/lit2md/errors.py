"""Exception classes for lit2md.

The conversion itself is total over any line sequence, so these errors
come from the layers around it: configuration, the language table and
file handling.
"""

from __future__ import annotations


class Lit2MdError(Exception):
    """Base exception for all lit2md errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(Lit2MdError):
    """Invalid conversion configuration.

    Raised when a ConvertConfig field has the wrong type or a value that
    cannot form a single-line prefix.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending configuration field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid '{field}': {message}")


class UnknownLanguageError(Lit2MdError):
    """No language is registered for a file extension."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        shown = extension or "(no extension)"
        super().__init__(
            f"No language registered for extension {shown!r}; "
            "pass --lang or --comment explicitly"
        )


class SourceFileError(Lit2MdError):
    """A source or destination file could not be opened.

    Wraps the underlying OSError, keeping it as ``__cause__``.
    """

    def __init__(self, path: str, reason: str) -> None:
        """Initialize file error.

        Args:
            path: Path of the file that failed
            reason: Description of the failure (usually str(OSError))
        """
        self.path = path
        self.reason = reason
        super().__init__(f"error while opening {path!r}: {reason}")

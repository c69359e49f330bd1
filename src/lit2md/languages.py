"""File extension to language table.

Maps a source file extension to the comment start used for literate lines
and the label put on opening code fences. The table is read-only; callers
that need a different style pass ``comment_start``/``fence_label``
explicitly instead of mutating it.

Example:
    >>> from lit2md.languages import language_for_path
    >>> language_for_path("cmd/lit2md/main.go")
    LanguageSpec(comment_start='//', fence_label='go')

"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import PurePath
from types import MappingProxyType

from lit2md.errors import UnknownLanguageError


@dataclass(frozen=True, slots=True)
class LanguageSpec:
    """Comment style and fence label for one language.

    Attributes:
        comment_start: Line comment opener, e.g. "//" or "#"
        fence_label: Info string for opening fences, e.g. "go"

    """

    comment_start: str
    fence_label: str


_DASH = "--"
_SLASH = "//"
_HASH = "#"

LANGUAGES: MappingProxyType[str, LanguageSpec] = MappingProxyType(
    {
        # Hardware description
        ".vhd": LanguageSpec(_DASH, "vhdl"),
        ".vhdl": LanguageSpec(_DASH, "vhdl"),
        ".v": LanguageSpec(_SLASH, "verilog"),
        ".sv": LanguageSpec(_SLASH, "systemverilog"),
        # C family
        ".c": LanguageSpec(_SLASH, "c"),
        ".h": LanguageSpec(_SLASH, "c"),
        ".cc": LanguageSpec(_SLASH, "cpp"),
        ".cpp": LanguageSpec(_SLASH, "cpp"),
        ".cxx": LanguageSpec(_SLASH, "cpp"),
        ".hpp": LanguageSpec(_SLASH, "cpp"),
        ".cs": LanguageSpec(_SLASH, "csharp"),
        ".java": LanguageSpec(_SLASH, "java"),
        ".kt": LanguageSpec(_SLASH, "kotlin"),
        ".scala": LanguageSpec(_SLASH, "scala"),
        ".swift": LanguageSpec(_SLASH, "swift"),
        ".go": LanguageSpec(_SLASH, "go"),
        ".rs": LanguageSpec(_SLASH, "rust"),
        ".zig": LanguageSpec(_SLASH, "zig"),
        ".js": LanguageSpec(_SLASH, "javascript"),
        ".mjs": LanguageSpec(_SLASH, "javascript"),
        ".ts": LanguageSpec(_SLASH, "typescript"),
        ".proto": LanguageSpec(_SLASH, "protobuf"),
        # Hash comments
        ".py": LanguageSpec(_HASH, "python"),
        ".rb": LanguageSpec(_HASH, "ruby"),
        ".pl": LanguageSpec(_HASH, "perl"),
        ".sh": LanguageSpec(_HASH, "bash"),
        ".bash": LanguageSpec(_HASH, "bash"),
        ".zsh": LanguageSpec(_HASH, "zsh"),
        ".r": LanguageSpec(_HASH, "r"),
        ".jl": LanguageSpec(_HASH, "julia"),
        ".nix": LanguageSpec(_HASH, "nix"),
        ".tf": LanguageSpec(_HASH, "hcl"),
        ".yaml": LanguageSpec(_HASH, "yaml"),
        ".yml": LanguageSpec(_HASH, "yaml"),
        ".toml": LanguageSpec(_HASH, "toml"),
        ".cmake": LanguageSpec(_HASH, "cmake"),
        # Double dash
        ".lua": LanguageSpec(_DASH, "lua"),
        ".sql": LanguageSpec(_DASH, "sql"),
        ".hs": LanguageSpec(_DASH, "haskell"),
        ".elm": LanguageSpec(_DASH, "elm"),
        ".ada": LanguageSpec(_DASH, "ada"),
        ".adb": LanguageSpec(_DASH, "ada"),
        # Others
        ".tex": LanguageSpec("%", "latex"),
        ".erl": LanguageSpec("%", "erlang"),
        ".m": LanguageSpec("%", "matlab"),
        ".lisp": LanguageSpec(";", "lisp"),
        ".el": LanguageSpec(";", "elisp"),
        ".clj": LanguageSpec(";", "clojure"),
        ".scm": LanguageSpec(";", "scheme"),
        ".asm": LanguageSpec(";", "asm"),
        ".f90": LanguageSpec("!", "fortran"),
        ".vim": LanguageSpec('"', "vim"),
        ".bat": LanguageSpec("REM", "batch"),
    }
)


def language_for_extension(extension: str) -> LanguageSpec:
    """Look up a language by extension.

    Args:
        extension: Extension with or without the leading dot ("go", ".GO")

    Returns:
        The registered LanguageSpec.

    Raises:
        UnknownLanguageError: If nothing is registered for the extension.
    """
    key = extension.lower()
    if key and not key.startswith("."):
        key = "." + key
    spec = LANGUAGES.get(key)
    if spec is None:
        raise UnknownLanguageError(key)
    return spec


def language_for_path(path: str | PathLike[str]) -> LanguageSpec:
    """Look up a language from the suffix of ``path``."""
    return language_for_extension(PurePath(path).suffix)


__all__ = [
    "LANGUAGES",
    "LanguageSpec",
    "language_for_extension",
    "language_for_path",
]

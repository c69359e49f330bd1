"""Conversion configuration for lit2md.

A ConvertConfig is built once per conversion and passed explicitly to the
scanner. There is no module-level "current" config: two conversions running
in different threads each own their own value.

Usage:
    from lit2md.config import ConvertConfig

    config = ConvertConfig(comment_start="--", fence_label="vhdl")

    # Derive comment style and label from the file name
    config = ConvertConfig.for_path("rtl/top.vhd")

    # Explicit values override the language table
    config = ConvertConfig.for_path("notes.txt", comment_start="#")

"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from os import PathLike
from typing import Any

from lit2md.errors import ConfigError, UnknownLanguageError
from lit2md.languages import LanguageSpec, language_for_extension, language_for_path

DEFAULT_DELIMITER = "]"


@dataclass(frozen=True, slots=True)
class ConvertConfig:
    """Immutable conversion configuration.

    Doc lines start with ``comment_start + delimiter``, optionally followed
    by a single space. Frozen dataclass ensures thread-safety (immutable
    after creation).

    Attributes:
        comment_start: Line comment opener ("--", "//", "#", or empty)
        delimiter: Marker appended to comment_start to flag doc lines
        fence_label: Info string for opening code fences (may be empty)

    """

    comment_start: str = ""
    delimiter: str = DEFAULT_DELIMITER
    fence_label: str = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ConfigError(f.name, f"expected str, got {type(value).__name__}")

    def check_fence_safe(self) -> ConvertConfig:
        """Reject values that would produce broken Markdown.

        Any strings convert, but a line break in a field or a backtick in
        the fence label yields output whose fences no longer pair up. The
        file-name based constructor for_path() applies it.

        Returns:
            The config itself, for chaining.

        Raises:
            ConfigError: On the first offending field.

        """
        for f in fields(self):
            value = getattr(self, f.name)
            if "\n" in value or "\r" in value:
                raise ConfigError(f.name, "must not contain line breaks")
        if "`" in self.fence_label:
            # A backtick in the info string ends a backtick fence early
            raise ConfigError("fence_label", "must not contain backticks")
        return self

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ConvertConfig:
        """Create ConvertConfig from dictionary.

        Only includes keys that are valid ConvertConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ConvertConfig.from_dict({"comment_start": "#", "color": "red"})
            ConvertConfig(comment_start='#', delimiter=']', fence_label='')

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def for_language(cls, language: LanguageSpec, **overrides: Any) -> ConvertConfig:
        """Create a config from a LanguageSpec, applying explicit overrides."""
        base = cls(comment_start=language.comment_start, fence_label=language.fence_label)
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(base, **overrides)

    @classmethod
    def for_path(
        cls,
        path: str | PathLike[str],
        *,
        extension: str | None = None,
        **overrides: Any,
    ) -> ConvertConfig:
        """Create a config for a source file.

        The language is looked up by ``extension`` when given, otherwise by
        the suffix of ``path``. Overrides set to None are ignored. The result
        is checked with check_fence_safe().

        Raises:
            UnknownLanguageError: If the extension is unknown and no
                ``comment_start`` override was supplied.
            ConfigError: If an override would break the output fences.

        """
        try:
            if extension is not None:
                language = language_for_extension(extension)
            else:
                language = language_for_path(path)
        except UnknownLanguageError:
            if overrides.get("comment_start") is None:
                raise
            language = LanguageSpec(comment_start="", fence_label="")
        return cls.for_language(language, **overrides).check_fence_safe()


__all__ = ["DEFAULT_DELIMITER", "ConvertConfig"]

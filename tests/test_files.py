"""Tests for file handling around the converter."""

from pathlib import Path

import pytest

from lit2md import ConvertConfig, convert_file
from lit2md.errors import SourceFileError
from lit2md.files import open_destination, open_source

VHDL = ConvertConfig(comment_start="--", fence_label="vhdl")


class TestConvertFile:
    def test_writes_markdown(self, tmp_path: Path) -> None:
        src = tmp_path / "top.vhd"
        dst = tmp_path / "top.md"
        src.write_text("--] # Top\nentity top is\nend;\n", encoding="utf-8")

        convert_file(src, dst, VHDL)

        assert dst.read_text(encoding="utf-8") == (
            "# Top\n\n```vhdl\nentity top is\nend;\n```\n"
        )

    def test_overwrites_existing_destination(self, tmp_path: Path) -> None:
        src = tmp_path / "a.vhd"
        dst = tmp_path / "a.md"
        src.write_text("--] new\n", encoding="utf-8")
        dst.write_text("old content that is longer\n", encoding="utf-8")

        convert_file(src, dst, VHDL)

        assert dst.read_text(encoding="utf-8") == "new\n"

    def test_crlf_source(self, tmp_path: Path) -> None:
        src = tmp_path / "a.vhd"
        dst = tmp_path / "a.md"
        src.write_bytes(b"--] doc\r\ncode\r\n")

        convert_file(src, dst, VHDL)

        assert dst.read_bytes() == b"doc\n\n```vhdl\ncode\n```\n"

    def test_lone_carriage_return_does_not_split_lines(self, tmp_path: Path) -> None:
        src = tmp_path / "a.vhd"
        dst = tmp_path / "a.md"
        src.write_bytes(b"--] one\rtwo\n")

        convert_file(src, dst, VHDL)

        assert dst.read_bytes() == b"one\rtwo\n"

    def test_utf8_round_trip(self, tmp_path: Path) -> None:
        src = tmp_path / "a.vhd"
        dst = tmp_path / "a.md"
        src.write_text("--] Größe ≤ 10 ✓\n", encoding="utf-8")

        convert_file(src, dst, VHDL)

        assert dst.read_text(encoding="utf-8") == "Größe ≤ 10 ✓\n"

    def test_missing_source(self, tmp_path: Path) -> None:
        dst = tmp_path / "out.md"
        dst.write_text("keep me", encoding="utf-8")

        with pytest.raises(SourceFileError) as exc_info:
            convert_file(tmp_path / "missing.vhd", dst, VHDL)

        assert "missing.vhd" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        # The destination is only opened once the source is open
        assert dst.read_text(encoding="utf-8") == "keep me"

    def test_unwritable_destination(self, tmp_path: Path) -> None:
        src = tmp_path / "a.vhd"
        src.write_text("code\n", encoding="utf-8")

        with pytest.raises(SourceFileError) as exc_info:
            convert_file(src, tmp_path / "no" / "such" / "dir.md", VHDL)

        assert "dir.md" in exc_info.value.path


class TestOpenHelpers:
    def test_open_source_missing(self, tmp_path: Path) -> None:
        with pytest.raises(SourceFileError, match="error while opening"):
            open_source(tmp_path / "nope")

    def test_open_destination_creates(self, tmp_path: Path) -> None:
        with open_destination(tmp_path / "new.md") as f:
            f.write("x\n")
        assert (tmp_path / "new.md").read_text(encoding="utf-8") == "x\n"

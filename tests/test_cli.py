"""Tests for the lit2md command line."""

import logging
from pathlib import Path

import pytest

from lit2md import __version__
from lit2md.cli import build_parser, main


@pytest.fixture
def vhdl_source(tmp_path: Path) -> Path:
    src = tmp_path / "top.vhd"
    src.write_text("--] # Top level\nentity top is\nend;\n", encoding="utf-8")
    return src


class TestMain:
    def test_success(self, vhdl_source: Path, tmp_path: Path) -> None:
        dst = tmp_path / "top.md"
        assert main(["--input", str(vhdl_source), "--output", str(dst)]) == 0
        assert dst.read_text(encoding="utf-8") == (
            "# Top level\n\n```vhdl\nentity top is\nend;\n```\n"
        )

    def test_equals_syntax(self, vhdl_source: Path, tmp_path: Path) -> None:
        dst = tmp_path / "top.md"
        assert main([f"--input={vhdl_source}", f"--output={dst}"]) == 0
        assert dst.exists()

    def test_fence_label_override(self, vhdl_source: Path, tmp_path: Path) -> None:
        dst = tmp_path / "top.md"
        main(["--input", str(vhdl_source), "--output", str(dst), "--fence-label", ""])
        assert "```\nentity top is" in dst.read_text(encoding="utf-8")

    def test_lang_flag(self, tmp_path: Path) -> None:
        src = tmp_path / "notes.txt"
        src.write_text("//] Text\nint x;\n", encoding="utf-8")
        dst = tmp_path / "notes.md"
        assert main(["--input", str(src), "--output", str(dst), "--lang", "c"]) == 0
        assert dst.read_text(encoding="utf-8") == "Text\n\n```c\nint x;\n```\n"

    def test_comment_and_delimiter_flags(self, tmp_path: Path) -> None:
        src = tmp_path / "notes.txt"
        src.write_text(";;! Text\n(car x)\n", encoding="utf-8")
        dst = tmp_path / "notes.md"
        argv = [
            "--input", str(src),
            "--output", str(dst),
            "--comment", ";;",
            "--delimiter", "!",
            "--fence-label", "lisp",
        ]
        assert main(argv) == 0
        assert dst.read_text(encoding="utf-8") == "Text\n\n```lisp\n(car x)\n```\n"

    def test_missing_input_file(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR, logger="lit2md"):
            code = main(["--input", str(tmp_path / "nope.vhd"), "--output", str(tmp_path / "o.md")])
        assert code == 1
        assert "error: error while opening" in caplog.text
        assert "nope.vhd" in caplog.text

    def test_unknown_extension(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        src = tmp_path / "notes.txt"
        src.write_text("x\n", encoding="utf-8")
        with caplog.at_level(logging.ERROR, logger="lit2md"):
            code = main(["--input", str(src), "--output", str(tmp_path / "o.md")])
        assert code == 1
        assert "No language registered" in caplog.text
        assert not (tmp_path / "o.md").exists()

    def test_invalid_config(self, vhdl_source: Path, tmp_path: Path) -> None:
        argv = ["--input", str(vhdl_source), "--output", str(tmp_path / "o.md")]
        assert main(argv + ["--fence-label", "a`b"]) == 1
        assert not (tmp_path / "o.md").exists()

    def test_verbose_logs_summary(
        self, vhdl_source: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="lit2md"):
            main(["-v", "--input", str(vhdl_source), "--output", str(tmp_path / "o.md")])
        assert "lines_read" in caplog.text


class TestUsageErrors:
    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["--input", "a.vhd"],
            ["--output", "a.md"],
        ],
    )
    def test_missing_required_flag(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["--input", "a", "--output", "b"])
        assert args.delimiter == "]"
        assert args.lang is None
        assert args.comment is None
        assert args.fence_label is None
        assert args.verbose == 0

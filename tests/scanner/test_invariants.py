"""Property-based tests for scanner invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from lit2md import convert_string
from lit2md.config import ConvertConfig
from lit2md.scanner import DocComment, Scanner
from lit2md.tokens import LineType

CONFIG = ConvertConfig(comment_start="--", fence_label="vhdl")

# Lines built from characters that matter to the scanner
source_line = st.text(alphabet="-] \t\rab", max_size=12)
source_lines = st.lists(source_line, max_size=40)
blank_line = st.text(alphabet=" \t", max_size=4)
doc_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\n\r"),
    max_size=30,
)


def scan_types(lines: list[str]) -> list[LineType]:
    return [out.type for out in Scanner(lines, CONFIG).scan()]


class TestFenceBalance:
    """Every opened fence is closed exactly once."""

    @given(source_lines)
    @settings(max_examples=300)
    def test_open_equals_close(self, lines: list[str]) -> None:
        kinds = scan_types(lines)
        assert kinds.count(LineType.FENCE_OPEN) == kinds.count(LineType.FENCE_CLOSE)

    @given(source_lines)
    @settings(max_examples=200)
    def test_fences_never_nest(self, lines: list[str]) -> None:
        depth = 0
        for kind in scan_types(lines):
            if kind is LineType.FENCE_OPEN:
                depth += 1
            elif kind is LineType.FENCE_CLOSE:
                depth -= 1
            elif kind is LineType.CODE:
                assert depth == 1, "code lines only appear inside a fence"
            else:
                assert depth == 0, "text and separators only appear outside fences"
            assert depth in (0, 1)
        assert depth == 0

    @given(source_lines)
    @settings(max_examples=100)
    def test_scanner_reports_no_open_fence_after_scan(self, lines: list[str]) -> None:
        scanner = Scanner(lines, CONFIG)
        list(scanner.scan())
        assert scanner.open_fences == 0


class TestBlankHandling:
    """Blank lines outside code produce no output of their own."""

    @given(st.lists(blank_line, min_size=1, max_size=5), source_lines)
    @settings(max_examples=200)
    def test_leading_blank_lines_absorbed(self, blanks: list[str], lines: list[str]) -> None:
        without = "\n".join(lines)
        with_blanks = "\n".join(blanks + lines)
        assume(without != "")
        assert convert_string(with_blanks, "--", "vhdl") == convert_string(without, "--", "vhdl")

    @given(st.lists(st.tuples(doc_text, st.lists(blank_line, max_size=3)), max_size=10))
    @settings(max_examples=200)
    def test_blank_runs_between_doc_lines_vanish(
        self, blocks: list[tuple[str, list[str]]]
    ) -> None:
        lines: list[str] = []
        for text, blanks in blocks:
            lines.append("--]" + text)
            lines.extend(blanks)
        result = convert_string("\n".join(lines), "--", "vhdl")
        expected = "".join(DocComment("--").strip_prefix("--]" + t) + "\n" for t, _ in blocks)
        assert result == expected

    @given(source_lines)
    @settings(max_examples=200)
    def test_no_two_separators_in_a_row(self, lines: list[str]) -> None:
        kinds = scan_types(lines)
        for a, b in zip(kinds, kinds[1:]):
            assert not (a is LineType.SEPARATOR and b is LineType.SEPARATOR)


class TestDocTextRoundTrip:
    """Doc text comes out exactly, without any prefix characters."""

    @given(doc_text, blank_line)
    @settings(max_examples=200)
    def test_zero_or_one_space_after_delimiter(self, text: str, indent: str) -> None:
        assume(not text.startswith(" "))
        doc = DocComment("--")
        assert doc.strip_prefix(indent + "--]" + text) == text
        assert doc.strip_prefix(indent + "--] " + text) == text

    @given(doc_text, blank_line)
    @settings(max_examples=100)
    def test_indent_does_not_matter(self, text: str, indent: str) -> None:
        doc = DocComment("//")
        line = "//] " + text
        assert doc.is_doc_line(indent + line)
        assert doc.strip_prefix(indent + line) == doc.strip_prefix(line)

    @given(doc_text)
    @settings(max_examples=100)
    def test_single_doc_line_output(self, text: str) -> None:
        assume(not text.startswith(" "))
        assert convert_string("--] " + text, "--", "vhdl") == text + "\n"


class TestDeterminism:
    @given(source_lines)
    @settings(max_examples=50)
    def test_repeated_conversion_identical(self, lines: list[str]) -> None:
        source = "\n".join(lines)
        assert convert_string(source, "--", "vhdl") == convert_string(source, "--", "vhdl")

    @given(source_lines)
    @settings(max_examples=100)
    def test_output_is_newline_terminated(self, lines: list[str]) -> None:
        result = convert_string("\n".join(lines), "--", "vhdl")
        assert result == "" or result.endswith("\n")

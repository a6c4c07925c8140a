#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_lines.py
"""Unit tests for line splitting and indentation analysis."""

import pytest

from mdgrid.parsers.lines import IndentSplit, normalize_newlines, split_indent, split_lines


@pytest.mark.unit
class TestSplitLines:
    """Test newline normalization and line splitting."""

    def test_crlf_and_cr_are_normalized(self) -> None:
        """Test that CRLF and lone CR both become LF."""
        assert normalize_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"

    def test_empty_input_yields_one_empty_line(self) -> None:
        """Test that empty text still produces a single line."""
        assert split_lines("") == [""]

    def test_trailing_newline_yields_trailing_empty_line(self) -> None:
        """Test that a final line break adds an empty last line."""
        assert split_lines("a\n") == ["a", ""]

    def test_crlf_pair_counts_as_one_break(self) -> None:
        """Test that CRLF is a single line break, not two."""
        assert split_lines("a\r\nb") == ["a", "b"]

    def test_blank_lines_are_kept(self) -> None:
        """Test that consecutive line breaks keep the empty lines between them."""
        assert split_lines("a\n\n\nb") == ["a", "", "", "b"]


@pytest.mark.unit
class TestSplitIndent:
    """Test indentation level computation and residual content."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("text", IndentSplit(0, "text")),
            ("   text", IndentSplit(0, "   text")),
            ("    text", IndentSplit(1, "text")),
            ("\ttext", IndentSplit(1, "text")),
            ("\t\ttext", IndentSplit(2, "text")),
            ("      text", IndentSplit(1, "  text")),
            ("  \ttext", IndentSplit(1, "text")),
            ("\t  text", IndentSplit(1, "  text")),
        ],
    )
    def test_levels_and_residuals(self, line: str, expected: IndentSplit) -> None:
        """Test level and residual for mixed space and tab indentation."""
        assert split_indent(line) == expected

    def test_tab_crossing_boundary_is_consumed_whole(self) -> None:
        """Test that a tab straddling the level boundary is removed entirely."""
        # 2 spaces + tab = width 6, level 1; the tab ends past width 4
        assert split_indent("  \tx") == IndentSplit(1, "x")

    def test_equal_width_gives_equal_level(self) -> None:
        """Test that indents of equal width produce the same level."""
        assert split_indent("        x").level == split_indent("\t\tx").level == split_indent("    \tx").level == 2

    def test_whitespace_only_line(self) -> None:
        """Test that a whitespace-only line keeps its level and has no content."""
        assert split_indent("    ") == IndentSplit(1, "")
        assert split_indent("  ") == IndentSplit(0, "  ")

    def test_inner_whitespace_is_preserved(self) -> None:
        """Test that whitespace after the first non-blank character is untouched."""
        assert split_indent("    a  b\t").content == "a  b\t"

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the document-level Markdown parser."""

import logging

import pytest

from mdgrid.ast import Document, LineKind, RunStyle, TextRun
from mdgrid.constants import BULLET_MARKER, HORIZONTAL_RULE_TEXT, QUOTE_LABEL, TABLE_LABEL
from mdgrid.exceptions import SourceNotFoundError, SourceReadError, ValidationError
from mdgrid.options import GridRendererOptions, MarkdownParserOptions, StyleOptions
from mdgrid.parsers.markdown import MarkdownGridParser, parse_markdown, parse_markdown_file


def kinds(doc: Document) -> list[LineKind]:
    return [line.kind for line in doc.lines]


def plain(doc: Document) -> list[str]:
    return [line.plain_text for line in doc.lines]


@pytest.mark.unit
class TestLineKinds:
    """Test one line of each kind."""

    def test_header(self) -> None:
        """Test header kind, level, text, size and bold overlay."""
        line = parse_markdown("# Title").lines[0]

        assert line.kind is LineKind.HEADER
        assert line.formatting.header_level == 1
        assert line.plain_text == "Title"
        assert line.formatting.font_size == StyleOptions().header_font_sizes[1]
        assert all(run.style.bold for run in line.rich_text)
        assert all(run.style.font_size == 18 for run in line.rich_text)

    def test_header_keeps_inline_styles(self) -> None:
        """Test that the header overlay does not remove emphasis."""
        line = parse_markdown("## Some *thing*").lines[0]

        assert line.rich_text[1].style.italic is True
        assert line.rich_text[1].style.bold is True
        assert line.rich_text[1].style.font_size == 16

    def test_paragraph_gets_base_font_size(self) -> None:
        """Test that paragraph runs carry the base font size."""
        line = parse_markdown("Hello **world**").lines[0]

        assert line.kind is LineKind.PARAGRAPH
        assert [run.style.font_size for run in line.rich_text] == [11, 11]

    def test_empty_line(self) -> None:
        """Test that a blank line has one empty unstyled run."""
        line = parse_markdown("   ").lines[0]

        assert line.kind is LineKind.EMPTY
        assert line.rich_text == (TextRun(""),)

    def test_horizontal_rule(self) -> None:
        """Test the fixed rule text and bottom border."""
        line = parse_markdown("***").lines[0]

        assert line.kind is LineKind.HORIZONTAL_RULE
        assert line.plain_text == HORIZONTAL_RULE_TEXT
        assert line.formatting.is_horizontal_rule is True
        assert line.formatting.bottom_border_color == StyleOptions().horizontal_rule_color

    def test_table_row_is_labelled_verbatim(self) -> None:
        """Test that table rows are not inline-parsed."""
        line = parse_markdown("| **a** | b |").lines[0]

        assert line.kind is LineKind.TABLE
        assert line.rich_text == (TextRun(TABLE_LABEL + "| **a** | b |"),)

    def test_quote(self) -> None:
        """Test quote label, inline parsing and cell formatting."""
        line = parse_markdown("> be *brief*").lines[0]
        style = StyleOptions()

        assert line.kind is LineKind.QUOTE
        assert line.plain_text == f"{QUOTE_LABEL}be brief"
        assert line.rich_text[-1].style.italic is True
        assert line.formatting.is_quote is True
        assert line.formatting.background_color == style.quote_background_color
        assert line.formatting.left_border_color == style.quote_border_color

    def test_image_line_background(self) -> None:
        """Test that a line containing an image gets the image background."""
        line = parse_markdown("![chart](c.png)").lines[0]

        assert line.formatting.background_color == StyleOptions().image_background_color


@pytest.mark.unit
class TestLists:
    """Test list rendering across lines."""

    def test_bullets(self) -> None:
        """Test that consecutive bullets share the fixed marker at level 0."""
        doc = parse_markdown("- a\n- b")

        assert kinds(doc) == [LineKind.LIST_ITEM, LineKind.LIST_ITEM]
        assert plain(doc) == [f"{BULLET_MARKER}a", f"{BULLET_MARKER}b"]
        assert [line.indent_level for line in doc.lines] == [0, 0]

    def test_counter_resets_after_paragraph(self) -> None:
        """Test that an intervening paragraph restarts numbering."""
        doc = parse_markdown("1. a\n2. b\npara\n1. c")

        assert plain(doc) == ["1. a", "2. b", "para", "1. c"]

    def test_counter_resets_after_blank_line(self) -> None:
        """Test that a blank line is a non-list line and restarts numbering."""
        doc = parse_markdown("1. a\n\n1. b")

        assert plain(doc)[2] == "1. b"

    def test_nested_levels(self) -> None:
        """Test nested ordered lists keep their own counters."""
        doc = parse_markdown("1. a\n    1. a1\n    1. a2\n1. b")

        assert plain(doc) == ["1. a", "1. a1", "2. a2", "2. b"]
        assert [line.indent_level for line in doc.lines] == [0, 1, 1, 0]

    def test_list_item_inline_markup(self) -> None:
        """Test that list content is inline-parsed after marker substitution."""
        line = parse_markdown("- **bold** item").lines[0]

        assert [run.text for run in line.rich_text] == [BULLET_MARKER, "bold", " item"]
        assert line.rich_text[1].style.bold is True

    def test_partially_indented_list_item(self) -> None:
        """Test that an indent below one level still yields a list item at level 0."""
        line = parse_markdown("  - a").lines[0]

        assert line.kind is LineKind.LIST_ITEM
        assert line.indent_level == 0
        assert line.plain_text == f"{BULLET_MARKER}a"


@pytest.mark.unit
class TestCodeFences:
    """Test fenced code handling."""

    def test_fence_sequence(self) -> None:
        """Test delimiter, content and delimiter lines."""
        doc = parse_markdown("```js\ncode\n```")
        style = StyleOptions()

        assert kinds(doc) == [LineKind.CODE_BLOCK, LineKind.PARAGRAPH, LineKind.CODE_BLOCK]
        assert plain(doc) == ["", "code", ""]
        assert doc.lines[1].rich_text == (TextRun("code", RunStyle(font_name=style.code_font_name, color=style.code_color)),)
        assert all(line.formatting.background_color == style.code_background_color for line in doc.lines)

    def test_fence_content_is_not_inline_parsed(self) -> None:
        """Test that Markdown inside a fence is copied verbatim."""
        doc = parse_markdown("```\n# **not** a header\n- nor a list\n```")

        assert kinds(doc)[1:3] == [LineKind.PARAGRAPH, LineKind.PARAGRAPH]
        assert plain(doc)[1:3] == ["# **not** a header", "- nor a list"]

    def test_fence_keeps_residual_indentation(self) -> None:
        """Test that indentation beyond the indent level stays in the code text."""
        doc = parse_markdown("```\n      x = 1\n```")

        assert doc.lines[1].indent_level == 1
        assert doc.lines[1].plain_text == "  x = 1"

    def test_state_closes_after_fence(self) -> None:
        """Test that lines after the closing fence are parsed normally."""
        doc = parse_markdown("```\ncode\n```\n# Header")

        assert doc.lines[3].kind is LineKind.HEADER

    def test_unterminated_fence_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that an open fence at end of input is reported at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="mdgrid.parsers.markdown"):
            doc = parse_markdown("```\nstill code")

        assert kinds(doc) == [LineKind.CODE_BLOCK, LineKind.PARAGRAPH]
        assert "left open" in caplog.text


@pytest.mark.unit
class TestDocument:
    """Test document-level properties and metadata."""

    def test_line_count_matches_breaks(self) -> None:
        """Test that the number of lines is the number of line breaks plus one."""
        text = "a\r\nb\rc\n"
        doc = parse_markdown(text)

        assert len(doc) == 4
        assert doc.info.line_count == 4

    def test_empty_input(self) -> None:
        """Test that empty text yields one empty line."""
        doc = parse_markdown("")

        assert kinds(doc) == [LineKind.EMPTY]

    def test_original_line_is_kept(self) -> None:
        """Test that each line keeps its raw source text."""
        doc = parse_markdown("    - item\n# h")

        assert [line.original_line for line in doc.lines] == ["    - item", "# h"]

    def test_sample_document(self, sample_document: Document) -> None:
        """Test the kinds of the shared sample document."""
        assert kinds(sample_document) == [
            LineKind.HEADER,
            LineKind.EMPTY,
            LineKind.PARAGRAPH,
            LineKind.EMPTY,
            LineKind.LIST_ITEM,
            LineKind.LIST_ITEM,
            LineKind.LIST_ITEM,
            LineKind.LIST_ITEM,
            LineKind.EMPTY,
            LineKind.QUOTE,
            LineKind.EMPTY,
            LineKind.HORIZONTAL_RULE,
            LineKind.EMPTY,
            LineKind.TABLE,
            LineKind.EMPTY,
            LineKind.CODE_BLOCK,
            LineKind.PARAGRAPH,
            LineKind.CODE_BLOCK,
            LineKind.EMPTY,
            LineKind.PARAGRAPH,
            LineKind.EMPTY,
        ]
        assert sample_document.info.source_name == "notes.md"
        assert sample_document.info.converted_at is not None

    def test_parser_is_reusable(self) -> None:
        """Test that one parser instance carries no state between documents."""
        parser = MarkdownGridParser()
        parser.parse("```\n1. a")

        doc = parser.parse("1. b\n# h")

        assert plain(doc) == ["1. b", "h"]
        assert kinds(doc) == [LineKind.LIST_ITEM, LineKind.HEADER]

    def test_custom_style_options(self) -> None:
        """Test that style options reach the runs."""
        options = MarkdownParserOptions(style=StyleOptions(base_font_size=9, header_font_sizes={1: 30}))
        doc = parse_markdown("# big\nsmall", options=options)

        assert doc.lines[0].rich_text[0].style.font_size == 30
        assert doc.lines[1].rich_text[0].style.font_size == 9

    def test_wrong_options_type(self) -> None:
        """Test that renderer options are rejected by the parser."""
        with pytest.raises(ValidationError):
            MarkdownGridParser(GridRendererOptions())  # type: ignore[arg-type]


@pytest.mark.unit
class TestParseFile:
    """Test the file boundary."""

    def test_parse_file(self, markdown_file) -> None:
        """Test parsing from a path records source metadata."""
        doc = parse_markdown_file(markdown_file)

        assert doc.info.source_name == "notes.md"
        assert doc.info.source_path == str(markdown_file)
        assert doc.lines[0].plain_text == "Project Notes"

    def test_missing_file(self, tmp_path) -> None:
        """Test that a missing file raises SourceNotFoundError."""
        with pytest.raises(SourceNotFoundError, match="File not found"):
            parse_markdown_file(tmp_path / "absent.md")

    def test_invalid_utf8(self, tmp_path) -> None:
        """Test that undecodable bytes raise SourceReadError."""
        path = tmp_path / "bad.md"
        path.write_bytes(b"\xff\xfe\xfa broken")

        with pytest.raises(SourceReadError, match="not valid UTF-8"):
            parse_markdown_file(path)

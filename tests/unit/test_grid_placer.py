#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_grid_placer.py
"""Unit tests for grid placement, link numbering and sheet naming."""

import pytest

from mdgrid.ast import Document
from mdgrid.constants import APPENDIX_HEADER_TEXT
from mdgrid.options import GridRendererOptions, StyleOptions
from mdgrid.parsers.markdown import parse_markdown
from mdgrid.renderers.grid import CellAttributes, LinkTable, place_document, unique_sheet_name


@pytest.mark.unit
class TestPlacement:
    """Test cell coordinates and attributes."""

    def test_rows_follow_line_positions(self) -> None:
        """Test that line i lands on row i + 1."""
        layout = place_document(parse_markdown("a\nb\n\nc"))

        assert [cell.row for cell in layout.cells] == [1, 2, 3, 4]

    def test_columns_follow_indent(self) -> None:
        """Test the indent to column mapping with the default offset."""
        layout = place_document(parse_markdown("a\n    b\n        c"))

        assert [cell.column for cell in layout.cells] == [1, 2, 3]

    def test_indent_offset(self) -> None:
        """Test that the indent offset multiplies the indent level."""
        layout = place_document(parse_markdown("a\n    b\n        c"), GridRendererOptions(indent_column_offset=3))

        assert [cell.column for cell in layout.cells] == [1, 4, 7]

    def test_runs_are_copied(self) -> None:
        """Test that unlinked runs pass through unchanged."""
        doc = parse_markdown("x **y**")
        layout = place_document(doc)

        assert layout.cells[0].runs == doc.lines[0].rich_text

    def test_quote_and_rule_attributes(self) -> None:
        """Test fill and borders taken from line formatting."""
        style = StyleOptions()
        layout = place_document(parse_markdown("> q\n---\nplain"))

        assert layout.cells[0].attributes == CellAttributes(
            background_color=style.quote_background_color, left_border_color=style.quote_border_color
        )
        assert layout.cells[1].attributes == CellAttributes(bottom_border_color=style.horizontal_rule_color)
        assert layout.cells[2].attributes.is_plain

    def test_layout_parameters(self) -> None:
        """Test that uniform layout values come from the options."""
        options = GridRendererOptions(cell_width=2.5, row_height=18, column_count=40, sheet_name="Doc")
        layout = place_document(parse_markdown("a"), options)

        assert (layout.cell_width, layout.row_height, layout.column_count, layout.sheet_name) == (2.5, 18, 40, "Doc")

    def test_document_is_not_modified(self) -> None:
        """Test that placement leaves the document untouched."""
        doc = parse_markdown("[a](https://x.example)")
        before = doc.lines

        place_document(doc)

        assert doc.lines == before
        assert doc.lines[0].plain_text == "a"


@pytest.mark.unit
class TestLinks:
    """Test link numbering, markers and the appendix."""

    def test_duplicate_target_shares_number(self) -> None:
        """Test that the same URL twice gets one entry and the same marker."""
        doc = parse_markdown("a [x](https://u.example)\nb [y](https://u.example)")
        layout = place_document(doc)

        assert layout.link_table.targets == ("https://u.example",)
        assert layout.cells[0].text == "a x [1]"
        assert layout.cells[1].text == "b y [1]"
        assert len(layout.appendix_cells) == 2

    def test_numbering_is_document_wide(self) -> None:
        """Test that numbering continues across lines in first-occurrence order."""
        doc = parse_markdown("[a](https://a.example) [b](https://b.example)\n[c](https://c.example) [a2](https://a.example)")
        layout = place_document(doc)

        assert layout.cells[0].text == "a [1] b [2]"
        assert layout.cells[1].text == "c [3] a2 [1]"

    def test_appendix_position_and_content(self) -> None:
        """Test that the appendix follows two blank rows after the content."""
        doc = parse_markdown("[a](https://a.example)\n[b](https://b.example)\nend")
        layout = place_document(doc)
        header, first, second = layout.appendix_cells

        assert (header.row, header.column, header.text) == (6, 1, APPENDIX_HEADER_TEXT)
        assert (first.row, first.text, first.hyperlink) == (7, "[1] https://a.example", "https://a.example")
        assert (second.row, second.text, second.hyperlink) == (8, "[2] https://b.example", "https://b.example")
        assert layout.last_row == 8

    def test_appendix_styles(self) -> None:
        """Test appendix header and entry fonts."""
        style = StyleOptions(font_name="Arial")
        layout = place_document(parse_markdown("[a](u)"), GridRendererOptions(style=style))
        header, entry = layout.appendix_cells

        assert header.runs[0].style.bold is True
        assert header.runs[0].style.font_size == style.header_font_size(2)
        assert header.runs[0].style.font_name == "Arial"
        assert entry.runs[0].style.underline is True
        assert entry.runs[0].style.color == style.link_color

    def test_no_links_no_appendix(self) -> None:
        """Test that a document without links has no appendix."""
        layout = place_document(parse_markdown("plain\ntext"))

        assert layout.appendix_cells == ()
        assert len(layout.link_table) == 0
        assert layout.last_row == 2

    def test_every_linked_run_gets_marker(self) -> None:
        """Test that each run of a multi-run link carries the marker."""
        layout = place_document(parse_markdown("[**b** c](https://u.example)"))

        assert [run.text for run in layout.cells[0].runs] == ["b [1]", " c [1]"]

    def test_link_table_from_document(self, sample_document: Document) -> None:
        """Test collecting distinct targets from the sample document."""
        table = LinkTable.from_document(sample_document)

        assert table.targets == ("https://example.com/a",)
        assert list(table) == [(1, "https://example.com/a")]
        assert table.number_for("https://example.com/a") == 1
        assert "https://other.example" not in table

    def test_unknown_target_raises(self) -> None:
        """Test that looking up an unknown target raises KeyError."""
        with pytest.raises(KeyError):
            LinkTable(("a",)).number_for("b")


@pytest.mark.unit
class TestUniqueSheetName:
    """Test sheet name collision avoidance."""

    def test_free_name_is_used(self) -> None:
        """Test that an unused name is returned unchanged."""
        assert unique_sheet_name("Markdown", ["Other"]) == "Markdown"

    def test_smallest_free_suffix(self) -> None:
        """Test that the smallest free suffix is chosen."""
        existing = ["Markdown", "Markdown (1)", "Markdown (3)"]

        assert unique_sheet_name("Markdown", existing) == "Markdown (2)"

    def test_timestamp_after_exhausting_suffixes(self) -> None:
        """Test the time-based fallback after 100 taken suffixes."""
        existing = ["Markdown"] + [f"Markdown ({k})" for k in range(1, 101)]

        assert unique_sheet_name("Markdown", existing, clock=lambda: 1700000000.5) == "Markdown (1700000000500)"

    def test_hundredth_suffix_is_tried(self) -> None:
        """Test that suffix 100 is still a candidate."""
        existing = ["Markdown"] + [f"Markdown ({k})" for k in range(1, 100)]

        assert unique_sheet_name("Markdown", existing) == "Markdown (100)"

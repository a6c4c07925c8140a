#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_options.py
"""Unit tests for option dataclasses and their validation."""

from dataclasses import FrozenInstanceError

import pytest

from mdgrid.options import GridRendererOptions, MarkdownParserOptions, StyleOptions, create_updated_options


@pytest.mark.unit
class TestStyleOptions:
    """Test StyleOptions defaults and validation."""

    def test_defaults(self) -> None:
        """Test the documented default values."""
        style = StyleOptions()

        assert style.font_name == "Meiryo"
        assert style.code_font_name == "Consolas"
        assert style.base_font_size == 11
        assert style.header_font_sizes == {1: 18, 2: 16, 3: 14, 4: 12, 5: 11, 6: 10}
        assert style.link_color == "FF0563C1"
        assert style.quote_background_color == "E8F4FD"

    def test_header_sizes_with_string_keys(self) -> None:
        """Test that header levels given as strings are normalized to ints."""
        style = StyleOptions(header_font_sizes={"1": 20, "2": 15})

        assert style.header_font_sizes == {1: 20, 2: 15}
        assert style.header_font_size(1) == 20

    def test_missing_header_level_falls_back(self) -> None:
        """Test that an unmapped level uses the base font size."""
        style = StyleOptions(base_font_size=10, header_font_sizes={1: 20})

        assert style.header_font_size(4) == 10

    @pytest.mark.parametrize("sizes", [{7: 10}, {0: 10}, {"x": 10}, {1: 0}, {1: "big"}])
    def test_invalid_header_sizes(self, sizes) -> None:
        """Test rejection of bad header levels and sizes."""
        with pytest.raises(ValueError, match="header_font_sizes"):
            StyleOptions(header_font_sizes=sizes)

    @pytest.mark.parametrize("color", ["#FF0000", "red", "FFF", "GG0000", ""])
    def test_invalid_color(self, color: str) -> None:
        """Test rejection of colors that are not 6 or 8 hex digits."""
        with pytest.raises(ValueError, match="link_color"):
            StyleOptions(link_color=color)

    def test_non_positive_base_size(self) -> None:
        """Test rejection of a zero base font size."""
        with pytest.raises(ValueError, match="base_font_size"):
            StyleOptions(base_font_size=0)

    def test_frozen(self) -> None:
        """Test that options cannot be mutated."""
        with pytest.raises(FrozenInstanceError):
            StyleOptions().font_name = "Arial"  # type: ignore[misc]


@pytest.mark.unit
class TestGridRendererOptions:
    """Test GridRendererOptions defaults and validation."""

    def test_defaults(self) -> None:
        """Test the documented default values."""
        options = GridRendererOptions()

        assert options.cell_width == 3.0
        assert options.row_height == 20.0
        assert options.indent_column_offset == 1
        assert options.sheet_name == "Markdown"
        assert options.column_count == 100

    @pytest.mark.parametrize(
        "kwargs,field_name",
        [
            ({"cell_width": 0}, "cell_width"),
            ({"row_height": -1}, "row_height"),
            ({"indent_column_offset": -1}, "indent_column_offset"),
            ({"column_count": 0}, "column_count"),
            ({"sheet_name": "  "}, "sheet_name"),
            ({"sheet_name": "a/b"}, "sheet_name"),
        ],
    )
    def test_invalid_values(self, kwargs, field_name: str) -> None:
        """Test rejection of out-of-range layout values."""
        with pytest.raises(ValueError, match=field_name):
            GridRendererOptions(**kwargs)

    def test_column_for_indent(self) -> None:
        """Test the indent to column formula."""
        options = GridRendererOptions(indent_column_offset=2)

        assert [options.column_for_indent(level) for level in range(3)] == [1, 3, 5]

    def test_zero_offset_keeps_column_one(self) -> None:
        """Test that an offset of zero puts every line in column 1."""
        assert GridRendererOptions(indent_column_offset=0).column_for_indent(5) == 1


@pytest.mark.unit
class TestCloning:
    """Test creating updated copies of options."""

    def test_create_updated(self) -> None:
        """Test that create_updated returns a new validated instance."""
        original = GridRendererOptions()
        updated = original.create_updated(cell_width=4.5)

        assert updated.cell_width == 4.5
        assert original.cell_width == 3.0

    def test_create_updated_validates(self) -> None:
        """Test that updated values pass through validation."""
        with pytest.raises(ValueError):
            MarkdownParserOptions().style.create_updated(link_color="nope")

    def test_create_updated_options_helper(self) -> None:
        """Test the module-level helper."""
        updated = create_updated_options(StyleOptions(), font_name="Arial")

        assert updated.font_name == "Arial"

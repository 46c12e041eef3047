"""
Tests for render_adnation_brackets

The bracket line is a pure function of the column list and the variation
flag: spaces up to the first column, an open glyph, fill between columns,
a junction at every interior column and a close glyph at the last.
"""

import pytest

from src.core.domain import INVARIANT_GLYPHS, VARIABLE_GLYPHS, render_adnation_brackets
from src.core.errors import ColumnRenderError


class TestRenderAdnationBrackets:
    """Tests for render_adnation_brackets"""

    def test_two_columns(self) -> None:
        assert render_adnation_brackets([2, 9]) == "  ╰──────╯"

    def test_three_columns(self) -> None:
        assert render_adnation_brackets([2, 5, 8]) == "  ╰──┴──╯"

    def test_adjacent_columns_have_no_fill(self) -> None:
        assert render_adnation_brackets([0, 1, 2]) == "╰┴╯"

    def test_variable_glyphs(self) -> None:
        line = render_adnation_brackets([2, 5, 8], variation=True)
        assert line == "  └┄┄┴┄┄┘"
        assert not set(line.strip()) - {"└", "┘", "┄", "┴"}

    def test_invariant_glyph_set(self) -> None:
        line = render_adnation_brackets([1, 4, 6, 10])
        assert not set(line.strip()) - set(INVARIANT_GLYPHS)
        assert line.count("┴") == 2

    def test_glyph_tables_disjoint_except_junction(self) -> None:
        assert set(INVARIANT_GLYPHS) & set(VARIABLE_GLYPHS) == {"┴"}

    def test_width_ends_at_last_column(self) -> None:
        columns = [3, 7, 20]
        assert len(render_adnation_brackets(columns)) == columns[-1] + 1

    @pytest.mark.parametrize("columns", [[], [4]])
    def test_fewer_than_two_columns(self, columns) -> None:
        assert render_adnation_brackets(columns) == ""
        assert render_adnation_brackets(columns, variation=True) == ""

    def test_deterministic(self) -> None:
        assert render_adnation_brackets([2, 5, 8]) == render_adnation_brackets((2, 5, 8))

    def test_negative_column(self) -> None:
        with pytest.raises(ColumnRenderError):
            render_adnation_brackets([-1, 3])

    @pytest.mark.parametrize("columns", [[5, 5], [5, 3], [1, 4, 4], [1, 6, 2]])
    def test_non_increasing_columns(self, columns) -> None:
        with pytest.raises(ColumnRenderError):
            render_adnation_brackets(columns)

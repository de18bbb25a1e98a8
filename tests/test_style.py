"""Tests for drawing style rendering."""

from __future__ import annotations

from gnuplot_tools.constants import CIRCLE_POINT, DOTTED_LINE
from gnuplot_tools.style import Style


def test_style_defaults() -> None:
    """Default style is automatic color/line type, width 0.5, filled circle 0.5."""
    style = Style()
    assert style.color == '-1'
    assert style.line_type == '-1'
    assert style.line_width == 0.5
    assert style.point_type == '7'
    assert style.point_size == 0.5


def test_default_point_and_line_style() -> None:
    """Default clauses match gnuplot keyword order."""
    style = Style()
    assert style.point_style() == 'pointtype 7 pointsize 0.5 linecolor -1'
    assert style.line_style() == 'linetype -1 linewidth 0.5 linecolor -1'


def test_point_style_is_repeatable() -> None:
    """Rendering twice without changes gives identical clauses."""
    style = Style()
    style.point_type = CIRCLE_POINT
    style.point_size = 1.5
    style.color = "rgb 'red'"
    first = style.point_style()
    assert first == style.point_style()
    assert first == "pointtype 6 pointsize 1.5 linecolor rgb 'red'"


def test_line_style_reads_current_fields() -> None:
    """A field change affects the next rendering only."""
    style = Style()
    before = style.line_style()
    style.line_type = DOTTED_LINE
    style.line_width = 2
    assert before == 'linetype -1 linewidth 0.5 linecolor -1'
    assert style.line_style() == 'linetype 3 linewidth 2 linecolor -1'


def test_replace_returns_modified_copy() -> None:
    """replace() leaves the original untouched."""
    style = Style()
    dotted = style.replace(line_type=DOTTED_LINE)
    assert dotted.line_type == DOTTED_LINE
    assert style.line_type == '-1'
    assert dotted.point_style() == style.point_style()

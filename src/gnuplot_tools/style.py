"""Drawing style state and its gnuplot clause rendering."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from gnuplot_tools.constants import (
    DEFAULT_COLOR,
    DEFAULT_LINE_TYPE,
    DEFAULT_LINE_WIDTH,
    DEFAULT_POINT_SIZE,
    DEFAULT_POINT_TYPE,
)
from gnuplot_tools.format_utils import format_number


@dataclass
class Style:
    """Current drawing attributes of a script.

    Fields hold gnuplot tokens as strings (color may be an index such as
    '-1' or a spec such as "rgb 'red'"); widths and sizes are numbers.
    Drawing calls read the fields when they emit a clause, so a change
    applies to later clauses only.
    """

    color: str = DEFAULT_COLOR
    line_type: str = DEFAULT_LINE_TYPE
    line_width: float = DEFAULT_LINE_WIDTH
    point_type: str = DEFAULT_POINT_TYPE
    point_size: float = DEFAULT_POINT_SIZE

    def point_style(self) -> str:
        """Render the style clause used for points."""
        return (
            f'pointtype {self.point_type} '
            f'pointsize {format_number(self.point_size)} '
            f'linecolor {self.color}'
        )

    def line_style(self) -> str:
        """Render the style clause used for lines."""
        return (
            f'linetype {self.line_type} '
            f'linewidth {format_number(self.line_width)} '
            f'linecolor {self.color}'
        )

    def replace(self, **changes: object) -> Style:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

"""Demonstration figure: random points in a circle with their tangent lines."""

from __future__ import annotations

import os
from typing import TextIO

from gnuplot_tools.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, DOTTED_LINE
from gnuplot_tools.geometry import Line, random_disc_points
from gnuplot_tools.script import GnuplotScript

RADIUS = 3.0
AXIS_LIMIT = 3.9
MARGIN = 3


def write_demo_script(
    stream: TextIO,
    image_file: str | os.PathLike[str],
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    count: int = 10,
    seed: int | None = None,
) -> None:
    """Write the demo script to stream.

    Draws a circle of radius 3, dotted axes, and count random points inside
    the circle, each with the line through it normal to its radius.

    Raises:
        UnsupportedFormatError: image_file extension has no terminal.
    """
    p = GnuplotScript(stream, image_file, width, height)
    p.xrange(-AXIS_LIMIT, AXIS_LIMIT)
    p.yrange(-AXIS_LIMIT, AXIS_LIMIT)
    p.margin(MARGIN)
    p.lock_ratio()

    points = random_disc_points(count, RADIUS, seed)
    with p.multiplot_scope():
        p.circle(0, 0, RADIUS)
        with p.option_scope('parametric'), p.plot_scope():
            with p.styled(line_type=DOTTED_LINE):
                p.lines('t, 0', '0, t')
            # A point exactly on the x axis would give a vertical line.
            p.lines(*(Line(c).ax_plus_b() for c in points if c.y != 0.0))
            p.points(*(str(c) for c in points))
    p.quit()

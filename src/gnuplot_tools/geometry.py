"""Plane geometry helpers for the demonstration figure."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gnuplot_tools.format_utils import format_number


@dataclass(frozen=True)
class Point:
    """Point in the plane; str() gives the 'x y' form used by points()."""

    x: float
    y: float

    def __str__(self) -> str:
        return f'{format_number(self.x)} {format_number(self.y)}'


def polar_point(theta: float, radius: float) -> Point:
    """Convert polar coordinates (radians) to a Point."""
    return Point(radius * math.cos(theta), radius * math.sin(theta))


@dataclass(frozen=True)
class Line:
    """Line given by its closest point to the origin.

    The vector from the origin to c is normal to the line, so for a point on
    a circle the line is the tangent there.
    """

    c: Point

    def ax_plus_b(self) -> str:
        """Parametric form 't,a*t+b' of y = a*x + b.

        Raises:
            ZeroDivisionError: Line is vertical (c.y == 0).
        """
        x, y = self.c.x, self.c.y
        rr = x * x + y * y
        return f't,{format_number(-x / y)}*t{format_number(rr / y, signed=True)}'


def random_disc_points(count: int, radius: float, seed: int | None = None) -> list[Point]:
    """Draw points uniformly distributed over a disc centered at the origin.

    Parameters:
        count: Number of points.
        radius: Disc radius.
        seed: Random seed for a reproducible figure; None for fresh entropy.

    Returns:
        List of count Points.
    """
    import numpy as np

    rng = np.random.default_rng(seed)
    theta = 2.0 * np.pi * rng.random(count)
    r = radius * np.sqrt(rng.random(count))  # uniform over the disc area
    return [polar_point(float(t), float(d)) for t, d in zip(theta, r)]

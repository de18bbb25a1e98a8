"""Configuration: gnuplot binary and terminal style from environment."""

import os

from gnuplot_tools.constants import DEFAULT_GNUPLOT, DEFAULT_TERMINAL_STYLE


def get_gnuplot_binary() -> str:
    """Return the gnuplot executable name (GNUPLOT env var or default).

    Returns:
        Program name or path passed to the batch runner.
    """
    return os.environ.get('GNUPLOT', '').strip() or DEFAULT_GNUPLOT


def get_terminal_style() -> str:
    """Return the style suffix of the `set terminal` directive.

    GNUPLOT_TERMINAL_STYLE overrides the white background and Cambria Math
    font used by default. An empty value is honored (no style suffix).

    Returns:
        Free-form terminal options string.
    """
    return os.environ.get('GNUPLOT_TERMINAL_STYLE', DEFAULT_TERMINAL_STYLE)

"""Gnuplot script builder.

Build gnuplot scripts from Python calls and render them with the gnuplot
binary:
- GnuplotScript: writes terminal setup, options, blocks, and plot clauses
- Style: point and line style state used by plot clauses
- run_plot: executes a finished script and returns gnuplot's exit code
"""

from gnuplot_tools.constants import CIRCLE_POINT, DOTTED_LINE, ROUND_POINT
from gnuplot_tools.runner import run_batch_cmd, run_plot
from gnuplot_tools.script import GnuplotScript, ScriptStateError
from gnuplot_tools.style import Style
from gnuplot_tools.terminal import UnsupportedFormatError

__all__: list[str] = [
    'CIRCLE_POINT',
    'DOTTED_LINE',
    'ROUND_POINT',
    'GnuplotScript',
    'ScriptStateError',
    'Style',
    'UnsupportedFormatError',
    'run_batch_cmd',
    'run_plot',
]

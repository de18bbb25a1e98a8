"""Fixed constants: style codes, script punctuation, terminal defaults."""

import sys

# Line types (gnuplot `linetype`)
AUTOMATIC = '-1'  # let gnuplot pick; also the default color
DOTTED_LINE = '3'

# Point types (gnuplot `pointtype`)
CIRCLE_POINT = '6'
ROUND_POINT = '7'  # filled circle

# Style defaults
DEFAULT_COLOR = AUTOMATIC
DEFAULT_LINE_TYPE = AUTOMATIC
DEFAULT_LINE_WIDTH = 0.5
DEFAULT_POINT_TYPE = ROUND_POINT
DEFAULT_POINT_SIZE = 0.5

# Script layout
INDENT = '    '
CONTINUATION = '\\'
INLINE_DATA = "'-'"
END_OF_DATA = 'e'

# Invisible terminator point: never inside a real axis range.
SENTINEL = sys.float_info.max

# Terminal setup
DEFAULT_WIDTH = 600
DEFAULT_HEIGHT = 600
DEFAULT_TERMINAL_STYLE = "background rgb '#FFFFFF' font 'Cambria Math,8'"
DEFAULT_GNUPLOT = 'gnuplot'

# Circle objects are drawn as thin black outlines.
CIRCLE_STYLE = "fillcolor rgb '#000000' fillstyle empty linewidth 0.2"

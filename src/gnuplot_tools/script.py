"""Gnuplot script builder: emitter, scope manager, and drawing surface.

A GnuplotScript writes one gnuplot script to a text stream. Blocks are
delimited with context managers (or the equivalent callback methods); each
block indents its body and emits its closing directives when the body
returns normally. If the body raises, nothing more is written and the
script must be discarded.

Example:
    with open('test.plt', 'w') as f:
        p = GnuplotScript(f, 'abc.svg', 600, 600)
        p.xrange(-3.9, 3.9)
        with p.plot_scope():
            p.points('1.0 2.0')
        p.quit()
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable, Iterator
from typing import TextIO

from gnuplot_tools.config import get_terminal_style
from gnuplot_tools.constants import (
    CIRCLE_STYLE,
    CONTINUATION,
    END_OF_DATA,
    INDENT,
    INLINE_DATA,
    SENTINEL,
)
from gnuplot_tools.format_utils import format_number, format_row
from gnuplot_tools.style import Style
from gnuplot_tools.terminal import terminal_for, terminal_line

logger = logging.getLogger(__name__)

Body = Callable[[], None]


class ScriptStateError(RuntimeError):
    """Raised when a script is used after quit() or its scopes are unbalanced."""


class GnuplotScript:
    """Builder writing a gnuplot script line by line to a stream.

    The stream is owned by the caller and is never closed here. The
    terminal and output directives are written by the constructor, so the
    stream always starts with them.

    Attributes:
        style: Current drawing style, read by points() and lines().
    """

    def __init__(
        self,
        stream: TextIO,
        image_file: str | os.PathLike[str],
        width: int,
        height: int,
        terminal_style: str | None = None,
    ) -> None:
        """Resolve the terminal for image_file and write the setup directives.

        Raises:
            UnsupportedFormatError: image_file extension has no terminal.
                Nothing has been written to the stream in that case.
        """
        terminal = terminal_for(image_file)
        if terminal_style is None:
            terminal_style = get_terminal_style()
        self._stream = stream
        self._indent_level = 0
        self._closed = False
        self.style = Style()
        logger.debug('Terminal %s (%dx%d) for %s', terminal, width, height, image_file)
        self.emit(terminal_line(terminal, width, height, terminal_style))
        self.emit(f"set output '{os.fspath(image_file)}'")
        self.set('termoption dashed')

    @property
    def indent_level(self) -> int:
        """Current block nesting depth (0 at top level)."""
        return self._indent_level

    @property
    def closed(self) -> bool:
        """True once quit() has been called."""
        return self._closed

    # Emitter

    def emit(self, line: str) -> None:
        """Write one line at the current indentation.

        Stream errors propagate unchanged.
        """
        if self._closed:
            raise ScriptStateError('script already terminated by quit()')
        self._stream.write(INDENT * self._indent_level + line + '\n')

    def _indent(self) -> None:
        self._indent_level += 1

    def _dedent(self) -> None:
        if self._indent_level == 0:
            raise ScriptStateError('unbalanced scope: indentation below zero')
        self._indent_level -= 1

    # Scope manager

    def set(self, option: str) -> None:
        """Emit `set option`."""
        self.emit('set ' + option)

    def unset(self, option: str) -> None:
        """Emit `unset option`."""
        self.emit('unset ' + option)

    @contextlib.contextmanager
    def option_scope(self, option: str) -> Iterator[None]:
        """Set option for the body, then unset it."""
        self.set(option)
        self._indent()
        yield
        self._dedent()
        self.unset(option)

    @contextlib.contextmanager
    def plot_scope(self) -> Iterator[None]:
        """One `plot` statement; the body emits clauses ending in a continuation.

        The statement is closed with an invisible inline-data point so the
        last continuation marker is always followed by a clause.
        """
        self.emit('plot ' + CONTINUATION)
        self._indent()
        yield
        self.empty()
        self._dedent()

    @contextlib.contextmanager
    def multiplot_scope(self) -> Iterator[None]:
        """Multi-panel region sharing a single outer border.

        Panels are plotted without key, tics, border or raxis; the border and
        tics are drawn once, by an empty plot after the body.
        """
        with self.option_scope('multiplot'):
            self.no_title()
            self.unset('tics')
            self.unset('border')
            self.unset('raxis')
            yield
            self.plot_border()

    @contextlib.contextmanager
    def data_scope(self, style: str) -> Iterator[None]:
        """Inline data clause; the body emits rows (see data_row())."""
        self.emit(f'{INLINE_DATA} {style}')
        self._indent()
        yield
        self._dedent()
        self.emit(f'{END_OF_DATA},{CONTINUATION}')

    def with_option(self, option: str, body: Body) -> None:
        """Run body inside option_scope(option)."""
        with self.option_scope(option):
            body()

    def plot(self, body: Body | None = None) -> None:
        """Run body inside plot_scope(); no body draws nothing but the terminator."""
        with self.plot_scope():
            if body is not None:
                body()

    def multiplot(self, body: Body) -> None:
        """Run body inside multiplot_scope()."""
        with self.multiplot_scope():
            body()

    def data(self, style: str, body: Body) -> None:
        """Run body inside data_scope(style)."""
        with self.data_scope(style):
            body()

    def empty(self) -> None:
        """Emit an invisible point clause that terminates a plot statement."""
        self.emit(f'{INLINE_DATA} linetype bgnd')
        self.emit(format_row(SENTINEL, SENTINEL))
        self.emit(END_OF_DATA)

    def plot_border(self) -> None:
        """Draw tics and border once, with an otherwise empty plot."""
        self.set('tics')
        self.set('border')
        self.plot()

    @contextlib.contextmanager
    def styled(self, **changes: object) -> Iterator[Style]:
        """Use a modified style for the body, then restore the previous one.

        Example:
            with p.styled(line_type=DOTTED_LINE):
                p.lines('t, 0', '0, t')
        """
        saved = self.style
        self.style = saved.replace(**changes)
        try:
            yield self.style
        finally:
            self.style = saved

    # Drawing surface

    def margin(self, size: int) -> None:
        """Use the same margin on all four sides."""
        for side in ('rmargin', 'lmargin', 'tmargin', 'bmargin'):
            self.set(f'{side} {size}')

    def no_title(self) -> None:
        """Hide the key (legend)."""
        self.unset('key')

    def lock_ratio(self) -> None:
        """Make the plotting area square."""
        self.set('size square')

    def xtics(self, style: str) -> None:
        self.set('xtics ' + style)

    def ytics(self, style: str) -> None:
        self.set('ytics ' + style)

    def xrange(self, start: float, stop: float) -> None:
        """Set the x axis range; inverted ranges are written as given."""
        self.set(f'xrange [{format_number(start)}:{format_number(stop)}]')

    def yrange(self, start: float, stop: float) -> None:
        """Set the y axis range; inverted ranges are written as given."""
        self.set(f'yrange [{format_number(start)}:{format_number(stop)}]')

    def circle(self, x: float, y: float, radius: float) -> None:
        """Draw an unfilled circle object centered at (x, y)."""
        self.set(
            f'object circle at {format_number(x)},{format_number(y)} '
            f'size {format_number(radius)} {CIRCLE_STYLE}'
        )

    def points(self, *points: str) -> None:
        """Emit one point clause per 'x y' string, in the current point style."""
        for point in points:
            self.emit(f'"<echo {point}" with points {self.style.point_style()},{CONTINUATION}')

    def lines(self, *lines: str) -> None:
        """Emit one line clause per expression (e.g. 't,2*t+1' in parametric mode)."""
        for line in lines:
            self.emit(f'{line} with lines {self.style.line_style()},{CONTINUATION}')

    def data_row(self, *values: float) -> None:
        """Emit one row of numbers inside a data scope."""
        self.emit(format_row(*values))

    def test(self) -> None:
        """Emit gnuplot's terminal test page command."""
        self.emit('test')

    def quit(self) -> None:
        """Emit `quit`; the script accepts no further lines."""
        if self._indent_level != 0:
            logger.warning('quit() inside an open scope (depth %d)', self._indent_level)
        self.emit('quit')
        self._closed = True

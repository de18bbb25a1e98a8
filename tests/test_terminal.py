"""Tests for terminal selection and script setup directives."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest

from gnuplot_tools.script import GnuplotScript
from gnuplot_tools.terminal import UnsupportedFormatError, terminal_for, terminal_line


@pytest.mark.parametrize(
    ('image_file', 'expected'),
    [
        ('abc.svg', 'svg'),
        ('out/plot.png', 'pngcairo'),
        ('page.htm', 'canvas'),
        ('page.html', 'canvas'),
        (Path('dir.d/figure.svg'), 'svg'),
        ('dir/.svg', 'svg'),
        ('.png', 'pngcairo'),
    ],
)
def test_terminal_for_supported(image_file: str, expected: str) -> None:
    """Supported extensions map to their gnuplot terminal."""
    assert terminal_for(image_file) == expected


@pytest.mark.parametrize('image_file', ['abc.bmp', 'abc.pdf', 'abc', 'abc.SVG'])
def test_terminal_for_unsupported(image_file: str) -> None:
    """Other extensions raise UnsupportedFormatError (a ValueError)."""
    with pytest.raises(UnsupportedFormatError) as excinfo:
        terminal_for(image_file)
    assert isinstance(excinfo.value, ValueError)


def test_terminal_line_without_style() -> None:
    """An empty style adds no trailing text."""
    assert terminal_line('svg', 10, 20, '') == 'set terminal svg size 10,20'


def test_svg_setup_first_two_lines() -> None:
    """The stream starts with the terminal and output directives."""
    out = StringIO()
    GnuplotScript(out, 'abc.svg', 600, 600)
    lines = out.getvalue().splitlines()
    assert lines[0] == (
        "set terminal svg size 600,600 background rgb '#FFFFFF' font 'Cambria Math,8'"
    )
    assert lines[1] == "set output 'abc.svg'"
    assert lines[2] == 'set termoption dashed'
    assert len(lines) == 3


def test_png_setup_with_custom_style() -> None:
    """terminal_style replaces the default style suffix."""
    out = StringIO()
    GnuplotScript(out, 'plots/a.png', 800, 400, terminal_style='transparent')
    lines = out.getvalue().splitlines()
    assert lines[0] == 'set terminal pngcairo size 800,400 transparent'
    assert lines[1] == "set output 'plots/a.png'"


def test_terminal_style_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """GNUPLOT_TERMINAL_STYLE overrides the default style."""
    monkeypatch.setenv('GNUPLOT_TERMINAL_STYLE', "font 'Arial,10'")
    out = StringIO()
    GnuplotScript(out, 'index.html', 300, 200)
    assert out.getvalue().splitlines()[0] == "set terminal canvas size 300,200 font 'Arial,10'"


def test_unsupported_extension_writes_nothing() -> None:
    """A .bmp target fails before any line is written."""
    out = StringIO()
    with pytest.raises(UnsupportedFormatError, match='.bmp'):
        GnuplotScript(out, 'abc.bmp', 600, 600)
    assert out.getvalue() == ''

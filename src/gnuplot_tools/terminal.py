"""Output terminal selection from the image file extension."""

from __future__ import annotations

import os

# Image suffix -> gnuplot terminal. pdfcairo, emf and jpeg are not supported.
TERMINALS: dict[str, str] = {
    '.svg': 'svg',
    '.png': 'pngcairo',
    '.htm': 'canvas',
    '.html': 'canvas',
}


class UnsupportedFormatError(ValueError):
    """Raised when an image file extension has no gnuplot terminal."""

    def __init__(self, extension: str) -> None:
        super().__init__(f'Unsupported format {extension!r}')
        self.extension = extension


def terminal_for(image_file: str | os.PathLike[str]) -> str:
    """Return the gnuplot terminal name for an image file.

    Parameters:
        image_file: Output image path; only its extension is used.

    Returns:
        Terminal name ('svg', 'pngcairo' or 'canvas').

    Raises:
        UnsupportedFormatError: Extension is not in TERMINALS.
    """
    # Everything from the last dot of the file name, so 'dir/.svg' is an svg.
    name = os.path.basename(os.fspath(image_file))
    dot = name.rfind('.')
    extension = name[dot:] if dot >= 0 else ''
    try:
        return TERMINALS[extension]
    except KeyError:
        raise UnsupportedFormatError(extension) from None


def terminal_line(name: str, width: int, height: int, style: str) -> str:
    """Format the `set terminal` directive."""
    line = f'set terminal {name} size {width},{height}'
    return f'{line} {style}' if style else line

"""CLI entry point: gnuplot-tools demo|run subcommands."""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from typing import cast

from gnuplot_tools.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from gnuplot_tools.demo import write_demo_script
from gnuplot_tools.runner import run_plot
from gnuplot_tools.terminal import UnsupportedFormatError, terminal_for

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or GNUPLOT_TOOLS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('GNUPLOT_TOOLS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )


def _demo_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Write the demo script and optionally render it (demo subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; script, output, width, height, points, seed, run.

    Returns:
        0 on success, 1 on a configuration or I/O error, gnuplot's exit
        code if rendering fails.
    """
    try:
        terminal_for(args.output)
    except UnsupportedFormatError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    opened = False
    try:
        with open(args.script, 'w') as f:
            opened = True
            write_demo_script(
                f,
                args.output,
                width=args.width,
                height=args.height,
                count=args.points,
                seed=args.seed,
            )
    except OSError as e:
        print(f'Error: {e}', file=sys.stderr)
        if opened:
            # A partially written script is unusable.
            with contextlib.suppress(OSError):
                os.remove(args.script)
        return 1
    logger.info('Wrote %s', args.script)
    if not args.run:
        return 0
    return _render(args.script)


def _run_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Render an existing script (run subcommand)."""
    return _render(args.script)


def _render(script: str) -> int:
    try:
        return run_plot(script)
    except OSError as e:
        print(f'Error: cannot run gnuplot: {e}', file=sys.stderr)
        return 1


def main() -> int:
    """Entry point for gnuplot-tools CLI (demo | run).

    Returns:
        Process exit code.
    """
    parser = argparse.ArgumentParser(
        prog='gnuplot-tools',
        description='Build gnuplot scripts and render them.',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    demo_parser = subparsers.add_parser('demo', help='Write the demonstration script')
    demo_parser.add_argument(
        '--script', type=str, default='test.plt', help='Script file to write'
    )
    demo_parser.add_argument(
        '-o',
        '--output',
        type=str,
        default='abc.svg',
        help='Image file named in the script (.svg, .png, .htm, .html)',
    )
    demo_parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Pixels')
    demo_parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Pixels')
    demo_parser.add_argument(
        '--points', type=int, default=10, help='Number of random points'
    )
    demo_parser.add_argument(
        '--seed', type=int, default=None, help='Random seed for a reproducible figure'
    )
    demo_parser.add_argument(
        '--run', action='store_true', help='Render the script with gnuplot afterwards'
    )
    demo_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    demo_parser.set_defaults(func=_demo_cmd)

    run_parser = subparsers.add_parser('run', help='Render a script with gnuplot')
    run_parser.add_argument('script', type=str, help='Script file to execute')
    run_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    run_parser.set_defaults(func=_run_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


if __name__ == '__main__':
    sys.exit(main())

"""Run gnuplot (or any batch program) on a finished script."""

from __future__ import annotations

import logging
import os
import subprocess

from gnuplot_tools.config import get_gnuplot_binary

logger = logging.getLogger(__name__)


def run_batch_cmd(name: str, *args: str) -> int:
    """Run a program without stdin, sharing this process's stdout/stderr.

    Parameters:
        name: Program name or path.
        args: Command-line arguments.

    Returns:
        0 on success, otherwise the program's nonzero exit code. A program
        killed by signal N reports 128 + N, as a POSIX shell does.

    Raises:
        OSError: The program could not be started (e.g. FileNotFoundError).
    """
    cmd = [name, *args]
    logger.debug('Running %s', cmd)
    completed = subprocess.run(cmd, stdin=subprocess.DEVNULL, check=False)
    status = completed.returncode
    if status < 0:
        logger.debug('%s killed by signal %d', name, -status)
        status = 128 - status
    elif status != 0:
        logger.debug('%s exited with status %d', name, status)
    return status


def run_plot(script: str | os.PathLike[str], gnuplot: str | None = None) -> int:
    """Render a script file with gnuplot.

    Parameters:
        script: Path of the script to execute.
        gnuplot: Executable to use; defaults to config.get_gnuplot_binary().

    Returns:
        gnuplot's exit code (0 on success).
    """
    binary = gnuplot or get_gnuplot_binary()
    status = run_batch_cmd(binary, os.fspath(script))
    if status != 0:
        logger.warning('%s failed on %s with exit code %d', binary, script, status)
    return status

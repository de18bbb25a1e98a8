"""Shared fixtures: isolate tests from the caller's gnuplot environment."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_gnuplot_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ('GNUPLOT', 'GNUPLOT_TERMINAL_STYLE', 'GNUPLOT_TOOLS_LOG'):
        monkeypatch.delenv(name, raising=False)

"""Global pytest configuration."""

from __future__ import annotations

import pytest

from bwpath.config import SOLVER_CONFIG


@pytest.fixture(autouse=True)
def _optimality_check_off(monkeypatch):
    """Run with the optimality check off unless a test turns it on.

    Keeps BWPATH_CHECK_OPTIMALITY in the environment from changing results
    on graphs the checker rejects.
    """
    monkeypatch.setattr(SOLVER_CONFIG, "check_optimality", False)

"""Pytest configuration and fixtures.

Provides environment isolation and marker registration. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_resultr_env(request, monkeypatch):
    """Ensure a clean RESULTR_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("RESULTR_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def resultr_debug_logs(caplog):
    """Capture DEBUG records from the resultr logger (not autouse)."""
    caplog.set_level(logging.DEBUG, logger="resultr")
    return caplog


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "integration: Tests that drive real third-party collaborators",
        "allow_env_pollution: Keep RESULTR_* environment variables as-is",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)

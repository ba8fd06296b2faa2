"""
Shared fixtures for the test suite.

Centralizes the API client and the instruments the fretboard tests use, so
individual test files don't need to rebuild them.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.fretboard.positions import get_window
from core.fretboard.tunings import get_tuning
from core.fretboard.types import PositionWindow, Tuning

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """TestClient over the full app (routers + error handlers)."""
    return TestClient(app)


@pytest.fixture
def standard() -> Tuning:
    """Six-string standard tuning."""
    return get_tuning("standard-6")


@pytest.fixture
def low_window() -> PositionWindow:
    """Frets 1–5."""
    return get_window("low")

"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For shared builders and fakes, see tests/fixtures and tests/mocks.
"""

import os
import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "web: marks tests that exercise the FastAPI app (deselect with '-m \"not web\"')"
    )


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep a developer's SKILLSCOUT_* / WEB_* settings out of the tests."""
    for name in list(os.environ):
        if name.startswith("SKILLSCOUT_") or name in ("WEB_HOST", "WEB_PORT"):
            monkeypatch.delenv(name, raising=False)

"""Pytest configuration.

Run pytest from the project root; pythonpath in pyproject.toml puts src/ and
the root on sys.path so tests can import both the package and
tests.declaration_factories.
"""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def telemetry() -> MagicMock:
    """TelemetryPort stand-in that records calls."""
    return MagicMock()

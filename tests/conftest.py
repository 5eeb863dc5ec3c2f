"""
Pytest configuration and shared fixtures for the string service tests.

Adds the project root to ``sys.path`` so the tests run against the
working tree without installing the package.
"""

import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from string_service_api.app.main import app  # noqa: E402
from string_service_api.app.services.string_service import StringService  # noqa: E402


@pytest.fixture
def svc():
    return StringService()


@pytest.fixture
def client():
    """TestClient bound to the application."""
    with TestClient(app) as test_client:
        yield test_client

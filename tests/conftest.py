"""
Pytest fixtures for CHRONOS test suite.
"""

import pytest
from app import create_app
from relativity.config import default_config


@pytest.fixture
def app():
    """Create application for testing."""
    app = create_app({"TESTING": True})
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def config():
    """Default physics config (real constants + catalog)."""
    return default_config()


@pytest.fixture
def catalog(config):
    return config.catalog

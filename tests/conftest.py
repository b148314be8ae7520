"""Shared fixtures for the pathjson test suite."""

import pytest
from fastapi.testclient import TestClient

from pathjson.infrastructure.config import Config
from pathjson.server.app import create_app


@pytest.fixture
def config() -> Config:
    """Configuration isolated from the developer's environment."""
    return Config(environment="production", log_level="WARNING")


@pytest.fixture
def client(config: Config) -> TestClient:
    """Test client bound to a freshly created application."""
    return TestClient(create_app(config))

"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from gamereviews.database import InMemoryDatabase, init_database, reset_database


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def database() -> Generator[InMemoryDatabase, None, None]:
    """Give every test a freshly seeded shared database."""
    reset_database()
    db = init_database(force_reinit=True)
    yield db
    reset_database()


@pytest.fixture
def mock_info() -> Any:
    """Create a mock GraphQL info object with request context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock()}
    return info


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")

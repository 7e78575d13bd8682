"""Shared test fixtures."""

from collections.abc import Generator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()

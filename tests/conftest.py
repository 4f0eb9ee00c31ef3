"""
Shared test fixtures and configurations for all tests.

This file contains fixtures that can be used across all test files,
making it easier to maintain consistent test environments.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add the project root to the Python path to make imports work consistently
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def mock_session():
    """Provide a mock aiohttp session that is still open."""
    session = MagicMock(closed=False)
    session.close = AsyncMock()
    return session


@pytest.fixture
def no_retry_sleep(monkeypatch):
    """Skip the backoff delay between retries."""
    sleep = AsyncMock()
    monkeypatch.setattr("spot_prices.api.base.error_handler.asyncio.sleep", sleep)
    return sleep

"""Unit test fixtures (mocks and stubs).

Provides mock objects for testing without external dependencies.
"""

from unittest.mock import MagicMock

import pytest

from blockthetweet.models.prediction import PredictionResult


@pytest.fixture
def mock_redis():
    """Mock Redis client for unit tests (sync)."""
    mock = MagicMock()
    mock.set = MagicMock(return_value=True)
    mock.get = MagicMock(return_value=None)
    mock.zadd = MagicMock(return_value=1)
    mock.zrevrange = MagicMock(return_value=[])
    mock.zcard = MagicMock(return_value=0)
    return mock


@pytest.fixture
def sample_result() -> PredictionResult:
    """Finished prediction for sink and model tests."""
    return PredictionResult(
        text="great day",
        text_hash=1234567890123456789,
        confidence=0.87,
        latency_ns=1200,
    )

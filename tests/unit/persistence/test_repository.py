"""
Unit tests for RedisPredictionRepository.
"""

import json
from unittest.mock import MagicMock

import pytest

from blockthetweet.config import Settings
from blockthetweet.persistence.repository import RedisPredictionRepository


@pytest.fixture
def mock_settings():
    """Mock settings."""
    settings = MagicMock(spec=Settings)
    settings.RESULT_TTL_SECONDS = 3600
    return settings


@pytest.fixture
def repository(mock_redis, mock_settings):
    """Create repository with mocked Redis."""
    return RedisPredictionRepository(mock_redis, mock_settings)


def test_record_success(repository, mock_redis, sample_result):
    """First write stores the record with TTL and indexes it."""
    assert repository.record(sample_result) is True
    
    args, kwargs = mock_redis.set.call_args
    assert args[0] == "prediction:1234567890123456789"
    assert kwargs == {"ex": 3600, "nx": True}
    
    stored = json.loads(args[1])
    assert stored["text"] == "great day"
    assert stored["confidence"] == 0.87
    assert stored["latency_ns"] == 1200
    assert "recorded_at" in stored
    
    mock_redis.zadd.assert_called_once()
    index_key, mapping = mock_redis.zadd.call_args.args
    assert index_key == "prediction:index"
    assert list(mapping) == ["1234567890123456789"]


def test_record_existing_hash_is_not_reindexed(repository, mock_redis, sample_result):
    """SET NX returns None when the key exists: first write wins."""
    mock_redis.set.return_value = None
    
    assert repository.record(sample_result) is True
    mock_redis.zadd.assert_not_called()


def test_record_redis_error(repository, mock_redis, sample_result):
    """Redis failures are reported, never raised."""
    mock_redis.set.side_effect = Exception("Redis error")
    
    assert repository.record(sample_result) is False


def test_get_prediction(repository, mock_redis, sample_result):
    record = {**sample_result.model_dump(mode="json"), "recorded_at": "2026-01-01T00:00:00+00:00"}
    mock_redis.get.return_value = json.dumps(record)
    
    result = repository.get_prediction(sample_result.text_hash)
    
    assert result == sample_result
    mock_redis.get.assert_called_once_with("prediction:1234567890123456789")


def test_get_prediction_not_found(repository, mock_redis):
    mock_redis.get.return_value = None
    
    assert repository.get_prediction(42) is None


def test_get_prediction_corrupt_record(repository, mock_redis):
    mock_redis.get.return_value = "{not json"
    
    assert repository.get_prediction(42) is None


def test_get_recent_skips_expired(repository, mock_redis, sample_result):
    mock_redis.zrevrange.return_value = [str(sample_result.text_hash), "99"]
    mock_redis.get.side_effect = [sample_result.model_dump_json(), None]
    
    results = repository.get_recent(limit=10)
    
    assert results == [sample_result]
    mock_redis.zrevrange.assert_called_once_with("prediction:index", 0, 9)


def test_get_stats(repository, mock_redis):
    mock_redis.zcard.return_value = 17
    
    assert repository.get_stats() == {"total_predictions": 17, "result_ttl_seconds": 3600}


def test_get_stats_redis_error(repository, mock_redis):
    mock_redis.zcard.side_effect = Exception("Redis down")
    
    stats = repository.get_stats()
    
    assert stats["total_predictions"] == -1
    assert "error" in stats

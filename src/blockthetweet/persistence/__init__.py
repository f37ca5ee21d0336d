"""
Optional persistence for finished predictions.

- sink.py: PredictionSink interface and the dispatch hook used by the API
- redis_client.py: Redis connection pooling
- repository.py: Redis implementation of PredictionSink

Persistence is off by default (PERSISTENCE_MODE=disabled).
"""

from blockthetweet.persistence.redis_client import RedisClient
from blockthetweet.persistence.repository import RedisPredictionRepository
from blockthetweet.persistence.sink import PredictionSink, dispatch_to_sink

__all__ = [
    "RedisClient",
    "RedisPredictionRepository",
    "PredictionSink",
    "dispatch_to_sink",
]

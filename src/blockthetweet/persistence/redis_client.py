"""
Redis client with connection pooling for the persistence layer.

Sink writes happen either inline in the worker thread or in a Starlette
background task; both are synchronous, so only the sync client is pooled.
"""

import logging
from typing import Optional

from redis import ConnectionPool, Redis

from blockthetweet.config import Settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Redis client wrapper with a shared connection pool."""
    
    _pool: Optional[ConnectionPool] = None
    
    @classmethod
    def get_client(cls, settings: Settings) -> Redis:
        """
        Get Redis client backed by the shared connection pool.
        
        Args:
            settings: Application settings
        
        Returns:
            Redis client instance
        """
        if cls._pool is None:
            cls._pool = ConnectionPool.from_url(
                settings.REDIS_URL,
                max_connections=settings.REDIS_MAX_CONNECTIONS,
                decode_responses=True,  # Auto-decode bytes to str
                socket_timeout=5,
                socket_connect_timeout=5,
                retry_on_timeout=True,
            )
            logger.info("Initialized Redis connection pool")
        
        return Redis(connection_pool=cls._pool)
    
    @classmethod
    def close_pool(cls) -> None:
        """Close connection pool (cleanup on shutdown)."""
        if cls._pool is not None:
            cls._pool.disconnect()
            cls._pool = None
            logger.info("Closed Redis connection pool")

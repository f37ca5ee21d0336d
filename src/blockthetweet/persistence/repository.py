"""
Redis-backed prediction sink.

Storage Strategy:
- Predictions: JSON string per text hash, key = "prediction:{text_hash}"
- First write wins: a hash already stored is not overwritten
- Index by timestamp: Sorted set "prediction:index" (score = recorded time)
- TTL: RESULT_TTL_SECONDS
"""

import json
import structlog
from datetime import datetime, timezone
from typing import Optional

from redis import Redis

from blockthetweet.config import Settings
from blockthetweet.models.prediction import PredictionResult
from blockthetweet.monitoring.metrics import sink_writes_total
from blockthetweet.persistence.sink import PredictionSink

logger = structlog.get_logger(__name__)


class RedisPredictionRepository(PredictionSink):
    """
    Repository for prediction records.
    
    Uses Redis for persistence with TTL for auto-cleanup.
    """
    
    PREDICTION_PREFIX = "prediction:"
    PREDICTIONS_INDEX = "prediction:index"
    
    def __init__(self, redis_client: Redis, settings: Settings):
        """
        Initialize repository.
        
        Args:
            redis_client: Redis client instance
            settings: Application settings
        """
        self.redis = redis_client
        self.settings = settings
        self.result_ttl = settings.RESULT_TTL_SECONDS
    
    def _key(self, text_hash: int) -> str:
        return f"{self.PREDICTION_PREFIX}{text_hash}"
    
    def record(self, result: PredictionResult) -> bool:
        """
        Save a prediction to Redis.
        
        Args:
            result: PredictionResult to save
        
        Returns:
            True if saved or already present, False on Redis failure
        """
        try:
            recorded_at = datetime.now(timezone.utc)
            record = {
                **result.model_dump(mode="json"),
                "recorded_at": recorded_at.isoformat(),
            }
            
            created = self.redis.set(
                self._key(result.text_hash),
                json.dumps(record),
                ex=self.result_ttl,
                nx=True,
            )
            
            if created:
                self.redis.zadd(
                    self.PREDICTIONS_INDEX,
                    {str(result.text_hash): recorded_at.timestamp()},
                )
            
            sink_writes_total.labels(sink="redis", success="true").inc()
            logger.info(
                "Saved prediction" if created else "Prediction already stored",
                text_hash=result.text_hash,
                ttl=self.result_ttl,
            )
            return True
        
        except Exception as e:
            sink_writes_total.labels(sink="redis", success="false").inc()
            logger.error(
                "Failed to save prediction",
                text_hash=result.text_hash,
                error=str(e),
                exc_info=True,
            )
            return False
    
    def get_prediction(self, text_hash: int) -> Optional[PredictionResult]:
        """
        Retrieve a stored prediction by text hash.
        
        Args:
            text_hash: XXH64 fingerprint of the text
        
        Returns:
            PredictionResult if found, None otherwise
        """
        try:
            raw = self.redis.get(self._key(text_hash))
            
            if raw is None:
                logger.debug("Prediction not found", text_hash=text_hash)
                return None
            
            record = json.loads(raw)
            record.pop("recorded_at", None)
            return PredictionResult.model_validate(record)
        
        except Exception as e:
            logger.error(
                "Failed to retrieve prediction",
                text_hash=text_hash,
                error=str(e),
                exc_info=True,
            )
            return None
    
    def get_recent(self, limit: int = 100) -> list[PredictionResult]:
        """
        Get recent predictions ordered by recording time.
        
        Args:
            limit: Maximum number of predictions
        
        Returns:
            List of PredictionResult (newest first). Entries whose record
            has expired are skipped.
        """
        try:
            hashes = self.redis.zrevrange(self.PREDICTIONS_INDEX, 0, limit - 1)
            
            results = []
            for text_hash in hashes:
                result = self.get_prediction(int(text_hash))
                if result:
                    results.append(result)
            
            logger.info("Retrieved recent predictions", count=len(results))
            return results
        
        except Exception as e:
            logger.error(
                "Failed to retrieve recent predictions",
                error=str(e),
                exc_info=True,
            )
            return []
    
    def get_stats(self) -> dict:
        """
        Get repository statistics.
        
        Returns:
            Dict with total indexed predictions and TTL
        """
        try:
            return {
                "total_predictions": self.redis.zcard(self.PREDICTIONS_INDEX),
                "result_ttl_seconds": self.result_ttl,
            }
        
        except Exception as e:
            logger.error("Failed to get stats", error=str(e))
            return {
                "total_predictions": -1,
                "error": str(e),
            }

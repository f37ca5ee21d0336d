"""
Prediction sink interface and dispatch hook.

A sink receives finished predictions for storage or analytics. The
pipeline does not depend on any storage semantics: sinks report failure by
returning False and never raise into the request path.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog
from fastapi import BackgroundTasks

from blockthetweet.models.prediction import PredictionResult

logger = structlog.get_logger(__name__)


class PredictionSink(ABC):
    """Destination for finished predictions."""
    
    @abstractmethod
    def record(self, result: PredictionResult) -> bool:
        """
        Store one prediction.
        
        Args:
            result: Finished prediction
        
        Returns:
            True if stored (or already present), False on failure
        """
        pass


def dispatch_to_sink(
    sink: Optional[PredictionSink],
    result: PredictionResult,
    mode: str,
    background_tasks: Optional[BackgroundTasks] = None,
) -> None:
    """
    Hand a prediction to the configured sink.
    
    Args:
        sink: Sink instance, or None when persistence is not configured
        result: Finished prediction
        mode: "disabled", "sync" (record before responding) or
            "background" (record after the response is sent)
        background_tasks: Request-scoped task list, required for "background"
    """
    if sink is None or mode == "disabled":
        return
    
    if mode == "background" and background_tasks is not None:
        background_tasks.add_task(sink.record, result)
        return
    
    if mode == "background":
        logger.warning("No background task list available, recording inline")
    
    sink.record(result)

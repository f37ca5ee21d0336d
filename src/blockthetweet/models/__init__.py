"""
Data models for the prediction pipeline.

Includes:
- Enums (PipelineState, FailureKind)
- PredictionResult (frozen pydantic model, one per request)
- PredictionOutcome (terminal state of one pipeline run)
"""

from blockthetweet.models.enums import FailureKind, PipelineState
from blockthetweet.models.prediction import PredictionOutcome, PredictionResult

__all__ = [
    "FailureKind",
    "PipelineState",
    "PredictionOutcome",
    "PredictionResult",
]

"""
Scoring model layer.

- base_scorer.py: BaseScorer contract and ScoreResult
- torchscript_scorer.py: TorchScript implementation
- exceptions.py: load and inference errors
"""

from blockthetweet.scoring.base_scorer import BaseScorer, ScoreResult
from blockthetweet.scoring.exceptions import (
    InferenceTimeoutError,
    ScoringError,
    ScoringModelLoadError,
)
from blockthetweet.scoring.torchscript_scorer import TorchScriptScorer

__all__ = [
    "BaseScorer",
    "ScoreResult",
    "InferenceTimeoutError",
    "ScoringError",
    "ScoringModelLoadError",
    "TorchScriptScorer",
]

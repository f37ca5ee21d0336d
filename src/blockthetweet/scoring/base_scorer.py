"""
Abstract base for scoring models.

Defines the call contract every model backend must honour: one fixed-length
id sequence in, one confidence plus the wall-clock duration of the model
call out. Keeping this separate lets tests and alternative runtimes stand in
for the TorchScript model without touching the pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class ScoreResult:
    """
    Output of one scoring call.
    
    Attributes:
        confidence: Model output, e.g. probability of the target class
        latency_ns: Duration of the model call only, in nanoseconds
    """
    
    confidence: float
    latency_ns: int


class BaseScorer(ABC):
    """
    Abstract base class for scoring models.
    
    Responsibilities:
    - Run exactly one sequence per call (no batching)
    - Measure the duration of the model call alone
    - Raise an InferenceError subclass instead of returning a made-up score
    
    Does NOT handle:
    - Tokenization (that's the Tokenizer's job)
    - Timeouts (the caller bounds the wait)
    """
    
    @abstractmethod
    def score(self, sequence: Sequence[int]) -> ScoreResult:
        """
        Score one token sequence.
        
        Args:
            sequence: Fixed-length sequence of token ids
        
        Returns:
            ScoreResult with confidence and latency
        
        Raises:
            ScoringError: If the model call fails or returns an unusable output
        """
        pass
    
    def close(self) -> None:
        """Release model resources. Default implementation does nothing."""
        pass
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

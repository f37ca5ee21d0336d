"""
Prediction record and pipeline outcome.
"""

import math
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blockthetweet.models.enums import FailureKind, PipelineState

UINT64_LIMIT = 2**64


class PredictionResult(BaseModel):
    """
    Result of scoring one text.
    
    Built once per request and never mutated. ``text`` is the input exactly
    as received, not the normalized form the model saw.
    """
    model_config = ConfigDict(frozen=True)
    
    text: str = Field(..., description="Original input text, unmodified")
    text_hash: int = Field(
        ...,
        ge=0,
        lt=UINT64_LIMIT,
        description="XXH64 fingerprint of the text (opaque identity tag)",
    )
    confidence: float = Field(..., description="Model output for the text")
    latency_ns: int = Field(..., ge=0, description="Model call duration in nanoseconds")
    
    @field_validator("confidence")
    @classmethod
    def confidence_is_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("confidence must be finite")
        return v
    
    def to_response_data(self) -> dict:
        """Wire format of a successful prediction."""
        return {
            "text_hash": self.text_hash,
            "text": self.text,
            "confidence": self.confidence,
            "nanosecond": self.latency_ns,
        }


@dataclass(frozen=True)
class PredictionOutcome:
    """
    Terminal state of one prediction run.
    
    Attributes:
        state: DONE or FAILED
        result: The prediction (only when state is DONE)
        failure: Failure kind (only when state is FAILED)
        failed_at: Last state reached before failing
        error: Exception that caused the failure, for logging only
        word_count: Number of words in the input (when tokenization ran)
        unknown_words: Words that mapped to the unknown id
    """
    
    state: PipelineState
    result: Optional[PredictionResult] = None
    failure: Optional[FailureKind] = None
    failed_at: Optional[PipelineState] = None
    error: Optional[Exception] = None
    word_count: int = 0
    unknown_words: int = 0
    
    @property
    def ok(self) -> bool:
        return self.state is PipelineState.DONE
    
    @classmethod
    def done(cls, result: PredictionResult, word_count: int = 0, unknown_words: int = 0) -> "PredictionOutcome":
        return cls(
            state=PipelineState.DONE,
            result=result,
            word_count=word_count,
            unknown_words=unknown_words,
        )
    
    @classmethod
    def failed(
        cls,
        failure: FailureKind,
        failed_at: PipelineState,
        error: Optional[Exception] = None,
        word_count: int = 0,
        unknown_words: int = 0,
    ) -> "PredictionOutcome":
        return cls(
            state=PipelineState.FAILED,
            failure=failure,
            failed_at=failed_at,
            error=error,
            word_count=word_count,
            unknown_words=unknown_words,
        )

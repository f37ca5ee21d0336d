"""
Enumerations for the prediction pipeline.
"""

from enum import Enum


class PipelineState(str, Enum):
    """
    States of one prediction run.
    
    start -> tokenized -> scored -> done, with any stage able to move to
    failed. done and failed are terminal; the pipeline never retries.
    """
    
    START = "start"
    TOKENIZED = "tokenized"
    SCORED = "scored"
    DONE = "done"
    FAILED = "failed"


class FailureKind(str, Enum):
    """Why a prediction run failed. Callers branch on this, not on exception types."""
    
    BAD_INPUT = "bad_input"
    INFERENCE_ERROR = "inference_error"
    INTERNAL_ERROR = "internal_error"

"""
Custom exceptions for the scoring model layer.

These let the prediction pipeline tell a model that could not be loaded
(fatal at startup) apart from a single forward pass that failed
(fails one request).
"""

from blockthetweet.exceptions import ConfigLoadError, InferenceError


class ScoringModelLoadError(ConfigLoadError):
    """
    Raised when the serialized model cannot be loaded.
    
    Includes missing files, corrupt archives and archives that are not
    TorchScript.
    """
    pass


class ScoringError(InferenceError):
    """
    Raised when a forward pass fails.
    
    Examples:
    - Input shape does not match what the model was traced with
    - Out of memory
    - Output is not a single finite scalar
    """
    pass


class InferenceTimeoutError(InferenceError):
    """
    Raised when a prediction exceeds the configured time bound.
    
    The forward pass itself is not interrupted, only the caller stops waiting.
    """
    pass

"""
Error taxonomy for the inference service.

Every failure the service can produce falls into one of four kinds:

- ConfigLoadError: startup artefacts (model, vocabulary, stemmer) unavailable.
  Fatal, the process must not start.
- BadInputError: malformed request or untokenizable input. Surfaced as 400.
- InferenceError: the scoring model call failed. Surfaced as 500, never retried.
- InternalError: anything unexpected while assembling a prediction. Surfaced as 500.

Package-specific subclasses live next to the code that raises them.
"""

from typing import Any


class BlockTheTweetError(Exception):
    """
    Base exception for all service errors.
    
    Carries a human-readable message and structured details for logging.
    Details are never echoed to HTTP clients.
    """
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigLoadError(BlockTheTweetError):
    """Raised at startup when a required artefact cannot be loaded."""
    pass


class BadInputError(BlockTheTweetError):
    """Raised when a request cannot be processed because of its content."""
    pass


class InferenceError(BlockTheTweetError):
    """Raised when the scoring model call fails for any reason."""
    pass


class InternalError(BlockTheTweetError):
    """Raised for unexpected faults while assembling a prediction."""
    pass

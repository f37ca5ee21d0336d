"""
Exceptions raised while loading and applying text preprocessing artefacts.
"""

from blockthetweet.exceptions import BadInputError, ConfigLoadError


class VocabularyLoadError(ConfigLoadError):
    """
    Raised when the word-index definition is missing or malformed.
    
    The definition must be a JSON object mapping words to non-negative
    integer ids.
    """
    
    def __init__(self, message: str, path: str | None = None, reason: str | None = None):
        details = {}
        if path:
            details["path"] = path
        if reason:
            # Keep the parser message short, pydantic errors can be long
            details["reason"] = reason[:500]
        
        super().__init__(message, details)


class StemmerLoadError(ConfigLoadError):
    """Raised when no stemmer exists for the configured language."""
    
    def __init__(self, message: str, language: str | None = None):
        super().__init__(message, {"language": language} if language else None)


class TokenizationError(BadInputError):
    """Raised when text cannot be turned into a token sequence."""
    pass

"""
Word index used to turn stemmed words into model input ids.

The index is loaded once at startup from a JSON object mapping words to
non-negative integer ids, e.g. {"great": 12, "day": 7}. Id 0 is reserved
for words the index does not know.

After construction the mapping is exposed through a read-only proxy, so a
single Vocabulary can be shared by every request handler without locking.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Annotated, Mapping

import structlog
from pydantic import Field, TypeAdapter, ValidationError

from blockthetweet.preprocessing.exceptions import VocabularyLoadError

logger = structlog.get_logger(__name__)

UNKNOWN_TOKEN_ID = 0

_WORD_INDEX_ADAPTER = TypeAdapter(dict[str, Annotated[int, Field(ge=0)]])


class Vocabulary:
    """Immutable mapping from stemmed, lowercased word to integer id."""
    
    def __init__(self, word_index: Mapping[str, int]):
        self._index = MappingProxyType(dict(word_index))
    
    @classmethod
    def from_json(cls, raw: str | bytes) -> "Vocabulary":
        """
        Parse a word index from JSON text.
        
        Values must be JSON integers; floats, booleans, strings and negative
        numbers are rejected rather than coerced.
        
        Raises:
            VocabularyLoadError: If the document is not a valid word index
        """
        try:
            word_index = _WORD_INDEX_ADAPTER.validate_json(raw, strict=True)
        except ValidationError as e:
            raise VocabularyLoadError(
                f"Malformed word index: {e.error_count()} error(s)",
                reason=str(e),
            ) from e
        return cls(word_index)
    
    @classmethod
    def from_file(cls, path: str | Path) -> "Vocabulary":
        """
        Load a word index from a JSON file.
        
        Args:
            path: Path to the word-index JSON file
        
        Returns:
            Loaded Vocabulary
        
        Raises:
            VocabularyLoadError: If the file is missing, unreadable or malformed
        """
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise VocabularyLoadError(
                "Word index file not readable",
                path=str(path),
                reason=str(e),
            ) from e
        
        try:
            vocabulary = cls.from_json(raw)
        except VocabularyLoadError as e:
            e.details["path"] = str(path)
            raise
        
        logger.info("Vocabulary loaded", path=str(path), size=len(vocabulary))
        return vocabulary
    
    def lookup(self, word: str) -> int:
        """Return the id of ``word``, or UNKNOWN_TOKEN_ID if it is not indexed."""
        return self._index.get(word, UNKNOWN_TOKEN_ID)
    
    def __contains__(self, word: object) -> bool:
        return word in self._index
    
    def __len__(self) -> int:
        return len(self._index)
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"

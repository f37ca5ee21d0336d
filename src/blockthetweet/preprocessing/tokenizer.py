"""Text to fixed-length id sequence conversion."""

import re
from typing import NamedTuple, Protocol, Sequence

import structlog

from blockthetweet.preprocessing.exceptions import TokenizationError
from blockthetweet.preprocessing.vocabulary import UNKNOWN_TOKEN_ID, Vocabulary

logger = structlog.get_logger(__name__)

TokenSequence = tuple[int, ...]

# Words are separated by C-locale whitespace only; NBSP and other Unicode
# spaces stay inside the word
_WORD = re.compile(r"[^ \t\n\v\f\r]+")

# Locale-independent case folding: only A-Z are touched
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


class SupportsStem(Protocol):
    def stem(self, word: str) -> str: ...


def ascii_lower(word: str) -> str:
    """Lowercase ASCII letters only."""
    return word.translate(_ASCII_LOWER)


def fit_to_length(ids: Sequence[int], length: int) -> TokenSequence:
    """
    Truncate or right-pad ``ids`` to exactly ``length`` elements.
    
    Trailing ids beyond ``length`` are dropped; short sequences are padded
    with UNKNOWN_TOKEN_ID.
    
    Raises:
        TokenizationError: If ``length`` is negative
    """
    if length < 0:
        raise TokenizationError(
            f"Sequence length must be non-negative, got {length}",
            details={"length": length},
        )
    
    fitted = tuple(ids[:length])
    return fitted + (UNKNOWN_TOKEN_ID,) * (length - len(fitted))


class Tokenization(NamedTuple):
    """Fixed-length id sequence plus the word counts it was built from."""
    
    sequence: TokenSequence
    word_count: int
    unknown_words: int


class Tokenizer:
    """
    Whitespace tokenizer backed by a vocabulary and a stemmer.
    
    Each whitespace-delimited word is lowercased, stemmed and looked up,
    in that order. There is no stop-word removal and no punctuation
    stripping: "day!" and "day" are different words.
    """
    
    def __init__(self, vocabulary: Vocabulary, stemmer: SupportsStem):
        self.vocabulary = vocabulary
        self.stemmer = stemmer
    
    def encode(self, text: str) -> list[int]:
        """Map every word of ``text`` to its id, keeping order. No padding."""
        return [
            self.vocabulary.lookup(self.stemmer.stem(ascii_lower(word)))
            for word in _WORD.findall(text)
        ]
    
    def analyze(self, text: str, length: int) -> Tokenization:
        """
        Tokenize ``text`` and report how many words it had and how many were unknown.
        
        Counts are taken before truncation and padding.
        
        Raises:
            TokenizationError: If ``length`` is negative
        """
        ids = self.encode(text)
        sequence = fit_to_length(ids, length)
        unknown_words = sum(1 for token_id in ids if token_id == UNKNOWN_TOKEN_ID)
        logger.debug(
            "Tokenized text",
            head=list(sequence[:10]),
            length=length,
            word_count=len(ids),
            unknown_words=unknown_words,
        )
        return Tokenization(sequence, len(ids), unknown_words)
    
    def tokenize(self, text: str, length: int) -> TokenSequence:
        """
        Turn ``text`` into a sequence of exactly ``length`` ids.
        
        Args:
            text: Raw input text
            length: Model input length
        
        Returns:
            Tuple of ``length`` integer ids
        
        Raises:
            TokenizationError: If ``length`` is negative
        """
        return self.analyze(text, length).sequence

"""
Text preprocessing for the scoring model.

- vocabulary.py: word index (word -> id, 0 for unknown)
- stemmer.py: per-thread Snowball stemmer
- tokenizer.py: whitespace split, ASCII lowercase, stem, lookup, fit to length
- hashing.py: XXH64 content fingerprint
"""

from blockthetweet.preprocessing.hashing import ContentHasher
from blockthetweet.preprocessing.stemmer import Stemmer
from blockthetweet.preprocessing.tokenizer import (
    TokenSequence,
    Tokenization,
    Tokenizer,
    fit_to_length,
)
from blockthetweet.preprocessing.vocabulary import UNKNOWN_TOKEN_ID, Vocabulary

__all__ = [
    "ContentHasher",
    "Stemmer",
    "TokenSequence",
    "Tokenization",
    "Tokenizer",
    "fit_to_length",
    "UNKNOWN_TOKEN_ID",
    "Vocabulary",
]

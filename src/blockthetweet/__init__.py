"""
BlockTheTweet inference service.

Classifies short texts (tweets) with a pre-trained sequence model behind a
single HTTP endpoint:
- Tokenization (whitespace split, ASCII lowercase, Snowball stem, word index)
- Scoring with a TorchScript model, timing the model call alone
- XXH64 fingerprint of the input as an opaque identity tag
- Optional persistence of predictions to Redis

Architecture: FastAPI + TorchScript + Snowball stemmer + structlog
"""

__version__ = "0.1.0"

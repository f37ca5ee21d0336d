"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import json
import time
from pathlib import Path
from typing import Sequence

import pytest

from blockthetweet.config import Settings
from blockthetweet.pipeline.assembler import PredictionPipeline
from blockthetweet.preprocessing.hashing import ContentHasher
from blockthetweet.preprocessing.stemmer import Stemmer
from blockthetweet.preprocessing.tokenizer import Tokenizer
from blockthetweet.preprocessing.vocabulary import Vocabulary
from blockthetweet.scoring.base_scorer import BaseScorer, ScoreResult
from blockthetweet.scoring.exceptions import ScoringError


class RecordingScorer(BaseScorer):
    """Scorer stub that returns a fixed confidence and remembers its inputs."""
    
    def __init__(self, confidence: float = 0.87, latency_ns: int = 1200):
        self.confidence = confidence
        self.latency_ns = latency_ns
        self.calls: list[tuple[int, ...]] = []
    
    def score(self, sequence: Sequence[int]) -> ScoreResult:
        self.calls.append(tuple(sequence))
        return ScoreResult(confidence=self.confidence, latency_ns=self.latency_ns)


class FailingScorer(BaseScorer):
    """Scorer stub whose forward pass always fails."""
    
    def __init__(self, error: Exception | None = None):
        self.error = error or ScoringError("Model forward pass failed", details={"error": "shape mismatch"})
    
    def score(self, sequence: Sequence[int]) -> ScoreResult:
        raise self.error


class SlowScorer(RecordingScorer):
    """Scorer stub that blocks for a while before answering."""
    
    def __init__(self, delay_seconds: float = 0.5):
        super().__init__()
        self.delay_seconds = delay_seconds
    
    def score(self, sequence: Sequence[int]) -> ScoreResult:
        time.sleep(self.delay_seconds)
        return super().score(sequence)


class IdentityStemmer:
    """Stemmer stub that leaves words untouched."""
    
    def stem(self, word: str) -> str:
        return word


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing."""
    return Settings(
        APP_NAME="BlockTheTweet Inference",
        APP_VERSION="v0.1",
        APP_AUTHOR="doddy-s",
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",
        MODEL_PATH="./missing-model.pt",
        VOCABULARY_PATH="./missing-word-index.json",
        STEMMER_LANGUAGE="english",
        SEQUENCE_LENGTH=3,
        HASH_SEED=0,
        SCORING_TIMEOUT_SECONDS=None,
        PERSISTENCE_MODE="disabled",
        REDIS_URL="redis://localhost:6379/0",
        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def word_index() -> dict[str, int]:
    """Small word index keyed by English Snowball stems."""
    return {
        "great": 12,
        "day": 7,
        "run": 3,
        "tweet": 21,
        "block": 5,
    }


@pytest.fixture
def vocabulary(word_index: dict[str, int]) -> Vocabulary:
    return Vocabulary(word_index)


@pytest.fixture
def vocabulary_file(tmp_path: Path, word_index: dict[str, int]) -> Path:
    """Word index written to a temporary JSON file."""
    path = tmp_path / "word-index.json"
    path.write_text(json.dumps(word_index), encoding="utf-8")
    return path


@pytest.fixture
def stemmer() -> Stemmer:
    return Stemmer("english")


@pytest.fixture
def tokenizer(vocabulary: Vocabulary, stemmer: Stemmer) -> Tokenizer:
    return Tokenizer(vocabulary, stemmer)


@pytest.fixture
def recording_scorer() -> RecordingScorer:
    return RecordingScorer()


@pytest.fixture
def create_pipeline(tokenizer: Tokenizer):
    """Factory fixture to build a pipeline around any scorer.
    
    Usage:
        def test_something(create_pipeline):
            pipeline = create_pipeline(FailingScorer(), sequence_length=5)
    """
    def _create(scorer: BaseScorer, sequence_length: int = 3) -> PredictionPipeline:
        return PredictionPipeline(
            tokenizer=tokenizer,
            scorer=scorer,
            hasher=ContentHasher(seed=0),
            sequence_length=sequence_length,
        )
    
    return _create


@pytest.fixture
def identity_stemmer() -> IdentityStemmer:
    return IdentityStemmer()


@pytest.fixture
def make_failing_scorer():
    """Factory fixture for a scorer that raises ``error`` on every call."""
    def _create(error: Exception | None = None) -> FailingScorer:
        return FailingScorer(error)
    
    return _create


@pytest.fixture
def make_slow_scorer():
    """Factory fixture for a scorer that sleeps before answering."""
    def _create(delay_seconds: float = 0.5) -> SlowScorer:
        return SlowScorer(delay_seconds)
    
    return _create

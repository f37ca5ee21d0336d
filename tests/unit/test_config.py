"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from blockthetweet.config import Settings


def test_default_values(monkeypatch):
    for key in ("PORT", "SEQUENCE_LENGTH", "STEMMER_LANGUAGE", "MODEL_PATH", "VOCABULARY_PATH", "HASH_SEED", "PERSISTENCE_MODE"):
        monkeypatch.delenv(key, raising=False)
    
    settings = Settings(_env_file=None)
    
    assert settings.PORT == 3000
    assert settings.SEQUENCE_LENGTH == 295
    assert settings.STEMMER_LANGUAGE == "english"
    assert settings.MODEL_PATH == "./bilstm-en-683k.pt"
    assert settings.VOCABULARY_PATH == "./word-index.json"
    assert settings.HASH_SEED == 0
    assert settings.PERSISTENCE_MODE == "disabled"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SEQUENCE_LENGTH", "34")
    monkeypatch.setenv("scoring_timeout_seconds", "2.5")
    
    settings = Settings(_env_file=None)
    
    assert settings.SEQUENCE_LENGTH == 34
    assert settings.SCORING_TIMEOUT_SECONDS == 2.5


@pytest.mark.parametrize(
    "overrides",
    [
        {"SEQUENCE_LENGTH": -1},
        {"SCORING_TIMEOUT_SECONDS": 0},
        {"PERSISTENCE_MODE": "sqlite"},
        {"HASH_SEED": -3},
        {"HASH_SEED": 2**64},
        {"LOG_TEXT_PREVIEW_CHARS": -1},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_largest_hash_seed_accepted():
    assert Settings(_env_file=None, HASH_SEED=2**64 - 1).HASH_SEED == 2**64 - 1

"""
FastAPI dependency injection for the inference service.

Provides singleton instances of expensive resources (model, vocabulary,
stemmer) and the pipeline that ties them together. Everything is built once
and passed explicitly; tests swap components through
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Optional

from blockthetweet.config import Settings, settings
from blockthetweet.persistence.redis_client import RedisClient
from blockthetweet.persistence.repository import RedisPredictionRepository
from blockthetweet.persistence.sink import PredictionSink
from blockthetweet.pipeline.assembler import PredictionPipeline
from blockthetweet.preprocessing.hashing import ContentHasher
from blockthetweet.preprocessing.stemmer import Stemmer
from blockthetweet.preprocessing.tokenizer import Tokenizer
from blockthetweet.preprocessing.vocabulary import Vocabulary
from blockthetweet.scoring.base_scorer import BaseScorer
from blockthetweet.scoring.torchscript_scorer import TorchScriptScorer


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    
    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_vocabulary() -> Vocabulary:
    """
    Get singleton vocabulary, loaded from VOCABULARY_PATH.
    
    Raises:
        VocabularyLoadError: If the word index is missing or malformed
    """
    return Vocabulary.from_file(get_settings().VOCABULARY_PATH)


@lru_cache()
def get_stemmer() -> Stemmer:
    """
    Get singleton stemmer for STEMMER_LANGUAGE.
    
    Raises:
        StemmerLoadError: If the language is not supported
    """
    return Stemmer(get_settings().STEMMER_LANGUAGE)


@lru_cache()
def get_scorer() -> BaseScorer:
    """
    Get singleton scoring model, loaded from MODEL_PATH.
    
    Raises:
        ScoringModelLoadError: If the model cannot be loaded
    """
    app_settings = get_settings()
    return TorchScriptScorer.from_file(
        app_settings.MODEL_PATH,
        serialize=app_settings.SERIALIZE_SCORING,
    )


@lru_cache()
def get_pipeline() -> PredictionPipeline:
    """
    Get singleton prediction pipeline.
    
    Called once at startup so that any ConfigLoadError aborts the process
    before the server accepts requests.
    
    Returns:
        PredictionPipeline instance
    """
    app_settings = get_settings()
    return PredictionPipeline(
        tokenizer=Tokenizer(get_vocabulary(), get_stemmer()),
        scorer=get_scorer(),
        hasher=ContentHasher(seed=app_settings.HASH_SEED),
        sequence_length=app_settings.SEQUENCE_LENGTH,
    )


@lru_cache()
def get_sink() -> Optional[PredictionSink]:
    """
    Get the prediction sink, or None when persistence is disabled.
    
    Returns:
        RedisPredictionRepository or None
    """
    app_settings = get_settings()
    if app_settings.PERSISTENCE_MODE == "disabled":
        return None
    
    redis_client = RedisClient.get_client(app_settings)
    return RedisPredictionRepository(redis_client, app_settings)

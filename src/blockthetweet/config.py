"""
Configuration settings for the BlockTheTweet inference service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Application ===
    APP_NAME: str = "BlockTheTweet Inference"
    APP_VERSION: str = "v0.1"
    APP_AUTHOR: str = "doddy-s"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_TEXT_PREVIEW_CHARS: int = Field(default=32, ge=0)  # 0 keeps tweets out of logs
    
    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    
    # === Model artefacts ===
    MODEL_PATH: str = "./bilstm-en-683k.pt"  # TorchScript archive
    VOCABULARY_PATH: str = "./word-index.json"
    STEMMER_LANGUAGE: str = "english"
    
    # === Tokenization ===
    SEQUENCE_LENGTH: int = Field(default=295, ge=0)  # Fixed per deployed model
    HASH_SEED: int = Field(default=0, ge=0, lt=2**64)  # XXH64 seed is 64-bit
    
    # === Scoring ===
    SCORING_TIMEOUT_SECONDS: Optional[float] = Field(default=None, gt=0)
    SERIALIZE_SCORING: bool = True  # One forward pass at a time
    
    # === Persistence ===
    PERSISTENCE_MODE: Literal["disabled", "sync", "background"] = "disabled"
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_MAX_CONNECTIONS: int = 20
    RESULT_TTL_SECONDS: int = 86400  # 24 hours
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()

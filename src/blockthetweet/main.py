"""
FastAPI application entry point for the BlockTheTweet inference service.
"""

import structlog
import uvicorn
from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from blockthetweet.api.dependencies import get_pipeline, get_sink
from blockthetweet.api.error_handlers import EXCEPTION_HANDLERS
from blockthetweet.api.middleware import CORSHeadersMiddleware, RequestTracingMiddleware
from blockthetweet.api.routes import router
from blockthetweet.config import settings
from blockthetweet.exceptions import ConfigLoadError
from blockthetweet.logging_config import configure_logging
from blockthetweet.persistence.redis_client import RedisClient

# Configure structured logging before anything else logs
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT, settings.LOG_TEXT_PREVIEW_CHARS)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Tweet classification with a pre-trained sequence model",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestTracingMiddleware)
# Added last so it wraps tracing and answers preflight first
app.add_middleware(CORSHeadersMiddleware)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["classification"])


@app.on_event("startup")
async def startup():
    """Load model, vocabulary and stemmer. Any failure aborts the process."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        model_path=settings.MODEL_PATH,
        vocabulary_path=settings.VOCABULARY_PATH,
        stemmer_language=settings.STEMMER_LANGUAGE,
        sequence_length=settings.SEQUENCE_LENGTH,
    )
    
    try:
        get_pipeline()
    except ConfigLoadError as e:
        logger.critical(
            "Startup artefact could not be loaded",
            error_type=type(e).__name__,
            error=e.message,
            details=e.details,
        )
        raise
    
    if settings.PERSISTENCE_MODE != "disabled":
        get_sink()
        logger.info("Prediction sink enabled", mode=settings.PERSISTENCE_MODE)
    
    logger.info("Application startup complete")


@app.on_event("shutdown")
async def shutdown():
    """Application shutdown - release model and connections."""
    logger.info("Application shutdown")
    if get_pipeline.cache_info().currsize:
        get_pipeline().scorer.close()
    RedisClient.close_pool()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    logger.info("BlockTheTweet server starting", host=settings.HOST, port=settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()

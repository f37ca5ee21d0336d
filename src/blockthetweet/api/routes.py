"""
API routes for tweet classification.

POST / classifies one text synchronously; GET / returns service metadata.
CORS preflight (OPTIONS) is answered by CORSHeadersMiddleware.
"""

import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from blockthetweet.api.dependencies import get_pipeline, get_settings, get_sink
from blockthetweet.api.error_handlers import error_response
from blockthetweet.api.models import (
    ErrorResponse,
    InfoResponse,
    PredictionResponse,
    PredictRequest,
    ServiceInfo,
)
from blockthetweet.config import Settings
from blockthetweet.exceptions import BadInputError
from blockthetweet.persistence.sink import PredictionSink, dispatch_to_sink
from blockthetweet.pipeline.assembler import PredictionPipeline

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/",
    response_model=PredictionResponse,
    status_code=status.HTTP_200_OK,
    summary="Classify one text",
    description="""
    Tokenize the text, score it with the deployed model and return the
    confidence together with the model latency and a fingerprint of the text.
    
    The body is parsed manually so that non-JSON bodies are reported with
    the same 400 envelope as a missing or non-string `text`.
    """,
    responses={
        200: {"description": "Prediction completed"},
        400: {"model": ErrorResponse, "description": "Body is not JSON or `text` is missing/not a string"},
        500: {"model": ErrorResponse, "description": "Model or pipeline failure"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": PredictRequest.model_json_schema()}},
        }
    },
)
async def classify_text(
    request: Request,
    background_tasks: BackgroundTasks,
    pipeline: PredictionPipeline = Depends(get_pipeline),
    sink: Optional[PredictionSink] = Depends(get_sink),
    settings: Settings = Depends(get_settings),
):
    """
    Classify a single text.
    
    Args:
        request: Raw request (body parsed here)
        background_tasks: Used when persistence runs after the response
        pipeline: Prediction pipeline (injected)
        sink: Prediction sink or None (injected)
        settings: Application settings (injected)
    
    Returns:
        PredictionResponse, or an error envelope
    """
    body = await request.body()
    try:
        payload = PredictRequest.model_validate_json(body)
    except PydanticValidationError as exc:
        raise BadInputError(
            "Request body is not a JSON object with a string 'text'",
            details={"errors": exc.errors(include_url=False, include_input=False)},
        ) from exc
    
    outcome = await pipeline.run_async(payload.text, timeout=settings.SCORING_TIMEOUT_SECONDS)
    
    if not outcome.ok:
        logger.error(
            "Classification failed",
            extra={
                "failure": outcome.failure.value,
                "failed_at": outcome.failed_at.value,
                "error_type": type(outcome.error).__name__,
            },
        )
        return error_response(outcome.failure)
    
    await run_in_threadpool(
        dispatch_to_sink,
        sink,
        outcome.result,
        settings.PERSISTENCE_MODE,
        background_tasks,
    )
    
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=PredictionResponse.from_result(outcome.result).model_dump(),
    )


@router.get(
    "/",
    response_model=InfoResponse,
    response_model_by_alias=True,
    summary="Service metadata",
)
async def get_informations(
    settings: Settings = Depends(get_settings),
) -> InfoResponse:
    """
    Return author, version and application name.
    
    Args:
        settings: Application settings (injected)
    
    Returns:
        InfoResponse wrapping ServiceInfo
    """
    return InfoResponse(
        data=ServiceInfo(
            author=settings.APP_AUTHOR,
            version=settings.APP_VERSION,
            app_name=settings.APP_NAME,
        ),
    )

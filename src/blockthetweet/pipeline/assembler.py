"""
Prediction pipeline: tokenize, score, fingerprint, assemble.

One run per request:

    start --tokenize--> tokenized --score--> scored --hash+assemble--> done
      |                    |                   |
      +--> failed(bad_input)  +--> failed(inference_error)  +--> failed(internal_error)

Stage errors are converted into a PredictionOutcome at this boundary so the
HTTP layer branches on a failure kind instead of on exception types.
Nothing is retried here; retry policy belongs to the caller.
"""

import asyncio
import contextvars
import functools
from typing import Optional

import structlog

from blockthetweet.models.enums import FailureKind, PipelineState
from blockthetweet.models.prediction import PredictionOutcome, PredictionResult
from blockthetweet.monitoring.metrics import (
    pipeline_failures_total,
    predictions_total,
    unknown_token_ratio,
)
from blockthetweet.preprocessing.hashing import ContentHasher
from blockthetweet.preprocessing.tokenizer import Tokenizer
from blockthetweet.scoring.base_scorer import BaseScorer
from blockthetweet.scoring.exceptions import InferenceTimeoutError

logger = structlog.get_logger(__name__)


class PredictionPipeline:
    """
    Orchestrates one prediction from raw text to PredictionResult.
    
    Built once at startup and shared by all requests. It holds no per-request
    state; the components it wraps decide their own sharing discipline
    (read-only vocabulary, per-thread stemmer, serialized model).
    """
    
    def __init__(
        self,
        tokenizer: Tokenizer,
        scorer: BaseScorer,
        hasher: ContentHasher,
        sequence_length: int,
    ):
        """
        Initialize pipeline.
        
        Args:
            tokenizer: Text to id sequence converter
            scorer: Scoring model
            hasher: Content fingerprinting
            sequence_length: Fixed model input length
        """
        self.tokenizer = tokenizer
        self.scorer = scorer
        self.hasher = hasher
        self.sequence_length = sequence_length
        
        logger.info(
            "PredictionPipeline initialized",
            scorer=repr(scorer),
            sequence_length=sequence_length,
        )
    
    def run(self, text: str) -> PredictionOutcome:
        """
        Run the pipeline synchronously.
        
        Args:
            text: Raw input text
        
        Returns:
            PredictionOutcome in state DONE or FAILED
        """
        return self._record(text, self._execute(text, _Progress()))
    
    async def run_async(self, text: str, timeout: Optional[float] = None) -> PredictionOutcome:
        """
        Run the pipeline on the default executor, optionally time-bounded.
        
        On timeout the caller stops waiting and gets an inference failure;
        the worker thread finishes its forward pass in the background and
        its late result is discarded without being counted or logged.
        
        Args:
            text: Raw input text
            timeout: Maximum seconds to wait, or None to wait indefinitely
        """
        loop = asyncio.get_running_loop()
        progress = _Progress()
        # Carry structlog context vars (request_id) into the worker thread
        context = contextvars.copy_context()
        future = loop.run_in_executor(
            None, functools.partial(context.run, self._execute, text, progress)
        )
        
        if timeout is None:
            return self._record(text, await future)
        
        try:
            outcome = await asyncio.wait_for(future, timeout)
        except asyncio.TimeoutError:
            error = InferenceTimeoutError(
                f"Prediction exceeded {timeout}s",
                details={"timeout_seconds": timeout, "stage": progress.state.value},
            )
            outcome = PredictionOutcome.failed(
                FailureKind.INFERENCE_ERROR,
                progress.state,
                error=error,
                word_count=progress.word_count,
                unknown_words=progress.unknown_words,
            )
        return self._record(text, outcome)
    
    def _execute(self, text: str, progress: "_Progress") -> PredictionOutcome:
        # Stage 1: tokenize
        try:
            tokens = self.tokenizer.analyze(text, self.sequence_length)
        except Exception as e:
            return PredictionOutcome.failed(FailureKind.BAD_INPUT, PipelineState.START, error=e)
        
        word_count, unknown_words = tokens.word_count, tokens.unknown_words
        progress.advance(PipelineState.TOKENIZED, word_count, unknown_words)
        if word_count:
            unknown_token_ratio.observe(unknown_words / word_count)
        
        # Stage 2: score
        try:
            score = self.scorer.score(tokens.sequence)
        except Exception as e:
            return PredictionOutcome.failed(
                FailureKind.INFERENCE_ERROR,
                PipelineState.TOKENIZED,
                error=e,
                word_count=word_count,
                unknown_words=unknown_words,
            )
        progress.advance(PipelineState.SCORED, word_count, unknown_words)
        
        # Stage 3: fingerprint and assemble
        try:
            result = PredictionResult(
                text=text,
                text_hash=self.hasher.hash(text),
                confidence=score.confidence,
                latency_ns=score.latency_ns,
            )
        except Exception as e:
            return PredictionOutcome.failed(
                FailureKind.INTERNAL_ERROR,
                PipelineState.SCORED,
                error=e,
                word_count=word_count,
                unknown_words=unknown_words,
            )
        
        return PredictionOutcome.done(result, word_count=word_count, unknown_words=unknown_words)
    
    def _record(self, text: str, outcome: PredictionOutcome) -> PredictionOutcome:
        """Count and log a finished run. Called once per answered request."""
        if outcome.ok:
            result = outcome.result
            predictions_total.labels(status="success").inc()
            logger.info(
                "Prediction completed",
                text=text,
                text_hash=result.text_hash,
                confidence=result.confidence,
                latency_ns=result.latency_ns,
                word_count=outcome.word_count,
                unknown_words=outcome.unknown_words,
            )
            return outcome
        
        failure = outcome.failure
        predictions_total.labels(status=failure.value).inc()
        pipeline_failures_total.labels(kind=failure.value, stage=outcome.failed_at.value).inc()
        
        log = logger.warning if failure is FailureKind.BAD_INPUT else logger.error
        log(
            "Prediction failed",
            text=text,
            failure=failure.value,
            failed_at=outcome.failed_at.value,
            error_type=type(outcome.error).__name__,
            error=str(outcome.error),
        )
        return outcome


class _Progress:
    """Last stage a run reached. Written by the worker, read on timeout."""
    
    def __init__(self):
        self.state = PipelineState.START
        self.word_count = 0
        self.unknown_words = 0
    
    def advance(self, state: PipelineState, word_count: int, unknown_words: int) -> None:
        self.word_count = word_count
        self.unknown_words = unknown_words
        self.state = state

"""
TorchScript scoring model.

Loads a serialized ``torch.jit`` module (e.g. the BiLSTM tweet classifier)
and runs it on CPU. The model receives an int64 tensor of shape (1, L) and
must return a tensor holding exactly one element, read as the confidence.
"""

import math
import threading
import time
from contextlib import nullcontext
from pathlib import Path
from typing import Sequence

import structlog
import torch

from blockthetweet.monitoring.metrics import model_latency_seconds
from blockthetweet.scoring.base_scorer import BaseScorer, ScoreResult
from blockthetweet.scoring.exceptions import ScoringError, ScoringModelLoadError

logger = structlog.get_logger(__name__)


class TorchScriptScorer(BaseScorer):
    """
    Scorer backed by a TorchScript module.
    
    When ``serialize`` is true, forward passes are run one at a time under a
    lock. TorchScript modules may keep internal buffers between calls, and
    torch already parallelizes inside a single forward pass.
    """
    
    def __init__(self, module: torch.jit.ScriptModule, serialize: bool = True, name: str = "model"):
        """
        Initialize scorer around an already loaded module.
        
        Args:
            module: TorchScript module
            serialize: Run at most one forward pass at a time
            name: Label used in logs and metrics
        """
        self.module = module
        self.module.eval()
        self.name = name
        self._lock = threading.Lock() if serialize else None
    
    @classmethod
    def from_file(cls, path: str | Path, serialize: bool = True) -> "TorchScriptScorer":
        """
        Load a TorchScript archive from disk.
        
        Raises:
            ScoringModelLoadError: If the file is missing or not a TorchScript archive
        """
        path = Path(path)
        if not path.is_file():
            raise ScoringModelLoadError(
                "Model file not found",
                details={"path": str(path)},
            )
        
        try:
            module = torch.jit.load(str(path), map_location="cpu")
        except (RuntimeError, ValueError) as e:
            raise ScoringModelLoadError(
                "Failed to load TorchScript model",
                details={"path": str(path), "error": str(e)[:500]},
            ) from e
        
        logger.info("Scoring model loaded", path=str(path), serialize=serialize)
        return cls(module, serialize=serialize, name=path.stem)
    
    def score(self, sequence: Sequence[int]) -> ScoreResult:
        """
        Run one forward pass.
        
        Only the forward call is timed; tensor construction and output
        conversion are excluded.
        
        Raises:
            ScoringError: On any runtime fault or a non-scalar/non-finite output
        """
        try:
            input_tensor = torch.tensor(list(sequence), dtype=torch.long).unsqueeze(0)
        except (TypeError, ValueError, RuntimeError) as e:
            raise ScoringError(
                "Cannot build input tensor",
                details={"error": str(e)},
            ) from e
        
        guard = self._lock if self._lock is not None else nullcontext()
        try:
            with guard, torch.inference_mode():
                start = time.perf_counter_ns()
                output = self.module(input_tensor)
                latency_ns = time.perf_counter_ns() - start
        except Exception as e:
            model_latency_seconds.labels(model=self.name, success="false").observe(0)
            logger.error("Forward pass failed", model=self.name, error_type=type(e).__name__)
            raise ScoringError(
                "Model forward pass failed",
                details={"error_type": type(e).__name__, "error": str(e)[:500]},
            ) from e
        
        confidence = self._read_confidence(output)
        model_latency_seconds.labels(model=self.name, success="true").observe(latency_ns / 1e9)
        
        return ScoreResult(confidence=confidence, latency_ns=latency_ns)
    
    def _read_confidence(self, output: object) -> float:
        if not isinstance(output, torch.Tensor):
            raise ScoringError(
                "Model output is not a tensor",
                details={"output_type": type(output).__name__},
            )
        if output.numel() != 1:
            raise ScoringError(
                "Model output must hold exactly one element",
                details={"shape": list(output.shape)},
            )
        
        confidence = float(output.item())
        if not math.isfinite(confidence):
            raise ScoringError(
                "Model output is not finite",
                details={"confidence": str(confidence)},
            )
        return confidence
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, serialize={self._lock is not None})"

"""Prometheus metrics for the inference service."""

from blockthetweet.monitoring.metrics import (
    model_latency_seconds,
    pipeline_failures_total,
    predictions_total,
    sink_writes_total,
    unknown_token_ratio,
)

__all__ = [
    "model_latency_seconds",
    "pipeline_failures_total",
    "predictions_total",
    "sink_writes_total",
    "unknown_token_ratio",
]

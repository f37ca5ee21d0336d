"""Custom Prometheus metrics for the inference service.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- pipeline_failures_total (inference errors indicate a broken model or OOM)
- unknown_token_ratio (a rising ratio indicates vocabulary drift)
- sink_writes_total{success="false"} (persistence backend unavailable)
"""

from prometheus_client import Counter, Histogram

# === Request Metrics ===

predictions_total = Counter(
    "predictions_total",
    "Total prediction requests by outcome",
    ["status"],
)
"""
Prediction requests by outcome.

Labels:
- status: success, bad_input, inference_error, internal_error
"""

pipeline_failures_total = Counter(
    "pipeline_failures_total",
    "Total pipeline failures by failure kind and stage",
    ["kind", "stage"],
)

# === Model Performance Metrics ===

model_latency_seconds = Histogram(
    "model_latency_seconds",
    "Scoring model forward pass latency in seconds",
    ["model", "success"],
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 1.0],
)
"""
Forward pass latency. Excludes tokenization and serialization.

Buckets sized for a small recurrent model on CPU (sub-millisecond to 1s).
"""

# === Input Quality Metrics ===

unknown_token_ratio = Histogram(
    "unknown_token_ratio",
    "Share of words per request that are missing from the vocabulary",
    buckets=[0.0, 0.1, 0.2, 0.3, 0.5, 0.7, 0.9, 1.0],
)

# === Persistence Metrics ===

sink_writes_total = Counter(
    "sink_writes_total",
    "Prediction sink writes by outcome",
    ["sink", "success"],
)

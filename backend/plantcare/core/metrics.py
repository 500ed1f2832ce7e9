"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

validation_results = Counter(
    'validation_results_total',
    'Request body validation outcomes',
    ['entity', 'result']  # result: valid, invalid
)

def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )

def record_validation(entity: str, valid: bool):
    """Record one validator outcome for an entity (plant, post, event, ...)."""
    result = "valid" if valid else "invalid"
    validation_results.labels(entity=entity, result=result).inc()

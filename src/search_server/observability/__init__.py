"""Observability module for OpenTelemetry-aligned tracing, metrics, and logging."""

from search_server.observability.context import get_trace_context, trace_context
from search_server.observability.logging import JsonFormatter, configure_logging
from search_server.observability.metrics import (
    INDEX_DOC_COUNT,
    INDEX_OPERATIONS,
    SEARCH_LATENCY,
    SEARCH_REQUESTS,
    get_metrics,
    init_metrics,
    track_latency,
)
from search_server.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "INDEX_DOC_COUNT",
    "INDEX_OPERATIONS",
    "SEARCH_LATENCY",
    "SEARCH_REQUESTS",
    "JsonFormatter",
    "configure_logging",
    "create_span",
    "get_metrics",
    "get_trace_context",
    "get_tracer",
    "init_metrics",
    "init_tracing",
    "trace_context",
    "track_latency",
]

"""Trace ids for log correlation.

Inside an active OpenTelemetry span the span's own ids win; outside one a
per-context fallback pair is generated once and reused.
"""

from __future__ import annotations

from contextvars import ContextVar
from uuid import uuid4

from opentelemetry import trace


trace_context: ContextVar[dict | None] = ContextVar("trace_context", default=None)


def get_trace_context() -> dict:
    """Get current trace context with trace_id and span_id."""
    span_ctx = trace.get_current_span().get_span_context()
    if span_ctx.is_valid:
        return {"trace_id": format(span_ctx.trace_id, "032x"), "span_id": format(span_ctx.span_id, "016x")}

    ctx = trace_context.get()
    if ctx is None or not ctx.get("trace_id"):
        ctx = {"trace_id": uuid4().hex, "span_id": uuid4().hex[:16]}
        trace_context.set(ctx)
    return ctx

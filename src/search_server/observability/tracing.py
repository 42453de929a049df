"""OpenTelemetry tracing for index and search operations.

Every span is internal: the search core runs in-process, so there is no
client or server side to mark.
"""

from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import Status, StatusCode


if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.trace import Span, Tracer

logger = logging.getLogger(__name__)

TRACER_NAME = "search_server"

_state: dict[str, TracerProvider | None] = {"provider": None}


def init_tracing(service_name: str = "search-server") -> TracerProvider:
    """Install an SDK tracer provider, reusing one that is already global."""
    current = trace.get_tracer_provider()
    if isinstance(current, TracerProvider):
        provider = current
    else:
        provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
        trace.set_tracer_provider(provider)
        logger.info("Tracing initialized for service: %s", service_name)
    _state["provider"] = provider
    return provider


def get_tracer() -> Tracer:
    provider = _state["provider"] or init_tracing()
    return provider.get_tracer(TRACER_NAME)


@contextmanager
def create_span(name: str, attributes: dict[str, Any] | None = None) -> Generator[Span, None, None]:
    """Open an internal span; a failure marks it as an error and propagates."""
    with get_tracer().start_as_current_span(
        name,
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, f"{type(exc).__name__}: {exc}"))
            raise

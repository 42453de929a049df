"""Search service orchestration layer.

Wraps the SearchServer core with logging, metrics, tracing and the request
queue. The core itself stays silent; failures are logged here and re-raised
unchanged.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
import logging

from search_server.config import Settings
from search_server.domain.model import Document, DocumentStatus
from search_server.observability.logging import configure_logging
from search_server.observability.metrics import (
    INDEX_DOC_COUNT,
    INDEX_OPERATIONS,
    SEARCH_LATENCY,
    SEARCH_REQUESTS,
    track_latency,
)
from search_server.observability.tracing import create_span
from search_server.search.exceptions import SearchServerError
from search_server.search.server import SearchServer
from search_server.search.tfidf_engine import DocumentPredicate
from search_server.service_layer.request_queue import RequestQueue


logger = logging.getLogger(__name__)


def configure_observability(settings: Settings) -> None:
    """Apply the logging settings to the root logger."""
    configure_logging(level=settings.log_level, json_output=settings.log_json)


class SearchService:
    """High-level search orchestration service.

    Coordinates document ingestion and ranked search over a single in-memory
    index, and keeps the rolling no-result count.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        search_server: SearchServer | None = None,
        index_name: str = "default",
    ):
        """Initialize search service with dependencies.

        Args:
            settings: Configuration; loaded from the environment when omitted
            search_server: Prebuilt index; built from ``settings`` when omitted
            index_name: Label used for the document count gauge
        """
        self.settings = settings or Settings()
        self.search_server = search_server or SearchServer(
            self.settings.get_stop_words(),
            max_result_document_count=self.settings.max_result_document_count,
            relevance_tolerance=self.settings.relevance_tolerance,
        )
        self.request_queue = RequestQueue(self.search_server, self.settings.request_window_size)
        self.index_name = index_name

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """Add a document, logging and re-raising any rejection."""

        with create_span("index.add_document", attributes={"document.id": document_id}):
            try:
                self.search_server.add_document(document_id, document, status, ratings)
            except SearchServerError as exc:
                logger.warning("Failed to add document %s: %s", document_id, exc)
                INDEX_OPERATIONS.labels(operation="add", status="error").inc()
                raise

        INDEX_OPERATIONS.labels(operation="add", status="ok").inc()
        self._update_document_gauge()
        logger.debug("Document %s added (%d live)", document_id, self.search_server.document_count())

    def remove_document(self, document_id: int) -> None:
        with create_span("index.remove_document", attributes={"document.id": document_id}):
            live = document_id in self.search_server
            self.search_server.remove_document(document_id)

        INDEX_OPERATIONS.labels(operation="remove", status="ok" if live else "noop").inc()
        self._update_document_gauge()
        if live:
            logger.debug("Document %s removed", document_id)

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: DocumentPredicate | DocumentStatus | None = None,
    ) -> list[Document]:
        """Execute a ranked search and record its outcome in the request queue."""

        with (
            create_span("search.find_top_documents", attributes={"search.query": raw_query}) as span,
            track_latency(SEARCH_LATENCY, operation="find_top_documents"),
        ):
            try:
                documents = self.request_queue.add_find_request(raw_query, document_predicate)
            except SearchServerError as exc:
                logger.warning("Search for %r failed: %s", raw_query, exc)
                SEARCH_REQUESTS.labels(outcome="error").inc()
                raise
            span.set_attribute("search.result_count", len(documents))

        SEARCH_REQUESTS.labels(outcome="hit" if documents else "empty").inc()
        logger.debug("Search completed: %d results for %r", len(documents), raw_query)
        return documents

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        with (
            create_span("search.match_document", attributes={"document.id": document_id}),
            track_latency(SEARCH_LATENCY, operation="match_document"),
        ):
            try:
                return self.search_server.match_document(raw_query, document_id)
            except SearchServerError as exc:
                logger.warning("Match of %r against document %s failed: %s", raw_query, document_id, exc)
                raise

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        return self.search_server.get_word_frequencies(document_id)

    def document_count(self) -> int:
        return self.search_server.document_count()

    def no_result_count(self) -> int:
        return self.request_queue.no_result_count()

    def __iter__(self) -> Iterator[int]:
        return iter(self.search_server)

    def _update_document_gauge(self) -> None:
        INDEX_DOC_COUNT.labels(index=self.index_name).set(self.search_server.document_count())

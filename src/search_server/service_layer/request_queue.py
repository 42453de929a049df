"""Rolling record of search outcomes used to count no-result requests."""

from __future__ import annotations

from collections import deque

from search_server.domain.model import Document, DocumentStatus
from search_server.search.server import SearchServer
from search_server.search.tfidf_engine import DocumentPredicate


# One request per minute over a day
MIN_IN_DAY = 1440


class RequestQueue:
    """Track the outcome of the last ``window_size`` find requests."""

    def __init__(self, search_server: SearchServer, window_size: int = MIN_IN_DAY) -> None:
        if window_size < 1:
            raise ValueError(f"window_size must be positive, got {window_size}")
        self.search_server = search_server
        self.window_size = window_size
        self._requests: deque[bool] = deque(maxlen=window_size)
        self._no_result_requests = 0

    def add_find_request(
        self,
        raw_query: str,
        document_predicate: DocumentPredicate | DocumentStatus | None = None,
    ) -> list[Document]:
        """Run the query on the server and record whether it found anything.

        A query the server rejects raises before anything is recorded.
        """

        documents = self.search_server.find_top_documents(raw_query, document_predicate)
        self.notify(bool(documents))
        return documents

    def notify(self, had_results: bool) -> None:
        if len(self._requests) == self.window_size and not self._requests[0]:
            self._no_result_requests -= 1
        self._requests.append(had_results)
        if not had_results:
            self._no_result_requests += 1

    def no_result_count(self) -> int:
        return self._no_result_requests

    def get_no_result_requests(self) -> int:
        return self.no_result_count()

    def __len__(self) -> int:
        return len(self._requests)

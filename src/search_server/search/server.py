"""Search server - deep module over the index, parser and ranking engine.

Hides tokenization, stop-word filtering, both index directions and TF-IDF
ranking behind a small interface:

- add_document / remove_document mutate the index atomically
- find_top_documents returns the best ranked documents for a query
- match_document reports which query words a single document contains

The server never logs; every failure is raised as a typed error from
``search_server.search.exceptions``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from search_server.domain.model import Document, DocumentStatus
from search_server.search.analyzers import StopWords
from search_server.search.document_index import DocumentIndex
from search_server.search.query import Query, parse_query
from search_server.search.tfidf_engine import (
    MAX_RESULT_DOCUMENT_COUNT,
    RELEVANCE_TOLERANCE,
    DocumentPredicate,
    TfidfSearchEngine,
)


class SearchServer:
    """In-process TF-IDF document index."""

    def __init__(
        self,
        stop_words: str | Iterable[str] | StopWords = (),
        *,
        max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT,
        relevance_tolerance: float = RELEVANCE_TOLERANCE,
    ) -> None:
        """Initialize an empty index.

        Args:
            stop_words: Space separated string or collection of words to ignore
            max_result_document_count: Cap on results from find_top_documents
            relevance_tolerance: Relevance gap under which rating breaks ties

        Raises:
            InvalidArgumentError: if any stop word contains control characters
        """
        self.stop_words = stop_words if isinstance(stop_words, StopWords) else StopWords(stop_words)
        self._index = DocumentIndex(self.stop_words)
        self._engine = TfidfSearchEngine(
            self._index,
            max_results=max_result_document_count,
            tolerance=relevance_tolerance,
        )

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        self._index.add_document(document_id, document, status, ratings)

    def remove_document(self, document_id: int) -> None:
        self._index.remove_document(document_id)

    def parse_query(self, raw_query: str) -> Query:
        return parse_query(raw_query, self.stop_words)

    def find_top_documents(
        self,
        raw_query: str,
        document_predicate: DocumentPredicate | DocumentStatus | None = None,
    ) -> list[Document]:
        """Return the top ranked documents for ``raw_query``.

        Args:
            raw_query: Plus-words and ``-``prefixed minus-words separated by spaces
            document_predicate: ``(document_id, status, rating) -> bool`` filter,
                a DocumentStatus to match exactly, or None for ACTUAL documents

        Raises:
            InvalidArgumentError: if the query is malformed
        """
        query = self.parse_query(raw_query)
        return self._engine.score(query, _resolve_predicate(document_predicate))

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """Return the sorted plus-words found in the document and its status.

        A minus-word present in the document empties the matched words.

        Raises:
            InvalidArgumentError: if the query is malformed
            NotFoundError: if ``document_id`` is not live
        """
        query = self.parse_query(raw_query)
        status = self._index.get_document_data(document_id).status
        word_freqs = self._index.get_word_frequencies(document_id)

        if any(word in word_freqs for word in query.minus_words):
            return [], status
        return sorted(word for word in query.plus_words if word in word_freqs), status

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Raises NotFoundError for ids that are not live."""
        return self._index.get_word_frequencies(document_id)

    def document_count(self) -> int:
        return self._index.document_count()

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._index

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)


def _resolve_predicate(document_predicate: DocumentPredicate | DocumentStatus | None) -> DocumentPredicate:
    if document_predicate is None:
        document_predicate = DocumentStatus.ACTUAL
    if isinstance(document_predicate, DocumentStatus):
        wanted = document_predicate
        return lambda _document_id, status, _rating: status == wanted
    if callable(document_predicate):
        return document_predicate
    raise TypeError(f"Expected a predicate or DocumentStatus, got {type(document_predicate).__name__}")

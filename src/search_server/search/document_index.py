"""In-memory document store with paired inverted and forward indices.

The inverted index (word -> doc -> tf) drives ranking, the forward index
(doc -> word -> tf) drives removal and matching. Both are only mutated inside
``add_document`` and ``remove_document`` so every (word, doc, tf) triple is
present in both or in neither.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from search_server.domain.model import DocumentStatus
from search_server.search.analyzers import AnalyzerPipeline, StopWords, build_document_analyzer
from search_server.search.exceptions import InvalidArgumentError, NotFoundError
from search_server.search.stats import compute_average_rating, compute_term_frequencies


_EMPTY_FREQUENCIES: Mapping[str, float] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class DocumentData:
    """Metadata stored for every live document."""

    rating: int
    status: DocumentStatus


class DocumentIndex:
    """Owns document metadata, live ids and both index directions."""

    def __init__(self, stop_words: StopWords, analyzer: AnalyzerPipeline | None = None) -> None:
        self.stop_words = stop_words
        self._analyzer = analyzer or build_document_analyzer(stop_words)
        # insertion ordered, doubles as the live id set
        self._documents: dict[int, DocumentData] = {}
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._document_to_word_freqs: dict[int, dict[str, float]] = {}

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        """Index ``text`` under ``document_id``.

        Every check runs before the first mutation, so a rejected document
        leaves the index untouched.

        Raises:
            InvalidArgumentError: negative or already live id, or text with
                control characters
        """

        if document_id < 0:
            raise InvalidArgumentError(f"Document id {document_id} is negative")
        if document_id in self._documents:
            raise InvalidArgumentError(f"Document id {document_id} is already indexed")

        try:
            status = DocumentStatus(status)
        except ValueError:
            raise InvalidArgumentError(f"Unknown document status {status!r}") from None

        words = self._analyzer(text)
        frequencies = compute_term_frequencies(words)
        data = DocumentData(rating=compute_average_rating(ratings), status=status)

        self._documents[document_id] = data
        self._document_to_word_freqs[document_id] = frequencies
        for word, term_freq in frequencies.items():
            self._word_to_document_freqs.setdefault(word, {})[document_id] = term_freq

    def remove_document(self, document_id: int) -> None:
        """Drop ``document_id`` from every structure; unknown ids are ignored."""

        if document_id not in self._documents:
            return

        for word in self._document_to_word_freqs.pop(document_id):
            postings = self._word_to_document_freqs[word]
            del postings[document_id]
            if not postings:
                del self._word_to_document_freqs[word]
        del self._documents[document_id]

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        """Return a read-only view of the document's word frequencies.

        Raises:
            NotFoundError: if ``document_id`` is not live
        """

        try:
            frequencies = self._document_to_word_freqs[document_id]
        except KeyError:
            raise NotFoundError(document_id) from None
        return MappingProxyType(frequencies) if frequencies else _EMPTY_FREQUENCIES

    def get_document_data(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise NotFoundError(document_id) from None

    def get_postings(self, word: str) -> Mapping[int, float]:
        """Return doc id -> tf for ``word``, empty when no live document has it."""

        postings = self._word_to_document_freqs.get(word)
        return MappingProxyType(postings) if postings else _EMPTY_FREQUENCIES

    def document_frequency(self, word: str) -> int:
        return len(self._word_to_document_freqs.get(word, ()))

    def has_word(self, word: str) -> bool:
        return word in self._word_to_document_freqs

    def vocabulary(self) -> frozenset[str]:
        return frozenset(self._word_to_document_freqs)

    def document_count(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[int]:
        return iter(self._documents)
